"""Error taxonomy shared by the readers, the pipeline and the sinks."""

from __future__ import annotations


class PrimkaError(RuntimeError):
    """Base class for all errors surfaced to the UI or CLI."""
    pass


class FormatError(PrimkaError):
    """Raised when a source is empty, has no readable header, or is not a valid workbook."""
    pass


class EmptySelectionError(PrimkaError):
    """Raised when no record matches the requested receipt number."""

    def __init__(self, receipt_number: str):
        super().__init__(f"No rows found for receipt number {receipt_number!r}")
        self.receipt_number = receipt_number


class SinkError(PrimkaError):
    """Raised when the finished document could not be persisted."""
    pass
