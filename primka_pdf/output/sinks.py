"""
Document sinks.

A sink receives a finished PDF (bytes) and persists it, returning a location
string. Sinks are only called once the whole document exists in memory.

`DirectorySink` writes via a temporary file and then replaces the target, so a
failed write never leaves a half-written PDF under the final name.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Protocol

from ..domain.errors import SinkError

logger = logging.getLogger(__name__)


def output_filename(receipt_number: str) -> str:
    return f"Primka_{receipt_number}.pdf"


class DocumentSink(Protocol):
    def save(self, filename: str, content: bytes) -> str:
        ...


class DirectorySink:
    """Persist documents into a directory on disk."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def save(self, filename: str, content: bytes) -> str:
        target = self.directory / filename
        tmp_path = target.with_suffix(target.suffix + ".tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(content)
            tmp_path.replace(target)
        except OSError as e:
            logger.error("Failed to write %s: %s", target, e)
            if tmp_path.exists():
                tmp_path.unlink()
            raise SinkError(f"Failed to save PDF to {target}: {e}") from e

        logger.info("Saved %s (%d bytes)", target, len(content))
        return str(target)


class MemorySink:
    """Keep documents in memory (used for browser downloads and tests)."""

    def __init__(self) -> None:
        self.documents: Dict[str, bytes] = {}

    def save(self, filename: str, content: bytes) -> str:
        self.documents[filename] = bytes(content)
        return filename
