from .errors import EmptySelectionError, FormatError, PrimkaError, SinkError
from .record import RECORD_FIELDS, Record

__all__ = [
    "EmptySelectionError",
    "FormatError",
    "PrimkaError",
    "RECORD_FIELDS",
    "Record",
    "SinkError",
]
