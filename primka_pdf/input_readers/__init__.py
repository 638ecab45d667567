"""
Source readers.

The two supported inputs form a closed set: delimited text and xlsx workbooks.
The caller picks the variant from the declared file name, never by sniffing the
content; both variants return the same ordered list of Records.
"""

from __future__ import annotations

from enum import Enum
from typing import List

from ..domain.record import Record
from .csv_reader import read_csv
from .excel import read_excel
from .header import HeaderIndex


class SourceFormat(Enum):
    DELIMITED = "delimited"
    WORKBOOK = "workbook"


def format_for_filename(name: str) -> SourceFormat:
    """`.xlsx` (any case) -> WORKBOOK, everything else -> DELIMITED."""
    if (name or "").strip().lower().endswith(".xlsx"):
        return SourceFormat.WORKBOOK
    return SourceFormat.DELIMITED


def parse_source(data: bytes, source_format: SourceFormat, delimiter: str = ",") -> List[Record]:
    """Parse raw bytes with the reader matching `source_format`."""
    if source_format is SourceFormat.WORKBOOK:
        return read_excel(data)
    return read_csv(data, delimiter=delimiter)


__all__ = [
    "HeaderIndex",
    "SourceFormat",
    "format_for_filename",
    "parse_source",
    "read_csv",
    "read_excel",
]
