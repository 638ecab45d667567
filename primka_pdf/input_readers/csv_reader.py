"""
CSV READER
----------
Reads delimited text into Records. Row 1 = headers, rows 2+ = data.
Cells are trimmed but otherwise kept exactly as written. Lines whose cells are
all empty (",,,," exports included) are skipped.
"""

from __future__ import annotations

import csv
import io
import logging
from typing import List

from ..domain.errors import FormatError
from ..domain.record import Record
from .header import HeaderIndex

logger = logging.getLogger(__name__)


def read_csv(data: bytes, delimiter: str = ",") -> List[Record]:
    """
    Parse delimited text where row 1 = headers, rows 2+ = data.

    Args:
        data: Raw file bytes (UTF-8, optional BOM)
        delimiter: Field separator

    Returns:
        Records in source row order (empty list for a header-only file)

    Raises:
        FormatError: If the source is empty or cannot be decoded/tokenized
    """
    if not data or not data.strip():
        raise FormatError("Source file is empty")

    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise FormatError(f"Cannot decode delimited file as UTF-8: {e}") from e

    try:
        rows = list(csv.reader(io.StringIO(text, newline=""), delimiter=delimiter))
    except csv.Error as e:
        raise FormatError(f"Cannot tokenize delimited file: {e}") from e

    # Skip leading blank lines to find the header
    while rows and not any(cell.strip() for cell in rows[0]):
        rows.pop(0)
    if not rows:
        raise FormatError("Header row cannot be read")

    header = HeaderIndex(rows[0])

    records: List[Record] = []
    for raw in rows[1:]:
        if not any(cell.strip() for cell in raw):
            continue
        records.append(header.to_record([cell.strip() for cell in raw]))

    logger.debug("CSV: %d columns, %d data rows", len(header), len(records))
    return records
