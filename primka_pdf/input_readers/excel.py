"""
EXCEL READER
------------
Reads the first worksheet of an .xlsx workbook into Records.
Cells are rendered to display strings type-aware, with NO numeric coercion
beyond dropping the ".0" of integral numbers.

Date cells arrive from openpyxl as datetimes and are written as ISO dates
("2024-05-03"), not as spreadsheet serial numbers. Values with a time of day
keep their str() form.
"""

from __future__ import annotations

import io
import logging
import math
from datetime import datetime, time
from typing import Any, List

from openpyxl import load_workbook

from ..domain.errors import FormatError
from ..domain.record import Record
from .header import HeaderIndex

logger = logging.getLogger(__name__)


def cell_text(value: Any) -> str:
    """Render a cell value the way it should appear in a Record."""
    if value is None:
        return ""
    # bool before int/float: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return str(value)
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, datetime) and value.time() == time(0, 0):
        return value.date().isoformat()
    return str(value).strip()


def read_excel(data: bytes) -> List[Record]:
    """
    Parse a workbook where the first populated row = headers, following rows = data.

    Args:
        data: Raw .xlsx bytes

    Returns:
        Records in sheet row order (rows without any value are skipped)

    Raises:
        FormatError: If the file is empty, not a valid workbook, or has no header row
    """
    if not data:
        raise FormatError("Source file is empty")

    try:
        wb = load_workbook(io.BytesIO(data), data_only=True)
    except Exception as e:
        raise FormatError(f"Cannot read Excel file (is it corrupted or wrong format?): {e}") from e

    try:
        if not wb.worksheets:
            raise FormatError("Workbook contains no worksheets")
        ws = wb.worksheets[0]

        first_row = ws.min_row
        header_values = next(
            ws.iter_rows(min_row=first_row, max_row=first_row, values_only=True), ()
        )
        labels = [cell_text(v) for v in header_values]

        # Header span ends at the last populated header cell
        while labels and not labels[-1]:
            labels.pop()
        if not labels:
            raise FormatError("Header row cannot be read")

        header = HeaderIndex(labels)
        span = len(labels)

        records: List[Record] = []
        for values in ws.iter_rows(
            min_row=first_row + 1, max_row=ws.max_row, max_col=span, values_only=True
        ):
            if all(v in (None, "") for v in values):
                continue
            cells = [cell_text(v) for v in values]
            cells.extend([""] * (span - len(cells)))
            records.append(header.to_record(cells))
    finally:
        wb.close()

    logger.debug("XLSX: sheet %r, %d columns, %d data rows", ws.title, span, len(records))
    return records
