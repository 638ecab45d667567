"""
Receipt processing pipeline.

upload bytes -> Records -> selection by receipt number -> PDF bytes -> sink

Every failure is raised as a PrimkaError subclass before the next stage starts:
parsing and empty selections are detected before any drawing happens, and the
sink only ever sees a complete document.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .config.settings import AppSettings
from .domain.errors import EmptySelectionError, FormatError
from .domain.record import Record
from .input_readers import format_for_filename, parse_source
from .layout.engine import ReceiptTotals, layout_document
from .layout.measure import ReportLabMeasurer
from .layout.pdf_canvas import ReportLabCanvas, register_fonts
from .output.sinks import DocumentSink, output_filename

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"\D")


@dataclass(frozen=True)
class RenderedDocument:
    filename: str
    content: bytes
    page_count: int
    row_count: int
    totals: ReceiptTotals


def sanitize_receipt_number(text: Optional[str]) -> str:
    """Keep digits only, the way the receipt number field accepts input."""
    return _NON_DIGITS.sub("", text or "")


def load_records(
    data: bytes,
    filename: str,
    mime_type: Optional[str] = None,
    settings: Optional[AppSettings] = None,
) -> List[Record]:
    """Parse an uploaded spreadsheet; the file name suffix picks the reader."""
    settings = settings or AppSettings()

    size_mb = len(data or b"") / (1024 * 1024)
    if size_mb > settings.max_file_size_mb:
        raise FormatError(
            f"File is {size_mb:.1f} MB, limit is {settings.max_file_size_mb} MB"
        )

    source_format = format_for_filename(filename)
    logger.debug("Reading %s as %s (mime %s)", filename, source_format.value, mime_type or "unknown")

    records = parse_source(data, source_format, delimiter=settings.csv_delimiter)
    logger.info("Loaded %d rows from %s", len(records), filename)
    return records


def select_receipt(records: Sequence[Record], receipt_number: str) -> List[Record]:
    """Rows whose receipt number equals `receipt_number` exactly (string comparison)."""
    selected = [r for r in records if r.receipt_number == receipt_number]
    if not selected:
        raise EmptySelectionError(receipt_number)
    logger.info("Receipt %s: %d of %d rows selected", receipt_number, len(selected), len(records))
    return selected


def build_receipt_pdf(
    receipt_number: str,
    records: Sequence[Record],
    settings: Optional[AppSettings] = None,
) -> RenderedDocument:
    """Render the selected rows into an in-memory PDF."""
    if not records:
        raise EmptySelectionError(receipt_number)
    settings = settings or AppSettings()

    fonts = register_fonts(settings.fonts)
    canvas = ReportLabCanvas(settings.geometry, title=f"Primka {receipt_number}")
    result = layout_document(
        canvas,
        ReportLabMeasurer(),
        receipt_number,
        records,
        geometry=settings.geometry,
        style=settings.style,
        company=settings.company,
        fonts=fonts,
    )

    logger.info("Receipt %s rendered on %d page(s)", receipt_number, result.page_count)
    return RenderedDocument(
        filename=output_filename(receipt_number),
        content=canvas.getvalue(),
        page_count=result.page_count,
        row_count=len(records),
        totals=result.totals,
    )


def export_receipt(
    data: bytes,
    filename: str,
    receipt_number: str,
    sink: DocumentSink,
    settings: Optional[AppSettings] = None,
    mime_type: Optional[str] = None,
) -> Tuple[RenderedDocument, str]:
    """Run the whole pipeline and return the document with its saved location."""
    records = load_records(data, filename, mime_type=mime_type, settings=settings)
    selected = select_receipt(records, receipt_number)
    document = build_receipt_pdf(receipt_number, selected, settings)
    location = sink.save(document.filename, document.content)
    return document, location
