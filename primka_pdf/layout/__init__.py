from .columns import COLUMNS, ColumnSpec, column_widths
from .engine import (
    LayoutContext,
    LayoutResult,
    LayoutState,
    PageLayoutEngine,
    ReceiptTotals,
    compute_totals,
    layout_document,
    row_cells,
)
from .measure import FontSet, Measurer, ReportLabMeasurer
from .pdf_canvas import Canvas, ReportLabCanvas, register_fonts

__all__ = [
    "COLUMNS",
    "Canvas",
    "ColumnSpec",
    "FontSet",
    "LayoutContext",
    "LayoutResult",
    "LayoutState",
    "Measurer",
    "PageLayoutEngine",
    "ReceiptTotals",
    "ReportLabCanvas",
    "ReportLabMeasurer",
    "column_widths",
    "compute_totals",
    "layout_document",
    "register_fonts",
    "row_cells",
]
