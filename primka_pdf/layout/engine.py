"""
Page layout engine for the receipt table.

The engine walks the selected records top-down:

- every page starts with the full header block (company, title, receipt
  metadata, column headers);
- each record becomes one table row whose height is the tallest wrapped cell,
  floored at the minimum row height;
- a row that would cross `page height - footer margin` moves to a new page;
- a bold "UKUPNO" row with both sums closes the table.

Drawing state is an explicit `LayoutContext` value: every step takes a context
and returns a new one, so the algorithm can be driven and inspected with a fake
canvas and measurer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from typing import List, Sequence, Tuple

from ..config.settings import CompanyInfo, PageGeometry, TableStyle
from ..domain.errors import EmptySelectionError
from ..domain.record import Record
from ..fields.number_format import format_decimal2, format_fixed2, format_integer, normalize_decimal
from ..fields.text_wrap import wrap
from .columns import COLUMNS, ITEM_NAME_COLUMN, TOTAL_PRICE_COLUMN, TOTAL_VALUE_COLUMN, ColumnSpec, column_widths
from .measure import FontSet, Measurer, bind
from .pdf_canvas import Canvas

logger = logging.getLogger(__name__)

TOTALS_LABEL = "UKUPNO"

# Vertical advances of the header block
_LINE_GAP = 12.0
_BLOCK_GAP = 16.0
_TITLE_GAP = 14.0

# Metadata label -> x offset of its value
_DATE_OFFSET = 60.0
_NUMBER_OFFSET = 90.0
_SUPPLIER_OFFSET = 80.0
_INVOICE_OFFSET = 140.0


class LayoutState(Enum):
    NO_PAGE = "no_page"
    PAGE_OPEN = "page_open"
    DONE = "done"


@dataclass(frozen=True)
class LayoutContext:
    state: LayoutState = LayoutState.NO_PAGE
    page_number: int = 0
    cursor_y: float = 0.0
    # Data rows drawn on each page, in page order
    row_counts: Tuple[int, ...] = ()


@dataclass(frozen=True)
class ReceiptTotals:
    total_price: Decimal = Decimal("0")
    total_value: Decimal = Decimal("0")

    @property
    def total_price_text(self) -> str:
        return format_decimal2(self.total_price)

    @property
    def total_value_text(self) -> str:
        return format_decimal2(self.total_value)


@dataclass(frozen=True)
class LayoutResult:
    page_count: int
    row_counts: Tuple[int, ...]
    totals: ReceiptTotals
    header_bottom: float = 0.0
    context: LayoutContext = field(default_factory=LayoutContext)


def compute_totals(records: Sequence[Record]) -> ReceiptTotals:
    """Sum total price and total value; unparsable cells count as 0."""
    zero = Decimal("0")
    return ReceiptTotals(
        total_price=sum((normalize_decimal(r.total_price) or zero for r in records), zero),
        total_value=sum((normalize_decimal(r.total_value) or zero for r in records), zero),
    )


def row_cells(record: Record) -> List[str]:
    """Display values of one record, in column order."""
    return [
        format_integer(record.item_code),
        record.item_name,
        f"{record.unit} / {format_fixed2(record.price_per_unit)}",
        format_integer(record.quantity),
        format_fixed2(record.total_price),
        format_fixed2(record.total_value),
    ]


def totals_cells(totals: ReceiptTotals, width: int = len(COLUMNS)) -> List[str]:
    cells = [""] * width
    cells[ITEM_NAME_COLUMN] = TOTALS_LABEL
    cells[TOTAL_PRICE_COLUMN] = totals.total_price_text
    cells[TOTAL_VALUE_COLUMN] = totals.total_value_text
    return cells


class PageLayoutEngine:
    """Draws one receipt document onto a canvas, page by page."""

    def __init__(
        self,
        canvas: Canvas,
        measurer: Measurer,
        receipt_number: str,
        header_record: Record,
        geometry: PageGeometry = PageGeometry(),
        style: TableStyle = TableStyle(),
        company: CompanyInfo = CompanyInfo(),
        fonts: FontSet = FontSet(),
        columns: Sequence[ColumnSpec] = COLUMNS,
    ):
        self.canvas = canvas
        self.measurer = measurer
        self.receipt_number = receipt_number
        self.header_record = header_record
        self.geometry = geometry
        self.style = style
        self.company = company
        self.fonts = fonts
        self.columns = tuple(columns)
        self.widths = column_widths(self.columns, geometry.usable_width)

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------
    def _font(self, bold: bool) -> str:
        return self.fonts.bold if bold else self.fonts.regular

    def _lines(self, text: str, width: float, bold: bool = False) -> List[str]:
        return wrap(text, width, bind(self.measurer, self._font(bold), self.style.text_size))

    def _draw_lines(self, lines: Sequence[str], x: float, y: float, bold: bool = False, align: str = "left") -> None:
        for i, line in enumerate(lines):
            self.canvas.draw_text(
                line, x, y + i * self.style.line_height, self._font(bold), self.style.text_size, align
            )

    def _cell_height(self, text: str, width: float, bold: bool = False) -> float:
        pad = self.style.cell_padding
        return len(self._lines(text, width - 2 * pad, bold)) * self.style.line_height + 2 * pad

    def row_height(self, cells: Sequence[str], bold: bool = False) -> float:
        """Tallest wrapped cell of the row, floored at the minimum row height."""
        heights = [self._cell_height(text, w, bold) for text, w in zip(cells, self.widths)]
        return max([self.style.min_row_height] + heights)

    def _draw_cells(self, cells: Sequence[str], y: float, height: float, bold: bool, aligned: bool = True) -> None:
        s = self.style
        x = self.geometry.side_margin
        for text, column, width in zip(cells, self.columns, self.widths):
            self.canvas.draw_rect(x, y, width, height)
            lines = self._lines(text, width - 2 * s.cell_padding, bold)
            align = column.align if aligned else "left"
            text_x = x + width - s.cell_padding if align == "right" else x + s.cell_padding
            self._draw_lines(lines, text_x, y + s.cell_padding + s.text_size, bold, align)
            x += width

    # ------------------------------------------------------------------
    # page lifecycle
    # ------------------------------------------------------------------
    def start_page(self, ctx: LayoutContext) -> LayoutContext:
        """Open the next page and draw the header block; the cursor ends below the column headers."""
        if ctx.state is not LayoutState.NO_PAGE:
            raise RuntimeError(f"Cannot start a page in state {ctx.state.value}")

        s, g, first = self.style, self.geometry, self.header_record
        number = ctx.page_number + 1
        self.canvas.begin_page(number)

        left = g.side_margin
        y = g.top_margin

        self.canvas.draw_text(self.company.name, left, y, self.fonts.bold, s.title_size)
        y += _LINE_GAP
        for line in self.company.address_lines:
            self.canvas.draw_text(line, left, y, self.fonts.regular, s.text_size)
            y += _LINE_GAP
        y += _BLOCK_GAP - _LINE_GAP

        title = f"PRIMKA {format_integer(self.receipt_number)}"
        title_w = self.measurer.width(title, self.fonts.bold, s.text_size)
        self.canvas.draw_text(title, (g.width - title_w) / 2, y, self.fonts.bold, s.text_size)
        y += _TITLE_GAP

        self.canvas.draw_text("Datum:", left, y, self.fonts.bold, s.text_size)
        self.canvas.draw_text(first.date, left + _DATE_OFFSET, y, self.fonts.regular, s.text_size)
        y += _LINE_GAP

        self.canvas.draw_text("Broj primke:", left, y, self.fonts.bold, s.text_size)
        self.canvas.draw_text(
            format_integer(first.receipt_number), left + _NUMBER_OFFSET, y, self.fonts.regular, s.text_size
        )
        y += _LINE_GAP

        self.canvas.draw_text("Dobavljač:", left, y, self.fonts.bold, s.text_size)
        lines = self._lines(first.supplier, s.supplier_width)
        self._draw_lines(lines, left + _SUPPLIER_OFFSET, y)
        y += max(_LINE_GAP, len(lines) * s.line_height + 2)

        self.canvas.draw_text("Broj ulaznog računa:", left, y, self.fonts.bold, s.text_size)
        lines = self._lines(first.invoice_number, s.invoice_width)
        self._draw_lines(lines, left + _INVOICE_OFFSET, y)
        y += max(_BLOCK_GAP, len(lines) * s.line_height + 6)

        labels = [c.label for c in self.columns]
        head_h = max(
            [s.header_row_height] + [self._cell_height(label, w, bold=True) for label, w in zip(labels, self.widths)]
        )
        self._draw_cells(labels, y, head_h, bold=True, aligned=False)
        y += head_h

        return replace(
            ctx,
            state=LayoutState.PAGE_OPEN,
            page_number=number,
            cursor_y=y,
            row_counts=ctx.row_counts + (0,),
        )

    def finish_page(self, ctx: LayoutContext) -> LayoutContext:
        if ctx.state is not LayoutState.PAGE_OPEN:
            raise RuntimeError(f"No open page to finish (state {ctx.state.value})")
        self.canvas.end_page()
        logger.debug("Page %d finished with %d rows", ctx.page_number, ctx.row_counts[-1])
        return replace(ctx, state=LayoutState.NO_PAGE)

    def _ensure_space(self, ctx: LayoutContext, height: float, footer_margin: float) -> LayoutContext:
        if ctx.state is LayoutState.NO_PAGE:
            return self.start_page(ctx)
        if ctx.cursor_y + height + footer_margin > self.geometry.height:
            return self.start_page(self.finish_page(ctx))
        return ctx

    # ------------------------------------------------------------------
    # rows
    # ------------------------------------------------------------------
    def emit_row(self, ctx: LayoutContext, cells: Sequence[str]) -> LayoutContext:
        """Draw one data row, moving to a new page first if it does not fit."""
        if ctx.state is LayoutState.DONE:
            raise RuntimeError("Document is already finished")
        height = self.row_height(cells)
        ctx = self._ensure_space(ctx, height, self.style.footer_margin)
        self._draw_cells(cells, ctx.cursor_y, height, bold=False)
        counts = ctx.row_counts[:-1] + (ctx.row_counts[-1] + 1,)
        return replace(ctx, cursor_y=ctx.cursor_y + height, row_counts=counts)

    def emit_totals(self, ctx: LayoutContext, totals: ReceiptTotals) -> LayoutContext:
        """Draw the bold UKUPNO row."""
        if ctx.state is LayoutState.DONE:
            raise RuntimeError("Document is already finished")
        cells = totals_cells(totals, len(self.columns))
        height = max(self.style.totals_row_height, self.row_height(cells, bold=True))
        ctx = self._ensure_space(ctx, height, self.style.totals_footer_margin)
        self._draw_cells(cells, ctx.cursor_y, height, bold=True)
        return replace(ctx, cursor_y=ctx.cursor_y + height)

    def finish(self, ctx: LayoutContext) -> LayoutContext:
        """Close the last page; the document cannot be drawn on afterwards."""
        if ctx.state is LayoutState.PAGE_OPEN:
            ctx = self.finish_page(ctx)
        return replace(ctx, state=LayoutState.DONE)


def layout_document(
    canvas: Canvas,
    measurer: Measurer,
    receipt_number: str,
    records: Sequence[Record],
    geometry: PageGeometry = PageGeometry(),
    style: TableStyle = TableStyle(),
    company: CompanyInfo = CompanyInfo(),
    fonts: FontSet = FontSet(),
) -> LayoutResult:
    """Lay out all records plus the totals row; returns page and row statistics."""
    if not records:
        raise EmptySelectionError(receipt_number)

    engine = PageLayoutEngine(
        canvas, measurer, receipt_number, records[0],
        geometry=geometry, style=style, company=company, fonts=fonts,
    )

    ctx = engine.start_page(LayoutContext())
    header_bottom = ctx.cursor_y

    for record in records:
        ctx = engine.emit_row(ctx, row_cells(record))

    totals = compute_totals(records)
    ctx = engine.emit_totals(ctx, totals)
    ctx = engine.finish(ctx)

    logger.debug("Laid out %d rows on %d page(s)", len(records), ctx.page_number)
    return LayoutResult(
        page_count=ctx.page_number,
        row_counts=ctx.row_counts,
        totals=totals,
        header_bottom=header_bottom,
        context=ctx,
    )
