"""
reportlab drawing backend.

The layout engine works in top-down page coordinates (y grows downward, like
the cursor it advances). `ReportLabCanvas` flips them into PDF space and keeps
the whole document in memory until `getvalue()`; nothing touches the disk here.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional, Protocol

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from ..config.settings import FontConfig, PageGeometry
from .measure import FontSet

logger = logging.getLogger(__name__)


class Canvas(Protocol):
    def begin_page(self, number: int) -> None:
        ...

    def draw_text(self, text: str, x: float, y: float, font: str, size: float, align: str = "left") -> None:
        ...

    def draw_rect(self, x: float, y: float, w: float, h: float) -> None:
        ...

    def end_page(self) -> None:
        ...


def _register_ttf_font(font_path: Optional[Path], fallback: str) -> str:
    if font_path is None:
        return fallback

    font_name = f"Primka-{font_path.stem}"
    if font_name in pdfmetrics.getRegisteredFontNames():
        return font_name

    try:
        pdfmetrics.registerFont(TTFont(font_name, str(font_path)))
    except Exception as exc:
        logger.warning("Failed to register PDF font %s from %s: %s", font_name, font_path, exc)
        return fallback
    return font_name


def register_fonts(fonts: FontConfig) -> FontSet:
    """Register the configured TTF pair; a font that cannot be loaded falls back to Helvetica."""
    return FontSet(
        regular=_register_ttf_font(fonts.regular_path, "Helvetica"),
        bold=_register_ttf_font(fonts.bold_path, "Helvetica-Bold"),
    )


class ReportLabCanvas:
    """Canvas implementation writing a PDF into an in-memory buffer."""

    def __init__(self, geometry: PageGeometry, title: str = ""):
        self.geometry = geometry
        self._buffer = io.BytesIO()
        self._cv = canvas.Canvas(self._buffer, pagesize=(geometry.width, geometry.height))
        if title:
            self._cv.setTitle(title)
        self._cv.setLineWidth(1)
        self._saved = False

    def _pdf_y(self, y: float) -> float:
        return self.geometry.height - y

    def begin_page(self, number: int) -> None:
        # reportlab opens pages implicitly; the number is informational
        logger.debug("PDF page %d started", number)

    def draw_text(self, text: str, x: float, y: float, font: str, size: float, align: str = "left") -> None:
        if not text:
            return
        self._cv.setFont(font, size)
        if align == "right":
            self._cv.drawRightString(x, self._pdf_y(y), text)
        elif align == "center":
            self._cv.drawCentredString(x, self._pdf_y(y), text)
        else:
            self._cv.drawString(x, self._pdf_y(y), text)

    def draw_rect(self, x: float, y: float, w: float, h: float) -> None:
        self._cv.rect(x, self._pdf_y(y + h), w, h, stroke=1, fill=0)

    def end_page(self) -> None:
        self._cv.showPage()

    def getvalue(self) -> bytes:
        """Finalize the document (once) and return the PDF bytes."""
        if not self._saved:
            self._cv.save()
            self._saved = True
        return self._buffer.getvalue()
