"""
Text measurement.

The layout engine only needs one capability from the rendering backend: the
width of a string in a given font and size. `Measurer` is that seam; the
reportlab implementation reads the metrics of registered fonts, tests inject a
fixed-width fake.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

from reportlab.pdfbase import pdfmetrics


class Measurer(Protocol):
    def width(self, text: str, font: str, size: float) -> float:
        ...


@dataclass(frozen=True)
class FontSet:
    regular: str = "Helvetica"
    bold: str = "Helvetica-Bold"


class ReportLabMeasurer:
    """Measure strings with reportlab font metrics."""

    def width(self, text: str, font: str, size: float) -> float:
        return pdfmetrics.stringWidth(text, font, size)


def bind(measurer: Measurer, font: str, size: float) -> Callable[[str], float]:
    """Return a one-argument measure function for the text wrapper."""
    return lambda text: measurer.width(text, font, size)
