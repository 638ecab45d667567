"""
Central configuration for page geometry, fonts, company header and safety limits.

This module defines:
- Default page geometry (landscape A4 in points) and table styling used by the layout engine.
- The company block printed at the top of every page.
- The bundled DejaVu Sans pair, which covers the Croatian letters of the labels.
- File size limits to prevent oversized uploads.
- `load_settings()`, which reads environment overrides (via dotenv) into an `AppSettings`.

Constants are plain values; the dataclasses are frozen so a settings object can be
shared by the UI and the CLI without being mutated mid-run.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv


OUTPUT_ROOT = Path.cwd() / "primka_outputs"

FONTS_DIR = Path(__file__).resolve().parent.parent / "fonts"
DEFAULT_FONT_REGULAR = FONTS_DIR / "DejaVuSans.ttf"
DEFAULT_FONT_BOLD = FONTS_DIR / "DejaVuSans-Bold.ttf"

MAX_FILE_SIZE_MB = 50

PAGE_WIDTH_PT = 842.0
PAGE_HEIGHT_PT = 595.0
SIDE_MARGIN_PT = 24.0
TOP_MARGIN_PT = 40.0

DEFAULT_COMPANY_NAME = "Metrax d.o.o."
DEFAULT_COMPANY_ADDRESS = ("Ivana Nepomuka Jemeršića 37D", "43290 Grubišno Polje")

DEFAULT_CSV_DELIMITER = ","

PDF_MIME_TYPE = "application/pdf"


@dataclass(frozen=True)
class PageGeometry:
    width: float = PAGE_WIDTH_PT
    height: float = PAGE_HEIGHT_PT
    side_margin: float = SIDE_MARGIN_PT
    top_margin: float = TOP_MARGIN_PT

    @property
    def usable_width(self) -> float:
        return self.width - 2 * self.side_margin


@dataclass(frozen=True)
class FontConfig:
    """TTF paths (bundled DejaVu Sans by default); Helvetica is used when a font cannot be loaded."""
    regular_path: Optional[Path] = DEFAULT_FONT_REGULAR
    bold_path: Optional[Path] = DEFAULT_FONT_BOLD


@dataclass(frozen=True)
class CompanyInfo:
    name: str = DEFAULT_COMPANY_NAME
    address_lines: Tuple[str, ...] = DEFAULT_COMPANY_ADDRESS


@dataclass(frozen=True)
class TableStyle:
    title_size: float = 16.0
    text_size: float = 9.5
    line_height: float = 10.0
    cell_padding: float = 4.0
    header_row_height: float = 20.0
    min_row_height: float = 22.0
    totals_row_height: float = 22.0
    footer_margin: float = 30.0
    totals_footer_margin: float = 20.0
    supplier_width: float = 360.0
    invoice_width: float = 300.0


@dataclass(frozen=True)
class AppSettings:
    geometry: PageGeometry = field(default_factory=PageGeometry)
    fonts: FontConfig = field(default_factory=FontConfig)
    company: CompanyInfo = field(default_factory=CompanyInfo)
    style: TableStyle = field(default_factory=TableStyle)
    output_dir: Path = OUTPUT_ROOT
    csv_delimiter: str = DEFAULT_CSV_DELIMITER
    max_file_size_mb: int = MAX_FILE_SIZE_MB


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name, "").strip()
    return Path(raw).expanduser() if raw else None


def load_settings() -> AppSettings:
    """Build settings from defaults plus PRIMKA_* environment overrides."""
    load_dotenv()

    address_raw = os.getenv("PRIMKA_COMPANY_ADDRESS")
    if address_raw is None:
        address = DEFAULT_COMPANY_ADDRESS
    else:
        address = tuple(part.strip() for part in address_raw.split("|") if part.strip())

    delimiter = os.getenv("PRIMKA_CSV_DELIMITER") or DEFAULT_CSV_DELIMITER
    if delimiter == "\\t":
        delimiter = "\t"

    return AppSettings(
        fonts=FontConfig(
            regular_path=_env_path("PRIMKA_FONT_REGULAR") or DEFAULT_FONT_REGULAR,
            bold_path=_env_path("PRIMKA_FONT_BOLD") or DEFAULT_FONT_BOLD,
        ),
        company=CompanyInfo(
            name=os.getenv("PRIMKA_COMPANY_NAME") or DEFAULT_COMPANY_NAME,
            address_lines=address,
        ),
        output_dir=_env_path("PRIMKA_OUTPUT_DIR") or OUTPUT_ROOT,
        csv_delimiter=delimiter,
    )
