from .number_format import (
    format_decimal2,
    format_fixed2,
    format_integer,
    normalize_decimal,
    normalize_number,
)
from .text_wrap import height_for, wrap

__all__ = [
    "format_decimal2",
    "format_fixed2",
    "format_integer",
    "height_for",
    "normalize_decimal",
    "normalize_number",
    "wrap",
]
