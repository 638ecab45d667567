"""
Number normalization and presentation formats.

Source spreadsheets mix decimal separators ("3,5" and "3.5"). Values are only
interpreted here, at render time; records keep the original text.

Rules:
- Item codes and quantities are printed as integers, truncated toward zero.
- Money columns are printed with exactly two decimals, rounded HALF-UP
  (5.505 -> 5.51), decimal point as separator.
- Anything that is not a number is printed unchanged (trimmed), and so is an
  integer column value of 1e19 or more.

Rounding works on Decimal parsed from the text, so "5.505" really is 5.505 and
not the nearest binary float.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Optional

_CENTS = Decimal("0.01")

# Largest decimal exponent still printed as an integer (signed 64-bit range)
_MAX_INTEGER_EXPONENT = 18


def normalize_decimal(value) -> Optional[Decimal]:
    """Convert numeric-like text (comma or point decimal) to Decimal. Return None if not possible."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, (int, float)):
        value = repr(value)

    s = str(value).strip().replace(",", ".")
    if not s:
        return None
    try:
        d = Decimal(s)
    except InvalidOperation:
        return None
    return d if d.is_finite() else None


def normalize_number(value) -> Optional[float]:
    """Convert numeric-like text to float. Return None if not possible."""
    d = normalize_decimal(value)
    return float(d) if d is not None else None


def format_integer(value: str) -> str:
    """Truncate toward zero ("3,7" -> "3"); non-numeric text is returned trimmed."""
    text = (value or "").strip()
    d = normalize_decimal(text)
    if d is None or d.adjusted() > _MAX_INTEGER_EXPONENT:
        return text
    return str(int(d))


def format_decimal2(value: Decimal) -> str:
    """Format an exact value with two decimals, HALF-UP."""
    with localcontext() as ctx:
        ctx.prec = 60
        try:
            rounded = value.quantize(_CENTS, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            # Too many digits for the context; print as-is
            return f"{value:f}"
    if rounded == 0:
        rounded = abs(rounded)
    return f"{rounded:f}"


def format_fixed2(value: str) -> str:
    """Two decimals, HALF-UP ("5,505" -> "5.51"); non-numeric text is returned trimmed."""
    text = (value or "").strip()
    d = normalize_decimal(text)
    if d is None:
        return text
    return format_decimal2(d)
