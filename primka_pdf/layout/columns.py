"""Fixed table layout: column labels, relative widths and alignment."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class ColumnSpec:
    label: str
    fraction: float
    align: str = "left"


COLUMNS: Tuple[ColumnSpec, ...] = (
    ColumnSpec("Šifra artikla", 0.09, "right"),
    ColumnSpec("Naziv artikla", 0.40, "left"),
    ColumnSpec("Jmj./Nab. po kom.", 0.17, "left"),
    ColumnSpec("Količina", 0.08, "right"),
    ColumnSpec("Nab. ukupno", 0.13, "right"),
    ColumnSpec("Nab. vrijednost", 0.13, "right"),
)

ITEM_NAME_COLUMN = 1
TOTAL_PRICE_COLUMN = 4
TOTAL_VALUE_COLUMN = 5


def column_widths(columns: Sequence[ColumnSpec], usable_width: float) -> List[float]:
    """Pixel width per column; fractions must add up to 1.0."""
    total = sum(c.fraction for c in columns)
    if not math.isclose(total, 1.0, abs_tol=1e-9):
        raise ValueError(f"Column fractions must sum to 1.0, got {total}")
    return [c.fraction * usable_width for c in columns]
