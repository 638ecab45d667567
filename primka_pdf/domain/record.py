"""
Record schema definition.

A Record is one goods-receipt ("primka") line item. Both readers (CSV and XLSX)
must map their rows into this structure before filtering and rendering.

All fields are kept as the unformatted display strings found in the source:
numbers are NOT coerced at parse time, so "3,5" stays "3,5" until the formatter
touches it. Every source column is additionally kept in `extras`, keyed by its
literal header text, so unknown columns are never lost.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Tuple


# (field name, literal source header) in canonical column order.
RECORD_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("date", "Datum"),
    ("receipt_number", "Broj primke"),
    ("supplier", "Dobavljač"),
    ("invoice_number", "Broj ulaznog računa"),
    ("item_code", "Šifra artikla"),
    ("item_name", "Naziv artikla"),
    ("unit", "Jmj."),
    ("quantity", "Količina (+)"),
    ("unit_price_eur", "Nabavna cijena (EUR)"),
    ("price_per_unit", "Nabavna cijena po kom."),
    ("total_price", "Nabavna cijena ukupni iznos"),
    ("total_value", "Nabavna vrijednost"),
)


@dataclass(frozen=True)
class Record:
    date: str = ""
    receipt_number: str = ""
    supplier: str = ""
    invoice_number: str = ""
    item_code: str = ""
    item_name: str = ""
    unit: str = ""
    quantity: str = ""
    unit_price_eur: str = ""
    price_per_unit: str = ""
    total_price: str = ""
    total_value: str = ""

    # Literal header text -> trimmed cell text, source column order.
    extras: Mapping[str, str] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extras", MappingProxyType(dict(self.extras)))

    def as_labeled_dict(self) -> Dict[str, str]:
        """Return the twelve typed fields keyed by their Croatian header labels."""
        return {label: getattr(self, name) for name, label in RECORD_FIELDS}
