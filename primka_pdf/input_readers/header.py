"""
Header resolution shared by the CSV and XLSX readers.

Both readers hand over a list of header labels and a list of cell strings per
row; this module turns them into Records. Lookups are case-insensitive and a
missing column simply yields "".
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..domain.record import RECORD_FIELDS, Record


class HeaderIndex:
    """Case-insensitive mapping from header label to column index."""

    def __init__(self, labels: Sequence[str]):
        self.labels: List[str] = [label.strip() for label in labels]
        self._index: Dict[str, int] = {}
        for i, label in enumerate(self.labels):
            # First occurrence wins for labels that only differ in case.
            self._index.setdefault(label.casefold(), i)

    def __len__(self) -> int:
        return len(self.labels)

    def position(self, label: str) -> Optional[int]:
        return self._index.get(label.strip().casefold())

    def lookup(self, cells: Sequence[str], label: str) -> str:
        idx = self.position(label)
        if idx is None or idx >= len(cells):
            return ""
        return cells[idx]

    def to_record(self, cells: Sequence[str]) -> Record:
        """Build a Record from one row of already-trimmed cell strings."""
        values = {name: self.lookup(cells, label) for name, label in RECORD_FIELDS}
        extras = {
            label: (cells[i] if i < len(cells) else "")
            for i, label in enumerate(self.labels)
        }
        return Record(extras=extras, **values)
