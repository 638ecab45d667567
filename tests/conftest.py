from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Tuple
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from primka_pdf.domain import Record  # noqa: E402

HEADER = [
    "Datum",
    "Broj primke",
    "Dobavljač",
    "Broj ulaznog računa",
    "Šifra artikla",
    "Naziv artikla",
    "Jmj.",
    "Količina (+)",
    "Nabavna cijena (EUR)",
    "Nabavna cijena po kom.",
    "Nabavna cijena ukupni iznos",
    "Nabavna vrijednost",
]


def csv_bytes(header: Sequence[str], rows: Sequence[Sequence[str]], delimiter: str = ",") -> bytes:
    def quote(cell: str) -> str:
        if delimiter in cell or '"' in cell:
            return '"' + cell.replace('"', '""') + '"'
        return cell

    lines = [delimiter.join(quote(c) for c in line) for line in [header, *rows]]
    return ("\n".join(lines) + "\n").encode("utf-8")


@dataclass
class FixedWidthMeasurer:
    """Every character is `char_width` points wide, whatever the font."""
    char_width: float = 5.0

    def width(self, text: str, font: str, size: float) -> float:
        return len(text) * self.char_width


@dataclass
class FakeCanvas:
    calls: List[Tuple] = field(default_factory=list)

    def begin_page(self, number: int) -> None:
        self.calls.append(("begin", number))

    def draw_text(self, text, x, y, font, size, align="left") -> None:
        self.calls.append(("text", text, x, y, font, size, align))

    def draw_rect(self, x, y, w, h) -> None:
        self.calls.append(("rect", x, y, w, h))

    def end_page(self) -> None:
        self.calls.append(("end",))

    def texts(self) -> List[Tuple]:
        return [c for c in self.calls if c[0] == "text"]

    def pages(self) -> List[int]:
        return [c[1] for c in self.calls if c[0] == "begin"]


def make_record(**overrides) -> Record:
    values = dict(
        date="03.05.2024.",
        receipt_number="5",
        supplier="Dobavljač d.o.o.",
        invoice_number="R-77/2024",
        item_code="1001",
        item_name="Vijak M8",
        unit="kom",
        quantity="2",
        unit_price_eur="1,00",
        price_per_unit="1,00",
        total_price="2,00",
        total_value="2,00",
    )
    values.update(overrides)
    return Record(**values)


@pytest.fixture
def fake_canvas() -> FakeCanvas:
    return FakeCanvas()


@pytest.fixture
def measurer() -> FixedWidthMeasurer:
    return FixedWidthMeasurer()
