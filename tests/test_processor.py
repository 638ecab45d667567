import io

import pytest
from pypdf import PdfReader

from primka_pdf import processor
from primka_pdf.config import AppSettings
from primka_pdf.domain import EmptySelectionError, FormatError, SinkError
from primka_pdf.output import DirectorySink, MemorySink, output_filename
from primka_pdf.processor import (
    build_receipt_pdf,
    export_receipt,
    load_records,
    sanitize_receipt_number,
    select_receipt,
)

from conftest import HEADER, csv_bytes, make_record

TWO_ROWS = [
    ["03.05.2024.", "5", "Dobavljač d.o.o.", "R-77", "1001", "Vijak M8", "kom", "3,5", "1,00", "1,00", "3,50", "10,00"],
    ["03.05.2024.", "5", "Dobavljač d.o.o.", "R-77", "1002", "Matica M8", "kom", "2", "2,75", "2,75", "5,50", "5,505"],
    ["04.05.2024.", "55", "Drugi d.o.o.", "R-78", "1003", "Podloška", "kom", "10", "0,10", "0,10", "1,00", "1,00"],
]


def test_sanitize_keeps_digits_only() -> None:
    assert sanitize_receipt_number(" 00-5a ") == "005"
    assert sanitize_receipt_number(None) == ""


def test_select_uses_exact_string_equality() -> None:
    records = load_records(csv_bytes(HEADER, TWO_ROWS), "primke.csv")

    assert [r.item_code for r in select_receipt(records, "5")] == ["1001", "1002"]
    with pytest.raises(EmptySelectionError):
        select_receipt(records, "05")


def test_two_row_receipt_totals() -> None:
    records = load_records(csv_bytes(HEADER, TWO_ROWS), "primke.csv")
    selected = select_receipt(records, "5")

    document = build_receipt_pdf("5", selected)

    assert document.filename == "Primka_5.pdf"
    assert document.content.startswith(b"%PDF")
    assert document.page_count == 1
    assert document.row_count == 2
    assert document.totals.total_value_text == "15.51"
    assert document.totals.total_price_text == "9.00"


def test_many_rows_span_several_pages() -> None:
    records = [make_record(item_name=f"Artikl broj {i} " * 6) for i in range(120)]

    document = build_receipt_pdf("5", records)

    assert document.page_count > 1
    assert document.row_count == 120


def test_header_only_file_fails_before_layout(monkeypatch) -> None:
    def fail(*args, **kwargs):
        raise AssertionError("layout must not run")

    monkeypatch.setattr(processor, "layout_document", fail)
    sink = MemorySink()

    assert load_records(csv_bytes(HEADER, []), "primke.csv") == []
    with pytest.raises(EmptySelectionError):
        export_receipt(csv_bytes(HEADER, []), "primke.csv", "5", sink)
    assert sink.documents == {}


def test_export_writes_pdf_to_directory(tmp_path) -> None:
    sink = DirectorySink(tmp_path / "out")

    document, location = export_receipt(csv_bytes(HEADER, TWO_ROWS), "primke.csv", "5", sink)

    target = tmp_path / "out" / output_filename("5")
    assert location == str(target)
    assert target.read_bytes() == document.content
    assert list((tmp_path / "out").iterdir()) == [target]


def test_directory_sink_failure_leaves_nothing(tmp_path) -> None:
    blocker = tmp_path / "out"
    blocker.write_text("not a directory")

    with pytest.raises(SinkError):
        DirectorySink(blocker).save("Primka_5.pdf", b"%PDF-1.4")
    assert sorted(p.name for p in tmp_path.iterdir()) == ["out"]


def test_oversized_upload_is_rejected() -> None:
    settings = AppSettings(max_file_size_mb=0)

    with pytest.raises(FormatError):
        load_records(csv_bytes(HEADER, TWO_ROWS), "primke.csv", settings=settings)


def test_memory_sink_keeps_documents() -> None:
    sink = MemorySink()

    document, location = export_receipt(csv_bytes(HEADER, TWO_ROWS), "primke.csv", "55", sink)

    assert location == "Primka_55.pdf"
    assert sink.documents[location] == document.content


def test_croatian_letters_survive_in_pdf_text() -> None:
    records = [make_record(item_name="Čavao ćelija đak Đuro")]

    document = build_receipt_pdf("5", records)

    text = "".join(page.extract_text() for page in PdfReader(io.BytesIO(document.content)).pages)
    for expected in (
        "Dobavljač",
        "Broj ulaznog računa",
        "Količina",
        "Jemeršića",
        "Čavao ćelija đak Đuro",
    ):
        assert expected in text
