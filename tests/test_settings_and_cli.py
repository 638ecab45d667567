from dataclasses import dataclass

from primka_pdf import cli
from primka_pdf.config import (
    DEFAULT_FONT_BOLD,
    DEFAULT_FONT_REGULAR,
    AppSettings,
    FontConfig,
    load_settings,
)
from primka_pdf.interface.tables import receipt_summary, records_to_frame
from primka_pdf.interface.upload import upload_key
from primka_pdf.layout import register_fonts

from conftest import HEADER, csv_bytes, make_record

ROWS = [
    ["03.05.2024.", "7", "Dobavljač d.o.o.", "R-1", "1", "Vijak", "kom", "1", "1", "1", "1", "1"],
]


def _clear_env(monkeypatch) -> None:
    for name in (
        "PRIMKA_OUTPUT_DIR",
        "PRIMKA_FONT_REGULAR",
        "PRIMKA_FONT_BOLD",
        "PRIMKA_COMPANY_NAME",
        "PRIMKA_COMPANY_ADDRESS",
        "PRIMKA_CSV_DELIMITER",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_match_landscape_a4(monkeypatch) -> None:
    _clear_env(monkeypatch)
    settings = load_settings()

    assert settings == AppSettings(output_dir=settings.output_dir)
    assert settings.geometry.width == 842
    assert settings.geometry.usable_width == 842 - 48
    assert settings.company.name == "Metrax d.o.o."


def test_environment_overrides(monkeypatch, tmp_path) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("PRIMKA_OUTPUT_DIR", str(tmp_path))
    monkeypatch.setenv("PRIMKA_COMPANY_NAME", "Firma j.d.o.o.")
    monkeypatch.setenv("PRIMKA_COMPANY_ADDRESS", "Ulica 1 | 10000 Zagreb")
    monkeypatch.setenv("PRIMKA_CSV_DELIMITER", ";")

    settings = load_settings()

    assert settings.output_dir == tmp_path
    assert settings.company.name == "Firma j.d.o.o."
    assert settings.company.address_lines == ("Ulica 1", "10000 Zagreb")
    assert settings.csv_delimiter == ";"


def test_default_fonts_are_the_bundled_dejavu_pair(monkeypatch) -> None:
    _clear_env(monkeypatch)
    settings = load_settings()

    assert settings.fonts == FontConfig(regular_path=DEFAULT_FONT_REGULAR, bold_path=DEFAULT_FONT_BOLD)
    assert DEFAULT_FONT_REGULAR.is_file()
    assert DEFAULT_FONT_BOLD.is_file()

    fonts = register_fonts(settings.fonts)
    assert fonts.regular == "Primka-DejaVuSans"
    assert fonts.bold == "Primka-DejaVuSans-Bold"


def test_missing_font_file_falls_back_to_helvetica(tmp_path, caplog) -> None:
    fonts = register_fonts(
        FontConfig(regular_path=tmp_path / "missing.ttf", bold_path=tmp_path / "missing-bold.ttf")
    )

    assert fonts.regular == "Helvetica"
    assert fonts.bold == "Helvetica-Bold"
    assert "missing.ttf" in caplog.text


def test_cli_writes_pdf(monkeypatch, tmp_path) -> None:
    _clear_env(monkeypatch)
    source = tmp_path / "primke.csv"
    source.write_bytes(csv_bytes(HEADER, ROWS))
    out = tmp_path / "pdf"

    code = cli.main([str(source), "7", "--output-dir", str(out)])

    assert code == cli.EXIT_OK
    assert (out / "Primka_7.pdf").read_bytes().startswith(b"%PDF")


def test_cli_reports_empty_selection(monkeypatch, tmp_path) -> None:
    _clear_env(monkeypatch)
    source = tmp_path / "primke.csv"
    source.write_bytes(csv_bytes(HEADER, ROWS))

    code = cli.main([str(source), "8", "--output-dir", str(tmp_path / "pdf")])

    assert code == cli.EXIT_EMPTY_SELECTION
    assert not (tmp_path / "pdf").exists()


def test_cli_reports_unreadable_source(monkeypatch, tmp_path) -> None:
    _clear_env(monkeypatch)
    source = tmp_path / "primke.xlsx"
    source.write_bytes(b"not a workbook")

    assert cli.main([str(source), "7", "--output-dir", str(tmp_path)]) == cli.EXIT_FAILED
    assert cli.main([str(tmp_path / "missing.csv"), "7"]) == cli.EXIT_FAILED


def test_records_frame_uses_header_labels() -> None:
    records = [make_record(), make_record(receipt_number="6"), make_record()]

    df = records_to_frame(records)
    summary = receipt_summary(records)

    assert list(df.columns) == HEADER
    assert len(df) == 3
    assert df.loc[1, "Broj primke"] == "6"
    assert summary.to_dict(orient="records") == [
        {"Broj primke": "5", "Redaka": 2},
        {"Broj primke": "6", "Redaka": 1},
    ]
    assert receipt_summary([]).empty


@dataclass
class DummyUpload:
    name: str
    size: int
    file_id: str


def test_upload_key_changes_for_a_new_upload_with_the_same_name() -> None:
    first = DummyUpload("primke.csv", 120, "a1")
    edited = DummyUpload("primke.csv", 120, "b2")

    assert upload_key(None) is None
    assert upload_key(first) == upload_key(DummyUpload("primke.csv", 120, "a1"))
    assert upload_key(first) != upload_key(edited)
    assert upload_key(first) != upload_key(DummyUpload("primke.csv", 121, "a1"))
