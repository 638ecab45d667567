"""Command line entry point: render one receipt from a CSV/XLSX export."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config.settings import load_settings
from .domain.errors import EmptySelectionError, PrimkaError
from .output.sinks import DirectorySink
from .processor import export_receipt, sanitize_receipt_number

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_EMPTY_SELECTION = 2


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a receipt (primka) PDF from a CSV/XLSX export")
    parser.add_argument("source", help="CSV or XLSX file")
    parser.add_argument("receipt_number", help="Receipt number (Broj primke) to export")
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for Primka_<number>.pdf (default: PRIMKA_OUTPUT_DIR or ./primka_outputs)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug details")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s\t%(message)s",
    )

    settings = load_settings()
    output_dir = Path(args.output_dir) if args.output_dir else settings.output_dir
    receipt_number = sanitize_receipt_number(args.receipt_number)
    if not receipt_number:
        logging.error("Receipt number must contain digits: %r", args.receipt_number)
        return EXIT_FAILED

    source = Path(args.source)
    try:
        data = source.read_bytes()
    except OSError as exc:
        logging.error("Cannot read %s: %s", source, exc)
        return EXIT_FAILED

    try:
        document, location = export_receipt(
            data, source.name, receipt_number, DirectorySink(output_dir), settings=settings
        )
    except EmptySelectionError:
        logging.error("Nema redaka za primku %s", receipt_number)
        return EXIT_EMPTY_SELECTION
    except PrimkaError as exc:
        logging.error("%s", exc)
        return EXIT_FAILED

    print(f"PDF spremljen: {location} ({document.page_count} str.)")
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - direct execution
    raise SystemExit(main(sys.argv[1:]))
