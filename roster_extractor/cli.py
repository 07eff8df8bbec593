"""
Command line interface.

    roster-extract rosters/cairo-01.pdf
    roster-extract dump.txt --pages 12 --classifier packed-scan --preview 20
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from .config import CLASSIFIER_NAMES, get_config
from .exceptions import ExtractionError, RosterError
from .logger import setup_logger
from .models import ExtractedDocument
from .persistence import JSONStore
from .pipeline import extract_document, extract_pdf

console = Console()

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_NOTHING_EXTRACTED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roster-extract",
        description="Extract electoral committees and voters from Arabic roster PDFs or text dumps",
    )
    parser.add_argument("input", type=Path, help="PDF file, or a UTF-8 text file already extracted from one")
    parser.add_argument("--classifier", choices=CLASSIFIER_NAMES, help="Line classifier strategy")
    parser.add_argument("--pages", type=int, default=0, help="Page count to report for text input")
    parser.add_argument("--output-dir", type=Path, help="Directory for the JSON result")
    parser.add_argument("--preview", type=int, default=10, help="Rows to show in the preview table (0 to hide)")
    parser.add_argument("--no-save", action="store_true", help="Do not write the JSON result")
    parser.add_argument("--debug", action="store_true", help="Verbose console logging (same as DEBUG=1)")
    return parser


def render_preview(document: ExtractedDocument, limit: int) -> None:
    """Print totals and the first ``limit`` flattened rows."""
    console.print(
        f"[bold green]{document.total_committees}[/] committee(s), "
        f"[bold green]{document.total_voters}[/] voter(s)"
    )
    if limit <= 0:
        return

    table = Table(title="Preview")
    table.add_column("اسم اللجنة")
    table.add_column("الرقم الفرعي", justify="center")
    table.add_column("رقم الناخب", justify="right")
    table.add_column("الاسم الكامل")

    rows = document.to_rows()
    for row in rows[:limit]:
        table.add_row(row.committee_name, row.committee_sub_number, row.voter_serial_number, row.voter_full_name)
    console.print(table)

    if len(rows) > limit:
        console.print(f"... {len(rows) - limit} more row(s)")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = get_config()
    if args.debug:
        config.debug = True
    setup_logger(debug=config.debug, log_to_file=config.log_to_file)

    try:
        if args.input.suffix.lower() == ".pdf":
            document = extract_pdf(args.input, config=config, classifier=args.classifier)
        else:
            text = args.input.read_text(encoding="utf-8")
            document = extract_document(
                text,
                page_count=args.pages,
                config=config,
                classifier=args.classifier,
                source_name=args.input.name,
            )
    except ExtractionError as e:
        console.print(f"[bold yellow]{e.message}[/]")
        return EXIT_NOTHING_EXTRACTED
    except RosterError as e:
        console.print(f"[bold red]{e}[/]")
        return EXIT_FAILED
    except OSError as e:
        console.print(f"[bold red]Cannot read {args.input}: {e}[/]")
        return EXIT_FAILED
    except UnicodeDecodeError as e:
        console.print(f"[bold red]Cannot decode {args.input} as UTF-8: {e}[/]")
        return EXIT_FAILED

    render_preview(document, args.preview)

    if not args.no_save:
        store = JSONStore(args.output_dir or config.output_dir)
        try:
            path = store.save_document(document, args.input.stem)
        except RosterError as e:
            console.print(f"[bold red]{e}[/]")
            return EXIT_FAILED
        console.print(f"Saved [cyan]{path}[/]")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
