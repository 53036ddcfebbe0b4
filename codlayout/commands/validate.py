"""Komenda: codlayout validate — zgodność wymiarów z sumami spanów."""

from __future__ import annotations

import argparse
import json

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from codlayout.commands.parse import add_formula_arguments, resolve_formula

console = Console(width=200)


def run(args: argparse.Namespace) -> None:
    service, text = resolve_formula(args)
    errors = service.validate_formula(text)

    if args.json_output:
        print(json.dumps(errors or {}, ensure_ascii=False, indent=2))
    elif not errors:
        console.print(f"[green]OK[/green] — formuła {service.type} ma poprawny rozmiar.")
    else:
        table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
        table.add_column("KLUCZ", style="bold red", no_wrap=True)
        table.add_column("BŁĄD", no_wrap=False)
        for key, message in errors.items():
            table.add_row(key, escape(message))
        console.print(table)

    if errors:
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "validate",
        help="Sprawdza, czy wymiary arkusza równają się sumom spanów.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje formułę i porównuje zadeklarowaną wysokość z sumą spanów
pionowych, a szerokość z sumą spanów poziomych. Kod wyjścia 1 przy
błędzie parsowania lub niezgodnym rozmiarze.

Przykłady:
  codlayout validate "20 x 12 = 4 // 10 // 6 x 2 // 7 // 3"
  codlayout validate "$IT 250 × 160 = 30 [170] 50 × 15 [60] 85" --json-output
        """,
    )
    add_formula_arguments(p)
    p.add_argument(
        "--json-output",
        action="store_true",
        dest="json_output",
        help="Wypisz błędy jako JSON ({} gdy brak).",
    )
    p.set_defaults(func=run)
