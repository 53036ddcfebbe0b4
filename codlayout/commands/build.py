"""Komenda: codlayout build — tekst formuły z modelu JSON."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from codlayout._config import default_dialect
from codlayout.commands.parse import resolve_service
from data_model import CodFormula
from dialects import DIALECT_TYPES

console = Console(width=200)


def _read_model(source: str) -> CodFormula:
    try:
        raw = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Nie można odczytać modelu:[/red] {escape(str(e))}")
        raise SystemExit(1)

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        console.print(f"[red]Nieprawidłowy JSON:[/red] {escape(str(e))}")
        raise SystemExit(1)

    if not isinstance(data, dict):
        console.print("[red]Model formuły musi być obiektem JSON.[/red]")
        raise SystemExit(1)

    try:
        return CodFormula.from_dict(data)
    except (ValueError, TypeError) as e:
        console.print(f"[red]Nieprawidłowy model:[/red] {escape(str(e))}")
        raise SystemExit(1)


def run(args: argparse.Namespace) -> None:
    formula = _read_model(args.model)
    service = resolve_service(args.dialect or formula.type or default_dialect())
    print(service.build_formula(formula))


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "build",
        help="Buduje tekst formuły z modelu JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wczytuje model formuły (JSON w formacie wyjścia "parse --json-output")
z pliku albo ze standardowego wejścia i wypisuje tekst formuły.

Dialekt: --dialect, w przeciwnym razie pole "type" modelu.

Przykłady:
  codlayout build model.json
  codlayout parse "20 x 10 = 4 // 10 // 6 x 2 // 7 // 3" --json-output | codlayout build -
  codlayout build model.json -d IT
        """,
    )
    p.add_argument(
        "model",
        metavar="MODEL",
        help='Plik JSON z modelem formuły albo "-" dla stdin.',
    )
    p.add_argument(
        "--dialect", "-d",
        metavar="TYP",
        type=str.upper,
        choices=DIALECT_TYPES,
        help="Dialekt wyjściowy (domyślnie: pole \"type\" modelu).",
    )
    p.set_defaults(func=run)
