"""Komenda: codlayout parse — parsowanie formuły do modelu."""

from __future__ import annotations

import argparse
import json

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from codlayout._config import default_dialect
from codlayout._log import get_logger
from data_model import CodFormula, CodValue, ParsingError, format_number
from dialects import DIALECT_TYPES, CodLayoutFormulaService, get_service, split_dialect_prefix

console = Console(width=200)
logger = get_logger("commands")

AXIS_STYLE: dict[bool, str] = {
    False: "cyan",
    True:  "magenta",
}


# ---------------------------------------------------------------------------
# Wspólne dla komend przyjmujących formułę
# ---------------------------------------------------------------------------

def add_formula_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "formula",
        metavar="FORMUŁA",
        help='Tekst formuły; może zaczynać się od prefiksu dialektu, np. "$IT ".',
    )
    p.add_argument(
        "--dialect", "-d",
        metavar="TYP",
        type=str.upper,
        choices=DIALECT_TYPES,
        help="Dialekt formuły (domyślnie: prefiks formuły albo CODLAYOUT_DIALECT).",
    )


def resolve_service(dialect: str) -> CodLayoutFormulaService:
    try:
        return get_service(dialect)
    except KeyError as e:
        console.print(f"[red]Błąd:[/red] {escape(str(e.args[0]))}")
        raise SystemExit(1)


def resolve_formula(args: argparse.Namespace) -> tuple[CodLayoutFormulaService, str]:
    """Zwraca usługę dialektu i tekst formuły bez prefiksu "$TYP "."""
    prefixed, text = split_dialect_prefix(args.formula, default=default_dialect())
    dialect = args.dialect or prefixed
    logger.debug("Dialekt: %s", dialect)
    return resolve_service(dialect), text


def print_parse_error(error: ParsingError) -> None:
    """Komunikat błędu i znaczniki pod błędnym fragmentem wejścia."""
    code = f" [dim]({error.code})[/dim]" if error.code else ""
    console.print(f"[red]Błąd parsowania:[/red] {escape(error.message)}{code}")
    if error.index is None:
        return
    console.print(f"  {escape(error.input)}", highlight=False)
    console.print("  " + " " * error.index + "^" * max(error.length or 0, 1), style="red")


def parse_or_exit(service: CodLayoutFormulaService, text: str) -> CodFormula | None:
    """Parsuje formułę; przy błędzie wypisuje go i kończy z kodem 1."""
    parsed = service.parse_formula(text)
    if parsed.error is not None:
        print_parse_error(parsed.error)
        raise SystemExit(1)
    if parsed.result is None:
        console.print("[yellow]Pusta formuła.[/yellow]")
    return parsed.result


# ---------------------------------------------------------------------------
# Wyświetlanie modelu
# ---------------------------------------------------------------------------

def _value_text(value: CodValue) -> str:
    text = format_number(value.value)
    if value.original_value is not None:
        text += f" [{format_number(value.original_value)}]"
    return text


def _original_flag(value: CodValue) -> str:
    if value.is_original is None:
        return "-"
    return "tak" if value.is_original else "nie"


def _show_formula(formula: CodFormula) -> None:
    console.print(
        f"Dialekt: [bold]{formula.type}[/bold]  jednostka: [bold]{formula.unit}[/bold]  "
        f"rozmiar: [bold]{escape(_value_text(formula.height))} × "
        f"{escape(_value_text(formula.width))}[/bold]"
    )

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",        justify="right", no_wrap=True)
    table.add_column("OŚ",       no_wrap=True)
    table.add_column("WARTOŚĆ",  justify="right", no_wrap=True)
    table.add_column("ORYG.",    justify="center", no_wrap=True)
    table.add_column("TYP",      no_wrap=True)
    table.add_column("ETYKIETA", no_wrap=True)

    for i, span in enumerate(formula.spans, start=1):
        axis = "poziomo" if span.is_horizontal else "pionowo"
        table.add_row(
            str(i),
            f"[{AXIS_STYLE[span.is_horizontal]}]{axis}[/]",
            escape(_value_text(span)),
            _original_flag(span),
            span.type or "",
            escape(span.label or ""),
        )

    console.print(table)
    console.print(
        f"  [dim]{len(formula.v_spans)} spanów pionowych, "
        f"{len(formula.h_spans)} poziomych[/dim]"
    )


def run(args: argparse.Namespace) -> None:
    service, text = resolve_formula(args)
    formula = parse_or_exit(service, text)
    if formula is None:
        return

    if args.json_output:
        print(json.dumps(formula.to_dict(), ensure_ascii=False, indent=2))
        return
    _show_formula(formula)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "parse",
        help="Parsuje formułę układu i wyświetla jej spany.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje formułę układu (BO lub IT) do modelu: wymiary arkusza i spany
pionowe/poziome z typem i etykietą.

Przykłady:
  codlayout parse "mm 20 x 10 = 4 // 10 // 6 x 2 // 7 // 3"
  codlayout parse "$IT 250 × 160 = 30 [170] 50 × 15 [60] 85"
  codlayout parse -d IT "250 × 160 = 30 [170] 50 × 15 [60] 85" --json-output
        """,
    )
    add_formula_arguments(p)
    p.add_argument(
        "--json-output",
        action="store_true",
        dest="json_output",
        help="Wypisz model jako JSON zamiast tabeli.",
    )
    p.set_defaults(func=run)
