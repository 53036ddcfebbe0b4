"""Komenda: codlayout areas — siatka obszarów formuły."""

from __future__ import annotations

import argparse
import json

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from codlayout.commands.parse import add_formula_arguments, parse_or_exit, resolve_formula
from data_model import CodArea

console = Console(width=200)


def _parse_colors(raw: str | None) -> dict[str, str]:
    if not raw:
        return {}
    try:
        colors = json.loads(raw)
    except json.JSONDecodeError as e:
        console.print(f"[red]Nieprawidłowy JSON w --colors:[/red] {escape(str(e))}")
        raise SystemExit(1)
    if not isinstance(colors, dict) or not all(isinstance(v, str) for v in colors.values()):
        console.print('[red]--colors musi być obiektem JSON {"nazwa": "kolor"}.[/red]')
        raise SystemExit(1)
    return colors


def _show_areas(areas: list[CodArea], colors: dict[str, str]) -> None:
    if not areas:
        console.print("[yellow]Brak obszarów spełniających kryteria.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("OBSZAR",  style="bold", no_wrap=True)
    table.add_column("Y",       justify="right", no_wrap=True)
    table.add_column("X",       justify="right", no_wrap=True)
    table.add_column("WIERSZ",  style="cyan", no_wrap=True)
    table.add_column("KOLUMNA", style="magenta", no_wrap=True)
    table.add_column("KOLOR",   no_wrap=True)

    for area in areas:
        table.add_row(
            area.name,
            str(area.y),
            str(area.x),
            escape(", ".join(area.row_indexes)),
            escape(", ".join(area.col_indexes)),
            escape(colors.get(area.name, "")),
        )
    console.print(table)
    console.print(f"  [dim]{len(areas)} obszarów[/dim]")


def run(args: argparse.Namespace) -> None:
    service, text = resolve_formula(args)
    colors_in = _parse_colors(args.colors)
    formula = parse_or_exit(service, text)
    if formula is None:
        return

    areas = service.get_areas(formula.spans)
    if args.filter:
        areas = service.filter_areas(args.filter, areas)
    colors = service.map_area_colors(areas, colors_in) if colors_in else {}

    if args.json_output:
        print(json.dumps(
            {"areas": [a.to_dict() for a in areas], "colors": colors},
            ensure_ascii=False,
            indent=2,
        ))
        return
    _show_areas(areas, colors)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "areas",
        help="Wyświetla obszary siatki wyznaczone przez spany formuły.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Każdy obszar to przecięcie spanu pionowego (wiersz) i poziomego (kolumna).

Adresowanie obszarów (--filter i klucze --colors):
  @y_x      dokładna komórka, np. @2_3
  _kol      obszary kolumny o etykiecie lub typie, np. _$text
  wiersz_   obszary wiersza, np. margin-top_
  w_k       przecięcie, np. $text_col-1-width

Przykłady:
  codlayout areas "20 x 10 = 4 // 10 // 6 x 2 // 7 // 3"
  codlayout areas "20 x 10 = 4 // 10 // 6 x 2 // 7 // 3" --filter '$text_$text'
  codlayout areas "$IT 250 × 160 = 30 [170] 50 × 15 [60] 85" --colors '{"_$text": "red"}'
        """,
    )
    add_formula_arguments(p)
    p.add_argument(
        "--filter",
        metavar="NAZWA",
        help="Pokaż tylko obszary pasujące do nazwy.",
    )
    p.add_argument(
        "--colors",
        metavar="JSON",
        help='Mapa {"nazwa": "kolor"} rozwijana na kolory poszczególnych obszarów.',
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        dest="json_output",
        help="Wypisz obszary (i kolory) jako JSON.",
    )
    p.set_defaults(func=run)
