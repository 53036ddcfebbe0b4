"""Komenda: codlayout labels — które z podanych etykiet występują w formule."""

from __future__ import annotations

import argparse
import json

from rich.console import Console

from codlayout.commands.parse import add_formula_arguments, resolve_formula

console = Console(width=200)


def run(args: argparse.Namespace) -> None:
    service, text = resolve_formula(args)
    present = service.filter_formula_labels(text, args.labels)

    if args.json_output:
        print(json.dumps(present, ensure_ascii=False))
        return
    if not present:
        console.print("[yellow]Żadna z podanych etykiet nie występuje w formule.[/yellow]")
        return
    for label in present:
        print(label)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "labels",
        help="Filtruje listę etykiet do obecnych w formule.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
BO: etykiety są dowolnym tekstem (":initials"), więc zwracane są te,
które faktycznie występują w formule. IT: zwracane są etykiety należące
do słownika IT (margin-top, col-1-width, ...).

Przykłady:
  codlayout labels "20 x 10 = 4 // 10:initials // 6 x 2 // 7 // 3" initials notes
  codlayout labels "$IT 250 × 160 = 30 [170] 50 × 15 [60] 85" col-1-width foo
        """,
    )
    add_formula_arguments(p)
    p.add_argument(
        "labels",
        metavar="ETYKIETA",
        nargs="+",
        help="Etykiety do sprawdzenia.",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        dest="json_output",
        help="Wypisz wynik jako listę JSON.",
    )
    p.set_defaults(func=run)
