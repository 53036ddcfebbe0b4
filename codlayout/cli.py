"""
codlayout — narzędzie CLI dla formuł układu kodykologicznego.

Użycie:
  codlayout <komenda> [opcje]

Komendy:
  parse      Parsuje formułę (BO / IT) i wyświetla spany.
  build      Buduje tekst formuły z modelu JSON.
  validate   Sprawdza zgodność wymiarów arkusza z sumami spanów.
  areas      Wyświetla obszary siatki (z filtrem i mapą kolorów).
  labels     Filtruje listę etykiet do obecnych w formule.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby znak "×"
# i polskie teksty pomocy były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from codlayout import __version__
from codlayout._config import default_log_level, load_env
from codlayout._log import setup_logging
from codlayout.commands import areas as cmd_areas
from codlayout.commands import build as cmd_build
from codlayout.commands import labels as cmd_labels
from codlayout.commands import parse as cmd_parse
from codlayout.commands import validate as cmd_validate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codlayout",
        description="Formuły układu kodykologicznego — narzędzie CLI.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"codlayout {__version__}"
    )
    parser.add_argument(
        "--log-level",
        metavar="POZIOM",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Poziom logowania (domyślnie: CODLAYOUT_LOG_LEVEL albo WARNING).",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_parse.add_parser(subparsers)
    cmd_build.add_parser(subparsers)
    cmd_validate.add_parser(subparsers)
    cmd_areas.add_parser(subparsers)
    cmd_labels.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    load_env()
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level or default_log_level())
    args.func(args)


if __name__ == "__main__":
    main()
