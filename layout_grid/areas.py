"""
layout_grid/areas.py — siatka obszarów wyznaczona przez spany formuły.

Przykład: 3 spany pionowe (mt, tekst, mb) i 4 poziome (ml, i, tekst, mr)
dają 12 obszarów:

                   kol. 1    kol. 2   kol. 3       kol. 4
    wiersz 1 (mt): mt_ml,    mt_i,    mt_$text,    mt_mr
    wiersz 2:      $text_ml, $text_i, $text_$text, $text_mr
    wiersz 3 (mb): mb_ml,    mb_i,    mb_$text,    mb_mr

Adresowanie obszarów (filter_areas):
  @y_x     — dokładna komórka
  _col     — każdy obszar, którego col_indexes zawiera col
  row_     — każdy obszar, którego row_indexes zawiera row
  row_col  — przecięcie obu warunków
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from data_model import CodArea, CodSpan

_CELL_RE = re.compile(r"^@(\d+)_(\d+)$")


def _span_indexes(span: CodSpan) -> list[str]:
    """Etykieta spanu i marker "$typ" (w tej kolejności, jeśli są)."""
    indexes: list[str] = []
    if span.label:
        indexes.append(span.label)
    if span.type:
        indexes.append(f"${span.type}")
    return indexes


def get_areas(spans: Iterable[CodSpan]) -> list[CodArea]:
    """
    Zwraca wszystkie obszary siatki: |v| * |h| komórek, wiersz po wierszu.

    Kolejność spanów w każdej osi jest zachowana; y i x są 1-based.
    """
    spans = list(spans or [])
    v_spans = [s for s in spans if not s.is_horizontal]
    h_spans = [s for s in spans if s.is_horizontal]

    col_indexes = [_span_indexes(s) for s in h_spans]
    areas: list[CodArea] = []
    for y, v in enumerate(v_spans, start=1):
        row_indexes = _span_indexes(v)
        for x, cols in enumerate(col_indexes, start=1):
            areas.append(CodArea(
                y=y,
                x=x,
                row_indexes=list(row_indexes),
                col_indexes=list(cols),
            ))
    return areas


def filter_areas(name: str, areas: Iterable[CodArea]) -> list[CodArea]:
    """
    Zwraca obszary pasujące do nazwy (formy opisane w nagłówku modułu).

    Pusta nazwa zwraca kopię listy. Nazwa bez "_" oraz niepoprawny adres
    "@y_x" nie pasują do niczego.
    """
    areas = list(areas)
    if not name:
        return areas

    if name.startswith("@"):
        m = _CELL_RE.match(name)
        if not m:
            return []
        y, x = int(m.group(1)), int(m.group(2))
        return [a for a in areas if a.y == y and a.x == x]

    if name.startswith("_"):
        col = name[1:]
        return [a for a in areas if col in a.col_indexes]

    if name.endswith("_"):
        row = name[:-1]
        return [a for a in areas if row in a.row_indexes]

    row, sep, col = name.partition("_")
    if not sep:
        return []
    return [
        a for a in areas
        if row in a.row_indexes and col in a.col_indexes
    ]


def map_area_colors(
    areas: Iterable[CodArea],
    colors: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """
    Rozwija kolory podane dowolną nazwą obszaru na adresy "@y_x".

    Klucze są przetwarzane w kolejności słownika; późniejszy klucz
    nadpisuje kolor tej samej komórki.
    """
    areas = list(areas)
    result: dict[str, str] = {}
    if not colors:
        return result
    for name, color in colors.items():
        for area in filter_areas(name, areas):
            result[area.name] = color
    return result
