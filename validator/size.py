"""
validator/size.py — walidacja rozmiaru formuły.

Formuła ma poprawny rozmiar, gdy zadeklarowana wysokość równa się sumie
spanów pionowych, a szerokość sumie spanów poziomych.

Klucze wyniku:
  formula — błąd parsowania (wtedy brak pozostałych kluczy)
  height  — "Height {h} does not match v-spans sum {sum}"
  width   — "Width {w} does not match h-spans sum {sum}"
"""

from __future__ import annotations

import logging
from typing import Callable, TypeAlias

from data_model import CodFormula, ParseResult, format_number

logger = logging.getLogger(__name__)

# Komunikaty błędów kluczowane nazwą wymiaru ("height", "width", "formula").
SizeErrors: TypeAlias = dict[str, str]


def validate_formula_size(formula: CodFormula | None) -> SizeErrors | None:
    """
    Porównuje zadeklarowane wymiary z sumami spanów.

    Zwraca None gdy formuła nie ma spanów albo oba wymiary się zgadzają.
    """
    if formula is None or not formula.spans:
        return None

    errors: SizeErrors = {}
    h = formula.height.value or 0
    w = formula.width.value or 0

    v_sum = sum((s.value or 0) for s in formula.v_spans)
    h_sum = sum((s.value or 0) for s in formula.h_spans)

    if h != v_sum:
        errors["height"] = (
            f"Height {format_number(h)} does not match "
            f"v-spans sum {format_number(v_sum)}"
        )
    if w != h_sum:
        errors["width"] = (
            f"Width {format_number(w)} does not match "
            f"h-spans sum {format_number(h_sum)}"
        )

    if errors:
        logger.debug("Niezgodny rozmiar formuły: %s", errors)
    return errors or None


def validate_formula(
    text: str | None,
    parse: Callable[[str], ParseResult],
) -> SizeErrors | None:
    """
    Parsuje tekst formuły podaną funkcją i waliduje jej rozmiar.

    Args:
        text:  tekst formuły; pusty lub z samych białych znaków → None
        parse: parser dialektu zwracający ParseResult

    Returns:
        {"formula": komunikat} przy błędzie parsowania, błędy rozmiaru
        albo None gdy formuła jest poprawna.
    """
    if not text or not text.strip():
        return None

    parsed = parse(text)
    if parsed.error is not None:
        return {"formula": parsed.error.message or "Invalid formula string"}

    return validate_formula_size(parsed.result)
