"""Usługa dialektu IT: parser, builder i filtr etykiet ze słownika IT."""

from __future__ import annotations

from typing import Iterable

from data_model import CodFormula

from .base import CodLayoutFormulaService
from .it_builder import build_it_formula
from .it_labels import is_it_label
from .it_parser import IT_TYPE, parse_it_formula


class ItLayoutFormulaService(CodLayoutFormulaService):

    type = IT_TYPE

    def _parse(self, text: str) -> CodFormula:
        return parse_it_formula(text)

    def build_formula(self, formula: CodFormula | None) -> str | None:
        return build_it_formula(formula)

    def filter_formula_labels(
        self,
        formula: str | CodFormula | None,
        labels: Iterable[str],
    ) -> list[str]:
        # słownik IT jest zamknięty: wystarczy sprawdzić samą etykietę
        if formula is None or (isinstance(formula, str) and not formula.strip()):
            return []
        return [label for label in labels if is_it_label(label)]
