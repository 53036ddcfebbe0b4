"""Usługa dialektu BO: parser, builder i filtr etykiet swobodnych."""

from __future__ import annotations

from typing import Iterable

from data_model import CodFormula

from .base import CodLayoutFormulaService
from .bo_builder import build_bo_formula
from .bo_parser import BO_TYPE, parse_bo_formula


def _formula_labels(formula: CodFormula) -> set[str]:
    values = [formula.height, formula.width, *formula.spans]
    return {v.label for v in values if v.label}


class BoLayoutFormulaService(CodLayoutFormulaService):

    type = BO_TYPE

    def _parse(self, text: str) -> CodFormula:
        return parse_bo_formula(text)

    def build_formula(self, formula: CodFormula | None) -> str | None:
        return build_bo_formula(formula)

    def filter_formula_labels(
        self,
        formula: str | CodFormula | None,
        labels: Iterable[str],
    ) -> list[str]:
        """Etykiety BO są dowolnym tekstem, więc sprawdzamy je w samej formule."""
        if isinstance(formula, str):
            formula = self.parse_formula(formula).result
        if formula is None:
            return []
        present = _formula_labels(formula)
        return [label for label in labels if label in present]
