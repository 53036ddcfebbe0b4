"""
dialects/base.py — wspólny interfejs usług formuł układu.

Każdy dialekt dostarcza parser, builder i filtr etykiet; siatka obszarów
i walidacja rozmiaru są wspólne i działają na modelu CodFormula.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Iterable

import layout_grid
import validator
from data_model import CodArea, CodFormula, CodSpan, ParseResult, ParsingError

logger = logging.getLogger(__name__)


class CodLayoutFormulaService(ABC):
    """Usługa jednego dialektu formuły (BO, IT)."""

    type: ClassVar[str]

    # ------------------------------------------------------------------
    # dialekt
    # ------------------------------------------------------------------

    @abstractmethod
    def _parse(self, text: str) -> CodFormula:
        """Parsuje niepusty tekst; rzuca ParsingError."""

    @abstractmethod
    def build_formula(self, formula: CodFormula | None) -> str | None:
        """Zwraca tekst formuły w tym dialekcie; None dla braku modelu."""

    @abstractmethod
    def filter_formula_labels(
        self,
        formula: str | CodFormula | None,
        labels: Iterable[str],
    ) -> list[str]:
        """Zwraca etykiety z labels obecne w formule (kolejność labels)."""

    def parse_formula(self, text: str | None) -> ParseResult:
        """
        Parsuje tekst formuły.

        Puste wejście daje ParseResult bez wyniku i bez błędu; błąd składni
        trafia do ParseResult.error, nigdy nie jest rzucany.
        """
        if not text or not text.strip():
            return ParseResult()
        try:
            formula = self._parse(text)
        except ParsingError as e:
            logger.debug("%s: %r", self.type, e)
            return ParseResult(error=e)
        return ParseResult(result=formula)

    # ------------------------------------------------------------------
    # wspólne
    # ------------------------------------------------------------------

    def get_areas(self, spans: list[CodSpan]) -> list[CodArea]:
        return layout_grid.get_areas(spans)

    def filter_areas(self, name: str, areas: list[CodArea]) -> list[CodArea]:
        return layout_grid.filter_areas(name, areas)

    def map_area_colors(self, areas: list[CodArea], colors: dict[str, str]) -> dict[str, str]:
        return layout_grid.map_area_colors(areas, colors)

    def validate_formula_size(self, formula: CodFormula | None) -> validator.SizeErrors | None:
        return validator.validate_formula_size(formula)

    def validate_formula(self, text: str | None) -> validator.SizeErrors | None:
        return validator.validate_formula(text, self.parse_formula)
