"""
Struktury danych formuły układu (formula) i obszarów siatki (area).

Mapowanie na model wymiany (JSON):
  CodFormula → {type, unit, height, width, spans}
  CodArea    → {y, x, rowIndexes, colIndexes}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .common import CodSpan, CodValue, LayoutUnit, expect_object

# ---------------------------------------------------------------------------
# CodFormula
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class CodFormula:
    """
    Model formuły układu, wspólny dla wszystkich dialektów.

    - type:   identyfikator dialektu, np. "BO" lub "IT"
    - unit:   jednostka wymiarów
    - height: zadeklarowana wysokość arkusza
    - width:  zadeklarowana szerokość arkusza
    - spans:  spany pionowe (góra → dół), a po nich poziome (lewo → prawo)

    Zadeklarowane height/width są wiążące; nie muszą równać się sumom
    spanów (to sprawdza osobno validator.validate_formula_size).
    """
    type: str
    unit: LayoutUnit = LayoutUnit.MM
    height: CodValue = field(default_factory=lambda: CodValue(0))
    width: CodValue = field(default_factory=lambda: CodValue(0))
    spans: list[CodSpan] = field(default_factory=list)

    @property
    def v_spans(self) -> list[CodSpan]:
        """Spany pionowe (wzdłuż wysokości) w kolejności zapisu."""
        return [s for s in self.spans if not s.is_horizontal]

    @property
    def h_spans(self) -> list[CodSpan]:
        """Spany poziome (wzdłuż szerokości) w kolejności zapisu."""
        return [s for s in self.spans if s.is_horizontal]

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "unit": str(self.unit),
            "height": self.height.to_dict(),
            "width": self.width.to_dict(),
            "spans": [s.to_dict() for s in self.spans],
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> CodFormula:
        """
        Buduje formułę ze słownika (po json.loads).

        Raises:
            ValueError dla nieznanej jednostki albo fragmentu, który nie
            jest obiektem JSON.
        """
        d = expect_object(d, "formula")
        return cls(
            type=str(d.get("type", "")),
            unit=LayoutUnit(d.get("unit") or LayoutUnit.MM),
            height=CodValue.from_dict(d.get("height") or {}),
            width=CodValue.from_dict(d.get("width") or {}),
            spans=[CodSpan.from_dict(s) for s in d.get("spans", [])],
        )


# ---------------------------------------------------------------------------
# CodArea
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class CodArea:
    """
    Komórka siatki: przecięcie jednego spanu pionowego i jednego poziomego.

    - y, x:        1-based numer wiersza i kolumny
    - row_indexes: etykieta i "$typ" spanu pionowego (w tej kolejności)
    - col_indexes: etykieta i "$typ" spanu poziomego
    """
    y: int
    x: int
    row_indexes: list[str] = field(default_factory=list)
    col_indexes: list[str] = field(default_factory=list)

    @property
    def name(self) -> str:
        """Adres komórki w postaci "@y_x"."""
        return f"@{self.y}_{self.x}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "y": self.y,
            "x": self.x,
            "rowIndexes": list(self.row_indexes),
            "colIndexes": list(self.col_indexes),
        }
