"""
Wspólne typy pierwotne formuły układu: jednostka, wartość, span.

Mapowanie na model wymiany (JSON):
  CodValue → {value, isOriginal?, originalValue?, label?}
  CodSpan  → CodValue + {type?, isHorizontal}
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeAlias

# ---------------------------------------------------------------------------
# Liczby
# ---------------------------------------------------------------------------

# Wartość wymiaru: int dla zapisu całkowitego, float dla dziesiętnego.
Number: TypeAlias = int | float

_NUMBER_RE = re.compile(r"^[0-9]+(?:\.[0-9]+)?$")


def parse_number(text: str) -> Number:
    """
    Zamienia tekst liczby ("12", "12.5") na int lub float.

    Raises:
        ValueError gdy tekst nie jest liczbą bez znaku.
    """
    if not _NUMBER_RE.match(text):
        raise ValueError(f"Nieprawidłowa liczba: '{text}'")
    if "." in text:
        return float(text)
    return int(text)


def format_number(value: Number) -> str:
    """Formatuje liczbę jak JavaScript: 30.0 → "30", 12.5 → "12.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ---------------------------------------------------------------------------
# Jednostka
# ---------------------------------------------------------------------------

class LayoutUnit(StrEnum):
    """Jednostka wymiarów formuły."""
    MM = "mm"
    CM = "cm"
    IN = "in"


def expect_object(d: Any, what: str) -> dict[str, Any]:
    """
    Sprawdza, że fragment modelu JSON jest obiektem.

    Raises:
        ValueError gdy d nie jest słownikiem.
    """
    if not isinstance(d, dict):
        raise ValueError(f"{what}: expected an object, got {type(d).__name__}")
    return d


# ---------------------------------------------------------------------------
# CodValue
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class CodValue:
    """
    Wartość liczbowa wymiaru (np. wysokość arkusza).

    - value:          wartość bieżąca
    - is_original:    True gdy wartość jest oryginalna; None gdy nieustalone
    - original_value: wartość oryginalna, jeśli różna od bieżącej
                      (wtedy is_original pozostaje None)
    - label:          etykieta dziedziczona przez obszar siatki, np. "initials"
    """
    value: Number
    is_original: bool | None = None
    original_value: Number | None = None
    label: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"value": self.value}
        if self.is_original is not None:
            d["isOriginal"] = self.is_original
        if self.original_value is not None:
            d["originalValue"] = self.original_value
        if self.label is not None:
            d["label"] = self.label
        return d

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> CodValue:
        d = expect_object(d, "value")
        return cls(
            value=d.get("value", 0),
            is_original=d.get("isOriginal"),
            original_value=d.get("originalValue"),
            label=d.get("label"),
        )


# ---------------------------------------------------------------------------
# CodSpan
# ---------------------------------------------------------------------------

# Typ spanu przeznaczonego na tekst.
TEXT_TYPE = "text"


@dataclass(slots=True)
class CodSpan(CodValue):
    """
    Span: jeden odcinek marginesu, tekstu lub odstępu wzdłuż jednej osi.

    - type:          "text" dla obszaru tekstu, None dla pustego marginesu
    - is_horizontal: False = mierzony wzdłuż wysokości, True = wzdłuż szerokości
    """
    type: str | None = None
    is_horizontal: bool = False

    @property
    def is_text(self) -> bool:
        return self.type == TEXT_TYPE

    def to_dict(self) -> dict[str, Any]:
        d = CodValue.to_dict(self)
        if self.type is not None:
            d["type"] = self.type
        d["isHorizontal"] = self.is_horizontal
        return d

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> CodSpan:
        d = expect_object(d, "span")
        return cls(
            value=d.get("value", 0),
            is_original=d.get("isOriginal"),
            original_value=d.get("originalValue"),
            label=d.get("label"),
            type=d.get("type"),
            is_horizontal=bool(d.get("isHorizontal", False)),
        )
