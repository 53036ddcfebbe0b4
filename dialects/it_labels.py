"""
dialects/it_labels.py — zamknięty słownik etykiet formuły IT.

Etykieta IT to rola (ItRole) i — dla ról kolumnowych — numer kolumny.
Postać tekstowa ("margin-top", "col-3-width") występuje tylko na granicy
modelu (CodSpan.label); wewnątrz dialektu operujemy na ItLabel.

Etykiety statyczne:
  margin-top, head-e, head-w, area-height, foot-w, foot-e, margin-bottom,
  margin-left, margin-right
Etykiety kolumn (N ≥ 1):
  col-N-gap, col-N-left-e, col-N-left-w, col-N-width,
  col-N-right-e, col-N-right-w
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from data_model import TEXT_TYPE


class ItRole(StrEnum):
    """Rola spanu w formule IT. Sufiks -e = pusty, -w = zapisany."""
    # wysokość
    MARGIN_TOP    = "margin-top"
    HEAD_E        = "head-e"
    HEAD_W        = "head-w"
    AREA_HEIGHT   = "area-height"
    FOOT_W        = "foot-w"
    FOOT_E        = "foot-e"
    MARGIN_BOTTOM = "margin-bottom"
    # szerokość
    MARGIN_LEFT   = "margin-left"
    MARGIN_RIGHT  = "margin-right"
    # kolumny
    GAP           = "gap"
    LEFT_E        = "left-e"
    LEFT_W        = "left-w"
    WIDTH         = "width"
    RIGHT_E       = "right-e"
    RIGHT_W       = "right-w"


COLUMN_ROLES: frozenset[ItRole] = frozenset({
    ItRole.GAP,
    ItRole.LEFT_E,
    ItRole.LEFT_W,
    ItRole.WIDTH,
    ItRole.RIGHT_E,
    ItRole.RIGHT_W,
})

# Role obszarów przeznaczonych na tekst (span.type == "text").
TEXT_ROLES: frozenset[ItRole] = frozenset({
    ItRole.HEAD_W,
    ItRole.AREA_HEIGHT,
    ItRole.FOOT_W,
    ItRole.LEFT_W,
    ItRole.WIDTH,
    ItRole.RIGHT_W,
})

_STATIC_ROLES: dict[str, ItRole] = {
    r.value: r for r in ItRole if r not in COLUMN_ROLES
}

_COLUMN_LABEL_RE = re.compile(
    r"^col-([1-9][0-9]*)-(gap|left-e|left-w|width|right-e|right-w)$"
)


def role_type(role: ItRole) -> str | None:
    """Typ spanu wynikający z roli: "text" albo None."""
    return TEXT_TYPE if role in TEXT_ROLES else None


@dataclass(frozen=True, slots=True)
class ItLabel:
    """
    Etykieta IT: rola + numer kolumny (tylko dla ról kolumnowych).

    Raises (przy konstrukcji):
        ValueError gdy numer kolumny nie pasuje do roli.
    """
    role: ItRole
    column: int | None = None

    def __post_init__(self) -> None:
        if self.role in COLUMN_ROLES:
            if self.column is None or self.column < 1:
                raise ValueError(
                    f"Rola '{self.role}' wymaga numeru kolumny ≥ 1, "
                    f"podano {self.column}"
                )
        elif self.column is not None:
            raise ValueError(f"Rola '{self.role}' nie przyjmuje numeru kolumny")

    def __str__(self) -> str:
        if self.column is None:
            return self.role.value
        return f"col-{self.column}-{self.role.value}"

    @property
    def type(self) -> str | None:
        return role_type(self.role)

    @classmethod
    def parse(cls, label: str | None) -> ItLabel | None:
        """Zamienia tekst etykiety na ItLabel; None spoza słownika."""
        if not label:
            return None
        role = _STATIC_ROLES.get(label)
        if role is not None:
            return cls(role)
        m = _COLUMN_LABEL_RE.match(label)
        if m:
            return cls(ItRole(m.group(2)), int(m.group(1)))
        return None


def is_it_label(label: str | None) -> bool:
    return ItLabel.parse(label) is not None
