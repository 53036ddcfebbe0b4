"""
dialects/registry.py — wybór usługi po identyfikatorze dialektu.

Tekst formuły może zaczynać się od prefiksu dialektu, np.
"$IT 250 × 160 = ..."; split_dialect_prefix go odcina.
"""

from __future__ import annotations

import logging
import re

from .base import CodLayoutFormulaService
from .bo import BoLayoutFormulaService
from .it import ItLayoutFormulaService

logger = logging.getLogger(__name__)

_SERVICES: dict[str, CodLayoutFormulaService] = {
    service.type: service
    for service in (BoLayoutFormulaService(), ItLayoutFormulaService())
}

DIALECT_TYPES: tuple[str, ...] = tuple(_SERVICES)

_PREFIX_RE = re.compile(r"^\s*\$([A-Za-z]+)\s+")


def get_service(type: str) -> CodLayoutFormulaService:
    """
    Zwraca usługę dialektu (bez rozróżniania wielkości liter).

    Raises:
        KeyError dla nieznanego dialektu.
    """
    try:
        return _SERVICES[type.strip().upper()]
    except KeyError:
        raise KeyError(
            f"Nieznany dialekt formuły: '{type}' (dostępne: {', '.join(DIALECT_TYPES)})"
        ) from None


def split_dialect_prefix(text: str, default: str = "BO") -> tuple[str, str]:
    """
    Odcina prefiks "$TYP " z tekstu formuły.

    Returns:
        (typ dialektu wielkimi literami, tekst formuły bez prefiksu);
        bez prefiksu typem jest default.
    """
    m = _PREFIX_RE.match(text)
    if not m:
        return default.upper(), text
    dialect = m.group(1).upper()
    logger.debug("Prefiks dialektu: %s", dialect)
    return dialect, text[m.end():]
