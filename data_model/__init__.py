"""
data_model — struktury danych formuły układu kodykologicznego.

Użycie:
  from data_model import CodFormula, CodSpan, CodValue, ParseResult, ...

Moduły:
  common  — Number, LayoutUnit, CodValue, CodSpan, parse_number, format_number
  formula — CodFormula, CodArea
  errors  — ParsingError, ParseErrorCode, ParseResult

Mapowanie na model wymiany (JSON, klucze camelCase):
  type    → str ("BO" / "IT")
  unit    → "mm" | "cm" | "in"
  height  → CodValue
  width   → CodValue
  spans   → list[CodSpan]  (najpierw pionowe, potem poziome)
"""

from .common import (
    Number,
    TEXT_TYPE,
    LayoutUnit,
    CodValue,
    CodSpan,
    parse_number,
    format_number,
)
from .formula import (
    CodFormula,
    CodArea,
)
from .errors import (
    ParseErrorCode,
    ParsingError,
    ParseResult,
)

__all__ = [
    # common
    "Number",
    "TEXT_TYPE",
    "LayoutUnit",
    "CodValue",
    "CodSpan",
    "parse_number",
    "format_number",
    # formula
    "CodFormula",
    "CodArea",
    # errors
    "ParseErrorCode",
    "ParsingError",
    "ParseResult",
]
