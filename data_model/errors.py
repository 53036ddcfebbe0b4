"""
data_model/errors.py — błędy parsowania i wynik parsowania.

ParsingError — wyjątek z pozycją błędu w znormalizowanym wejściu.
ParseResult  — wynik oznaczony: formuła albo błąd (nigdy oba).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from .formula import CodFormula


class ParseErrorCode(StrEnum):
    """Stałe kody błędów parsera (po jednym na rodzaj błędu)."""

    # Ograniczniki i separatory
    MALFORMED_DELIMITERS   = "E_MALFORMED_DELIMITERS"
    MISSING_SEPARATOR      = "E_MISSING_SEPARATOR"
    MISSING_SPANS          = "E_MISSING_SPANS"

    # Wymiary (BO)
    INVALID_DIMENSION      = "E_INVALID_DIMENSION"
    INVALID_SIZE_FORMAT    = "E_INVALID_SIZE_FORMAT"

    # Wysokość i szerokość (IT)
    INVALID_HEIGHT_FORMAT  = "E_INVALID_HEIGHT_FORMAT"
    MISSING_MARGINS        = "E_MISSING_MARGINS"
    TOO_MANY_NUMBERS       = "E_TOO_MANY_NUMBERS"
    AMBIGUOUS_COLUMN       = "E_AMBIGUOUS_COLUMN"
    NO_WIDTH               = "E_NO_WIDTH"
    EMPTY_COLUMN           = "E_EMPTY_COLUMN"


class ParsingError(Exception):
    """
    Błąd parsowania formuły.

    - message: komunikat (dokładny tekst jest kontraktem dla edytorów)
    - input:   wejście, do którego odnoszą się index/length
               (IT: bez białych znaków; BO: tekst po preprocessingu,
               tej samej długości co oryginał)
    - index:   0-based początek błędnego fragmentu (opcjonalnie)
    - length:  długość błędnego fragmentu (opcjonalnie)
    - code:    ParseErrorCode
    """

    def __init__(
        self,
        message: str,
        input: str,
        index: int | None = None,
        length: int | None = None,
        code: ParseErrorCode | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.input   = input
        self.index   = index
        self.length  = length
        self.code    = code

    def __repr__(self) -> str:
        return (
            f"ParsingError({self.message!r}, index={self.index}, "
            f"length={self.length}, code={self.code})"
        )

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"message": self.message, "input": self.input}
        if self.index is not None:
            d["index"] = self.index
        if self.length is not None:
            d["length"] = self.length
        if self.code is not None:
            d["code"] = str(self.code)
        return d


@dataclass(slots=True)
class ParseResult:
    """
    Wynik parsowania przekazywany przez publiczne API.

    - result: sparsowana formuła; None bez błędu = brak wejścia
    - error:  błąd parsowania (wtedy result jest None)
    """

    result: CodFormula | None = None
    error: ParsingError | None = None

    @property
    def is_valid(self) -> bool:
        """True gdy nie ma błędu (także dla pustego wejścia)."""
        return self.error is None
