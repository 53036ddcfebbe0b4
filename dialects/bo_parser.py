"""
dialects/bo_parser.py — parser dialektu BO.

Gramatyka (po preprocessingu, białe znaki wokół tokenów dowolne):

    formula   := [unit ws] size "=" v_spans " x "|" × " h_spans
    unit      := "mm" | "cm" | "in"
    size      := dimension (" x " | " × ") dimension
    dimension := ["("] number [")"] ["[" number "]"] [":" label]
    spans     := [divider] dimension (divider dimension)* [divider]
    divider   := "/" (margines) | "|" (tekst)

Pierwszy token listy spanów ma niejawny dzielnik "/". Typ spanu wynika
z dzielnika bezpośrednio przed nim. Etykiety wymiarów arkusza są
akceptowane, ale pomijane.
"""

from __future__ import annotations

import logging
from dataclasses import asdict

from data_model import (
    TEXT_TYPE,
    CodFormula,
    CodSpan,
    CodValue,
    LayoutUnit,
    ParseErrorCode,
    ParsingError,
    parse_number,
)

from .preprocess import preprocess_formula
from .scanner import Scanner

logger = logging.getLogger(__name__)

BO_TYPE = "BO"

_X_SEPARATORS = (" x ", " × ")
_DIVIDERS     = "/|"


class _BoParser:
    """Parser jednej formuły. Pozycje błędów dotyczą tekstu po preprocessingu."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.text   = preprocess_formula(source)

    def _error(
        self,
        message: str,
        code: ParseErrorCode,
        index: int | None = None,
        length: int | None = None,
    ) -> ParsingError:
        return ParsingError(message, self.source, index, length, code)

    # ------------------------------------------------------------------
    # formuła
    # ------------------------------------------------------------------

    def parse(self) -> CodFormula:
        text = self.text
        s = Scanner(text)
        s.skip_ws()

        unit = LayoutUnit.MM
        for candidate in LayoutUnit:
            start = s.pos
            if s.accept_word(candidate.value) and s.peek().isspace():
                unit = candidate
                s.skip_ws()
                break
            s.pos = start

        eq = text.find("=", s.pos)
        if eq == -1:
            raise self._error(
                "Invalid formula (expecting =)",
                ParseErrorCode.MISSING_SEPARATOR,
                s.pos, len(text) - s.pos,
            )

        height, width = self._parse_size(s.pos, eq)

        s.pos = eq + 1
        s.skip_ws()
        x_index, separator = s.find(*_X_SEPARATORS)
        if x_index == -1:
            raise self._error(
                "Invalid formula (expecting x or ×)",
                ParseErrorCode.MISSING_SEPARATOR,
                eq + 1, len(text) - eq - 1,
            )

        h_start = x_index + len(separator)
        v_spans = self._parse_spans(s.pos, x_index, horizontal=False)
        h_spans = self._parse_spans(h_start, len(text), horizontal=True)
        if not h_spans:
            raise self._error(
                "Invalid formula (expecting horizontal spans)",
                ParseErrorCode.MISSING_SPANS,
                h_start, len(text) - h_start,
            )

        logger.debug(
            "BO: %d spanów pionowych, %d poziomych", len(v_spans), len(h_spans)
        )
        return CodFormula(
            type=BO_TYPE,
            unit=unit,
            height=height,
            width=width,
            spans=v_spans + h_spans,
        )

    # ------------------------------------------------------------------
    # rozmiar i wymiary
    # ------------------------------------------------------------------

    def _parse_size(self, start: int, end: int) -> tuple[CodValue, CodValue]:
        x_index, separator = Scanner(self.text, start, end).find(*_X_SEPARATORS)
        if x_index == -1:
            raise self._error(
                "Invalid size format",
                ParseErrorCode.INVALID_SIZE_FORMAT,
                start, end - start,
            )
        height = self._parse_dimension(start, x_index)
        width  = self._parse_dimension(x_index + len(separator), end)
        # etykiety wymiarów arkusza nie są częścią modelu
        height.label = None
        width.label  = None
        return height, width

    def _parse_dimension(self, start: int, end: int) -> CodValue:
        """Parsuje jeden wymiar zajmujący cały zakres [start, end)."""
        raw   = self.text[start:end]
        token = raw.strip()
        token_start = start + (len(raw) - len(raw.lstrip()))

        def invalid() -> ParsingError:
            return self._error(
                f"Invalid dimension: {token}",
                ParseErrorCode.INVALID_DIMENSION,
                token_start, len(token),
            )

        s = Scanner(self.text, token_start, token_start + len(token))
        paren = s.accept("(") is not None
        number = s.number()
        if number is None:
            raise invalid()
        s.accept(")")
        s.skip_ws()

        is_original: bool | None = not paren
        original_value = None
        if s.accept("["):
            original = s.number()
            if original is None or not s.accept("]"):
                raise invalid()
            original_value = parse_number(original)
            is_original = None

        label = None
        if s.accept(":"):
            label_start = s.pos
            while not s.at_end() and not s.peek().isspace():
                s.pos += 1
            if s.pos == label_start:
                raise invalid()
            label = self.text[label_start:s.pos]

        s.skip_ws()
        if not s.at_end():
            raise invalid()

        return CodValue(
            value=parse_number(number),
            is_original=is_original,
            original_value=original_value,
            label=label,
        )

    # ------------------------------------------------------------------
    # listy spanów
    # ------------------------------------------------------------------

    def _parse_spans(self, start: int, end: int, horizontal: bool) -> list[CodSpan]:
        s = Scanner(self.text, start, end)
        s.skip_ws()
        if s.at_end():
            return []

        spans: list[CodSpan] = []
        divider = s.accept(_DIVIDERS) or "/"
        while True:
            token_start = s.pos
            token = s.until(_DIVIDERS)
            token_end = s.pos
            next_divider = s.accept(_DIVIDERS)

            # dzielnik kończący listę
            if next_divider is None and not token.strip():
                break

            value = self._parse_dimension(token_start, token_end)
            spans.append(CodSpan(
                **asdict(value),
                type=TEXT_TYPE if divider == "|" else None,
                is_horizontal=horizontal,
            ))

            if next_divider is None:
                break
            divider = next_divider
        return spans


def parse_bo_formula(text: str) -> CodFormula:
    """
    Parsuje formułę BO.

    Raises:
        ParsingError z pozycją błędnego fragmentu.
    """
    return _BoParser(text).parse()
