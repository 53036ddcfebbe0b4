"""
dialects/it_parser.py — parser dialektu IT.

Parser pracuje na tekście bez białych znaków; pozycje błędów dotyczą
tego tekstu.

    formula := H ("x"|"X"|"×") W "=" height ("x"|"X"|"×") width

    height  := mt ["/" he] "[" [hw "/"] ah ["/" fw] "]" [fe "/"] mb
    width   := ml columns mr
    columns := ["["] column ("(" gap ")" column)* ["]"]

Kolumna to 1–3 liczby, każda z opcjonalnym "]" przed i "*" lub "[" po:
"*" oznacza pusty margines kolumny, nawiasy kwadratowe odgradzają tekst.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from data_model import (
    CodFormula,
    CodSpan,
    CodValue,
    LayoutUnit,
    ParseErrorCode,
    ParsingError,
    parse_number,
)

from .it_labels import ItLabel, ItRole
from .scanner import Scanner

logger = logging.getLogger(__name__)

IT_TYPE = "IT"

_WS_RE   = re.compile(r"\s+")
_X_CHARS = "xX×"
_DIGITS  = "0123456789"


@dataclass(frozen=True, slots=True)
class _ColumnNumber:
    """Liczba w segmencie kolumny z jej znacznikami."""
    value: int
    after_bracket: bool     # poprzedzona "]"
    starred: bool           # zakończona "*"
    before_bracket: bool    # zakończona "["


def _span(value: int, role: ItRole, column: int | None = None, *, horizontal: bool) -> CodSpan:
    label = ItLabel(role, column)
    return CodSpan(
        value=value,
        label=str(label),
        type=label.type,
        is_horizontal=horizontal,
    )


class _ItParser:

    def __init__(self, source: str) -> None:
        self.text = _WS_RE.sub("", source)

    def _error(
        self,
        message: str,
        code: ParseErrorCode,
        index: int,
        length: int,
    ) -> ParsingError:
        return ParsingError(message, self.text, index, length, code)

    # ------------------------------------------------------------------
    # formuła
    # ------------------------------------------------------------------

    def parse(self) -> CodFormula:
        text = self.text
        s = Scanner(text)

        height = s.digits()
        sep    = height and s.accept(_X_CHARS)
        width  = sep and s.digits()
        eq     = width and s.accept("=")
        h_start = s.pos
        s.until(_X_CHARS)
        h_end = s.pos
        if not eq or h_end == h_start or not s.accept(_X_CHARS) or s.at_end():
            raise self._error(
                "Invalid formula (expected H x W = height x width)",
                ParseErrorCode.MISSING_SEPARATOR,
                0, len(text),
            )

        spans = self._parse_height(h_start, h_end)
        spans += self._parse_width(s.pos, len(text))

        return CodFormula(
            type=IT_TYPE,
            unit=LayoutUnit.MM,
            height=CodValue(parse_number(height)),
            width=CodValue(parse_number(width)),
            spans=spans,
        )

    # ------------------------------------------------------------------
    # wysokość
    # ------------------------------------------------------------------

    @staticmethod
    def _slash_numbers(s: Scanner) -> list[int] | None:
        """Liczby rozdzielone "/"; None gdy po "/" brak liczby."""
        first = s.digits()
        if first is None:
            return []
        numbers = [int(first)]
        while s.accept("/"):
            n = s.digits()
            if n is None:
                return None
            numbers.append(int(n))
        return numbers

    def _parse_height(self, start: int, end: int) -> list[CodSpan]:
        s = Scanner(self.text, start, end)
        invalid = self._error(
            "Invalid height format",
            ParseErrorCode.INVALID_HEIGHT_FORMAT,
            start, end - start,
        )

        mt = s.digits()
        if mt is None:
            raise invalid
        he = None
        if s.accept("/"):
            he = s.digits()
            if he is None:
                raise invalid
        if not s.accept("["):
            raise invalid
        inner = self._slash_numbers(s)
        if not inner or len(inner) > 3 or not s.accept("]"):
            raise invalid
        outer = self._slash_numbers(s)
        if not outer or len(outer) > 2 or not s.at_end():
            raise invalid

        hw = fw = fe = None
        if len(inner) == 1:
            (ah,) = inner
        elif len(inner) == 2:
            hw, ah = inner
        else:
            hw, ah, fw = inner
        if len(outer) == 1:
            (mb,) = outer
        else:
            fe, mb = outer

        # [N/M] z N > M czytamy jako [obszar/stopka], nie [nagłówek/obszar]
        if len(inner) == 2 and hw > ah:
            logger.debug("IT: [%d/%d] → area-height=%d, foot-w=%d", hw, ah, hw, ah)
            ah, fw = hw, ah
            hw = None

        spans = [_span(int(mt), ItRole.MARGIN_TOP, horizontal=False)]
        if he is not None:
            spans.append(_span(int(he), ItRole.HEAD_E, horizontal=False))
        if hw is not None:
            spans.append(_span(hw, ItRole.HEAD_W, horizontal=False))
        spans.append(_span(ah, ItRole.AREA_HEIGHT, horizontal=False))
        if fw is not None:
            spans.append(_span(fw, ItRole.FOOT_W, horizontal=False))
        if fe is not None:
            spans.append(_span(fe, ItRole.FOOT_E, horizontal=False))
        spans.append(_span(mb, ItRole.MARGIN_BOTTOM, horizontal=False))
        return spans

    # ------------------------------------------------------------------
    # szerokość
    # ------------------------------------------------------------------

    def _parse_width(self, start: int, end: int) -> list[CodSpan]:
        text = self.text

        ml_end = start
        while ml_end < end and text[ml_end] in _DIGITS:
            ml_end += 1
        mr_start = end
        while mr_start > ml_end and text[mr_start - 1] in _DIGITS:
            mr_start -= 1
        if ml_end == start or mr_start == end:
            raise self._error(
                "Missing margins in width details",
                ParseErrorCode.MISSING_MARGINS,
                start, end - start,
            )

        spans = [_span(int(text[start:ml_end]), ItRole.MARGIN_LEFT, horizontal=True)]
        spans += self._parse_columns(*self._unwrap(ml_end, mr_start))
        spans.append(_span(int(text[mr_start:end]), ItRole.MARGIN_RIGHT, horizontal=True))
        return spans

    def _unwrap(self, start: int, end: int) -> tuple[int, int]:
        """Zdejmuje zewnętrzne [...], jeśli obejmują cały zakres."""
        text = self.text
        if end - start < 2 or text[start] != "[" or text[end - 1] != "]":
            return start, end
        depth = 0
        for i in range(start, end):
            if text[i] == "[":
                depth += 1
            elif text[i] == "]":
                depth -= 1
                if depth == 0 and i < end - 1:
                    return start, end
        return (start + 1, end - 1) if depth == 0 else (start, end)

    def _parse_columns(self, start: int, end: int) -> list[CodSpan]:
        text = self.text
        spans: list[CodSpan] = []
        column = 0
        segment_start = i = start
        while i < end:
            if text[i] == "(":
                s = Scanner(text, i + 1, end)
                gap = s.digits()
                if gap is not None and s.accept(")"):
                    column += 1
                    spans += self._parse_column(segment_start, i, column)
                    spans.append(_span(int(gap), ItRole.GAP, column, horizontal=True))
                    segment_start = i = s.pos
                    continue
            i += 1
        # "15 [] 15": pusty zakres to pusta kolumna 1
        if segment_start < end or column == 0:
            column += 1
            spans += self._parse_column(segment_start, end, column)
        return spans

    def _parse_column(self, start: int, end: int, column: int) -> list[CodSpan]:
        segment = self.text[start:end]

        def error(message: str, code: ParseErrorCode) -> ParsingError:
            return self._error(message, code, start, end - start)

        numbers: list[_ColumnNumber] = []
        s = Scanner(self.text, start, end)
        while not s.at_end():
            if s.peek() not in _DIGITS:
                s.pos += 1
                continue
            after_bracket = s.pos > start and s.prev() == "]"
            value = int(s.digits())
            numbers.append(_ColumnNumber(
                value=value,
                after_bracket=after_bracket,
                starred=s.accept("*") is not None,
                before_bracket=s.accept("[") is not None,
            ))
            if len(numbers) > 3:
                raise error(
                    f'Too many numbers in column {column}: "{segment}"',
                    ParseErrorCode.TOO_MANY_NUMBERS,
                )

        def col(value: int, role: ItRole) -> CodSpan:
            return _span(value, role, column, horizontal=True)

        match numbers:
            case [left, width, right]:
                left_empty  = left.starred or left.before_bracket
                right_empty = right.starred or right.after_bracket
                return [
                    col(left.value, ItRole.LEFT_E if left_empty else ItRole.LEFT_W),
                    col(width.value, ItRole.WIDTH),
                    col(right.value, ItRole.RIGHT_E if right_empty else ItRole.RIGHT_W),
                ]

            case [a, b]:
                if a.starred and b.starred:
                    raise error(
                        f'No width in column {column}: "{segment}"',
                        ParseErrorCode.NO_WIDTH,
                    )
                if a.starred:
                    return [col(a.value, ItRole.LEFT_E), col(b.value, ItRole.WIDTH)]
                if b.starred:
                    return [col(a.value, ItRole.WIDTH), col(b.value, ItRole.RIGHT_E)]
                if a.value == b.value:
                    raise error(
                        f"Ambiguous values for column {column}: {segment}",
                        ParseErrorCode.AMBIGUOUS_COLUMN,
                    )
                # większa z dwóch liczb to szerokość kolumny
                if a.value > b.value:
                    right = ItRole.RIGHT_E if b.after_bracket else ItRole.RIGHT_W
                    return [col(a.value, ItRole.WIDTH), col(b.value, right)]
                left = ItRole.LEFT_E if a.before_bracket else ItRole.LEFT_W
                return [col(a.value, left), col(b.value, ItRole.WIDTH)]

            case [width]:
                return [col(width.value, ItRole.WIDTH)]

            case _:
                raise error(
                    f'Empty column {column}: "{segment}"',
                    ParseErrorCode.EMPTY_COLUMN,
                )


def parse_it_formula(text: str) -> CodFormula:
    """
    Parsuje formułę IT.

    Raises:
        ParsingError z pozycją w tekście bez białych znaków.
    """
    return _ItParser(text).parse()
