"""
dialects/it_builder.py — budowanie tekstu formuły IT z modelu.

Postać:
    H × W = mt[ / he] [[hw / ]ah[ / fw]][ fe /] mb × ml [kolumny] mr

Spany odnajdywane są po etykietach IT; spany bez etykiety ze słownika
są pomijane. Kolumny numerowane od 1 aż do pierwszej bez col-N-width.
"""

from __future__ import annotations

from data_model import CodFormula, CodSpan, format_number

from .it_labels import ItLabel, ItRole


def _num(span: CodSpan) -> str:
    return format_number(span.value)


class _LabelIndex:
    """Pierwszy span dla każdej etykiety IT."""

    def __init__(self, spans: list[CodSpan]) -> None:
        self._spans: dict[ItLabel, CodSpan] = {}
        for span in spans:
            label = ItLabel.parse(span.label)
            if label is not None:
                self._spans.setdefault(label, span)

    def get(self, role: ItRole, column: int | None = None) -> CodSpan | None:
        return self._spans.get(ItLabel(role, column))

    def side(self, column: int, written: ItRole, empty: ItRole) -> tuple[CodSpan | None, bool]:
        """Margines kolumny: (span, czy pusty)."""
        span = self.get(written, column)
        if span is not None:
            return span, False
        span = self.get(empty, column)
        return span, span is not None


def _build_height(index: _LabelIndex) -> str:
    mt = index.get(ItRole.MARGIN_TOP)
    he = index.get(ItRole.HEAD_E)
    hw = index.get(ItRole.HEAD_W)
    ah = index.get(ItRole.AREA_HEIGHT)
    fw = index.get(ItRole.FOOT_W)
    fe = index.get(ItRole.FOOT_E)
    mb = index.get(ItRole.MARGIN_BOTTOM)

    out: list[str] = []
    if mt:
        out.append(_num(mt))
    if he:
        out.append(f" / {_num(he)}")
    out.append(" [")
    if hw:
        out.append(f"{_num(hw)} / ")
    if ah:
        out.append(_num(ah))
    if fw:
        out.append(f" / {_num(fw)}")
    out.append("]")
    if fe:
        out.append(f" {_num(fe)} /")
    if mb:
        out.append(f" {_num(mb)}")
    return "".join(out)


def _build_columns(index: _LabelIndex) -> str:
    columns: list[str] = []
    trailing = ""
    n = 1
    while (width := index.get(ItRole.WIDTH, n)) is not None:
        left, left_empty = index.side(n, ItRole.LEFT_W, ItRole.LEFT_E)
        right, right_empty = index.side(n, ItRole.RIGHT_W, ItRole.RIGHT_E)
        gap = index.get(ItRole.GAP, n)
        last = index.get(ItRole.WIDTH, n + 1) is None

        parts: list[str] = []
        if left:
            parts.append(_num(left) + ("*" if left_empty else ""))
        parts.append(_num(width))
        if right:
            # pusty prawy margines ostatniej pełnej kolumny: "L / W] R /"
            if last and left and right_empty and gap is None:
                trailing = f" {_num(right)} /"
            else:
                parts.append(_num(right) + ("*" if right_empty else ""))

        column = " / ".join(parts)
        if gap:
            column += f" ({_num(gap)}) "
        columns.append(column)
        n += 1
    return "[" + "".join(columns) + "]" + trailing


def _build_width(index: _LabelIndex) -> str:
    ml = index.get(ItRole.MARGIN_LEFT)
    mr = index.get(ItRole.MARGIN_RIGHT)

    out: list[str] = []
    if ml:
        out.append(f"{_num(ml)} ")
    out.append(_build_columns(index))
    if mr:
        out.append(f" {_num(mr)}")
    return "".join(out)


def build_it_formula(formula: CodFormula | None) -> str | None:
    """Zwraca tekst formuły IT; None dla braku modelu."""
    if formula is None:
        return None

    index = _LabelIndex(formula.spans)
    return (
        f"{format_number(formula.height.value)} × "
        f"{format_number(formula.width.value)} = "
        f"{_build_height(index)} × {_build_width(index)}"
    )
