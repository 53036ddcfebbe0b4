"""
dialects/bo_builder.py — budowanie tekstu formuły BO z modelu.

Postać: "[unit ]H x W = v_spans x h_spans"

Wymiar:  "N", "(N)" gdy wartość nie jest oryginalna, " [O]" gdy znana
         wartość oryginalna, ":label" gdy span ma etykietę; oryginalne
         zero bez wartości oryginalnej i etykiety zapisywane jako "-".

Dzielniki:
  - ciąg spanów tekstu otoczony z obu stron marginesami: " // " przed,
    " | " wewnątrz, " // " po nim,
  - pozostałe spany tekstu: "|" (na początku listy "| "),
  - marginesy: " / ".
"""

from __future__ import annotations

from data_model import CodFormula, CodSpan, CodValue, format_number


def format_dimension(value: CodValue) -> str:
    if (
        value.is_original
        and value.value == 0
        and value.original_value is None
        and not value.label
    ):
        text = "-"
    else:
        text = format_number(value.value)
        if not value.is_original:
            text = f"({text})"
    if value.original_value is not None:
        text += f" [{format_number(value.original_value)}]"
    if value.label:
        text += f":{value.label}"
    return text


def _text_run_closed(spans: list[CodSpan], start: int) -> bool:
    """True gdy ciąg tekstu od start kończy się przed końcem listy."""
    i = start
    while i < len(spans) and spans[i].is_text:
        i += 1
    return i < len(spans)


def format_spans(spans: list[CodSpan]) -> str:
    out: list[str] = []
    closing = False
    for i, span in enumerate(spans):
        if span.is_text:
            if i == 0:
                out.append("| ")
            elif spans[i - 1].is_text:
                out.append(" | ")
            elif _text_run_closed(spans, i):
                out.append(" // ")
                closing = True
            else:
                out.append(" | ")
        elif i > 0:
            out.append(" // " if closing else " / ")
            closing = False
        out.append(format_dimension(span))
    return "".join(out)


def build_bo_formula(formula: CodFormula | None) -> str | None:
    """Zwraca tekst formuły BO; None dla braku modelu."""
    if formula is None:
        return None

    prefix = f"{formula.unit} " if formula.unit else ""
    return (
        f"{prefix}{format_dimension(formula.height)} x "
        f"{format_dimension(formula.width)} = "
        f"{format_spans(formula.v_spans)} x {format_spans(formula.h_spans)}"
    )
