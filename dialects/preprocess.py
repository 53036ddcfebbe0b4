"""
dialects/preprocess.py — preprocessing formuł rodziny BO.

Kroki:
  1. Samodzielny token "-" (brak wartości) → "0".
  2. Liczba "//" musi być parzysta.
  3. Kolejne "//" zamieniane naprzemiennie na "| " (otwarcie obszaru
     tekstu) i "/ " (zamknięcie).

Długość tekstu się nie zmienia, więc pozycje błędów liczone na tekście
po preprocessingu wskazują te same znaki w tekście użytkownika.
"""

from __future__ import annotations

import re

from data_model import ParseErrorCode, ParsingError

# "-" poprzedzony początkiem/białym znakiem/dzielnikiem/"=" i zakończony
# końcem/białym znakiem/dzielnikiem.
_DASH_RE = re.compile(r"(?<![^\s/|=])-(?![^\s/|])")

OPEN_TEXT  = "| "
CLOSE_TEXT = "/ "


def preprocess_formula(text: str) -> str:
    """
    Zwraca tekst formuły BO gotowy do parsowania.

    Raises:
        ParsingError gdy liczba "//" jest nieparzysta (bez pozycji).
    """
    source = text
    text = _DASH_RE.sub("0", text)

    if text.count("//") % 2 != 0:
        raise ParsingError(
            "Odd number of '//' in formula",
            source,
            code=ParseErrorCode.MALFORMED_DELIMITERS,
        )

    parts = text.split("//")
    out: list[str] = [parts[0]]
    for i, part in enumerate(parts[1:]):
        out.append(OPEN_TEXT if i % 2 == 0 else CLOSE_TEXT)
        out.append(part)
    return "".join(out)
