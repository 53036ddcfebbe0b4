"""
dialects/scanner.py — ręczny skaner tekstu formuły.

Scanner to kursor po fragmencie [pos, end) tekstu. Każda metoda albo
konsumuje dopasowanie i przesuwa kursor, albo zwraca None i zostawia
kursor bez zmian — dzięki temu gramatyki dialektów są zwykłym kodem
zstępującym z jawnie określoną zachłannością (liczby są zawsze czytane
w całości) i zakotwiczeniem (parser sam sprawdza at_end()).

Pozycje są zawsze bezwzględne względem pełnego tekstu.
"""

from __future__ import annotations

_DIGITS = "0123456789"


class Scanner:
    """Kursor po tekście formuły ograniczony do zakresu [pos, end)."""

    def __init__(self, text: str, pos: int = 0, end: int | None = None) -> None:
        self.text = text
        self.pos  = pos
        self.end  = len(text) if end is None else end

    def __repr__(self) -> str:
        return f"Scanner({self.text[self.pos:self.end]!r}, pos={self.pos})"

    def at_end(self) -> bool:
        return self.pos >= self.end

    def peek(self) -> str:
        """Bieżący znak lub "" na końcu zakresu."""
        return self.text[self.pos] if self.pos < self.end else ""

    def prev(self) -> str:
        """Znak przed kursorem lub "" na początku tekstu."""
        return self.text[self.pos - 1] if self.pos > 0 else ""

    def skip_ws(self) -> None:
        while self.pos < self.end and self.text[self.pos].isspace():
            self.pos += 1

    def accept(self, chars: str) -> str | None:
        """Konsumuje jeden znak, jeśli należy do chars."""
        ch = self.peek()
        if ch and ch in chars:
            self.pos += 1
            return ch
        return None

    def accept_word(self, word: str) -> bool:
        """Konsumuje dokładnie podany napis."""
        if self.text.startswith(word, self.pos) and self.pos + len(word) <= self.end:
            self.pos += len(word)
            return True
        return False

    def digits(self) -> str | None:
        """Konsumuje maksymalny ciąg cyfr."""
        start = self.pos
        while self.pos < self.end and self.text[self.pos] in _DIGITS:
            self.pos += 1
        return self.text[start:self.pos] if self.pos > start else None

    def number(self) -> str | None:
        """
        Konsumuje liczbę: cyfry, opcjonalnie '.' i cyfry.

        Kropka bez cyfr po niej nie jest konsumowana.
        """
        start = self.pos
        if self.digits() is None:
            return None
        if self.peek() == "." and self.pos + 1 < self.end and self.text[self.pos + 1] in _DIGITS:
            self.pos += 1
            self.digits()
        return self.text[start:self.pos]

    def until(self, chars: str) -> str:
        """Konsumuje wszystko do pierwszego znaku z chars (bez niego)."""
        start = self.pos
        while self.pos < self.end and self.text[self.pos] not in chars:
            self.pos += 1
        return self.text[start:self.pos]

    def find(self, *needles: str) -> tuple[int, str]:
        """
        Szuka najwcześniejszego wystąpienia dowolnego z napisów w zakresie.

        Nie przesuwa kursora. Zwraca (indeks, napis) albo (-1, "").
        """
        best, found = -1, ""
        for needle in needles:
            i = self.text.find(needle, self.pos, self.end)
            if i != -1 and (best == -1 or i < best):
                best, found = i, needle
        return best, found
