# src/smartodo/dates/lexer.py

"""
Scanning primitives shared by the date grammars.

Every Cursor method either advances the position on success or leaves it
untouched on failure, so a caller can try one grammar after another on the
same input.
"""

from __future__ import annotations

WEEKDAY_NAMES = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

MIN_NAME_PREFIX = 3
DIGITS = "0123456789"


class Cursor:
    """Read position over a single input string."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    def __repr__(self) -> str:
        return f"Cursor({self.text!r}, pos={self.pos})"

    @property
    def rest(self) -> str:
        return self.text[self.pos :]

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def skip_whitespace(self) -> None:
        while not self.at_end() and self.peek().isspace():
            self.pos += 1

    def match(self, literal: str) -> bool:
        """Case-insensitive literal prefix match."""
        end = self.pos + len(literal)
        if self.text[self.pos : end].lower() == literal.lower():
            self.pos = end
            return True
        return False

    def keyword(self, word: str) -> bool:
        """Like match(), but the next character must not be a letter."""
        start = self.pos
        if not self.match(word):
            return False
        if self.peek().isalpha():
            self.pos = start
            return False
        return True

    def word(self) -> str:
        """Consume a run of letters (possibly empty) and return it lowercased."""
        start = self.pos
        while not self.at_end() and self.peek().isalpha():
            self.pos += 1
        return self.text[start : self.pos].lower()

    def integer(self) -> int | None:
        """Scan an unsigned decimal integer. No digits -> None, nothing consumed."""
        start = self.pos
        n = len(self.text)
        end = start
        while end < n and self.text[end] in DIGITS:
            end += 1
        if end == start:
            return None
        self.pos = end
        return int(self.text[start:end])

    def weekday(self) -> int | None:
        """Weekday index (Monday=0) by 3+ letter abbreviation."""
        return self._name_index(WEEKDAY_NAMES)

    def month(self) -> int | None:
        """Month number (1..12) by 3+ letter abbreviation."""
        idx = self._name_index(MONTH_NAMES)
        return None if idx is None else idx + 1

    def _name_index(self, names: tuple[str, ...]) -> int | None:
        start = self.pos
        candidate = self.word()
        self.pos = start
        if len(candidate) < MIN_NAME_PREFIX:
            return None

        for idx, name in enumerate(names):
            if not candidate.startswith(name[:MIN_NAME_PREFIX]):
                continue
            # Longest common prefix with the full name is consumed; any
            # remaining letters stay as trailing text.
            n = MIN_NAME_PREFIX
            while n < len(candidate) and n < len(name) and candidate[n] == name[n]:
                n += 1
            self.pos = start + n
            return idx
        return None
