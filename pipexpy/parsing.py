"""Splitting a command string into arguments with shell-like quoting."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .chars import is_space

_QUOTES = ("'", '"')
_ESCAPE = "\\"


@dataclass
class _QuoteState:
    """The quote currently open, if any."""

    quote: str | None = None

    @property
    def inside(self) -> bool:
        return self.quote is not None

    def toggle(self, char: str) -> None:
        if self.quote is None:
            self.quote = char
        elif char == self.quote:
            self.quote = None


def is_blank(text: str) -> bool:
    """True if text is empty or holds only whitespace."""
    return all(is_space(ch) for ch in text)


def _skip_spaces(text: str, pos: int) -> int:
    while pos < len(text) and is_space(text[pos]):
        pos += 1
    return pos


def _extract(text: str, pos: int) -> tuple[str, int]:
    """Read one argument starting at pos; return it and the start of the next."""
    state = _QuoteState()
    pieces: list[str] = []
    end = len(text)
    while pos < end and (state.inside or not is_space(text[pos])):
        char = text[pos]
        if char == _ESCAPE and state.quote != "'":
            pos += 1
            if pos >= end:
                break
            pieces.append(text[pos])
        elif char in _QUOTES and (not state.inside or char == state.quote):
            state.toggle(char)
        else:
            pieces.append(char)
        pos += 1
    return "".join(pieces), _skip_spaces(text, pos)


def _arguments(text: str) -> Iterator[str]:
    pos = _skip_spaces(text, 0)
    while pos < len(text):
        argument, pos = _extract(text, pos)
        yield argument


def parse_cmd(text: str) -> list[str]:
    """Split text into arguments.

    Whitespace separates arguments unless quoted. Single and double quotes
    group text and are removed; a backslash outside single quotes makes the
    next character literal. An unclosed quote runs to the end of the text.
    """
    return list(_arguments(text))