"""String searching, slicing, joining and splitting with C library semantics.

Positions are returned as indexes into the string, and "not found" is None.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from itertools import chain, islice, repeat

_NUL = "\0"


def _single(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def str_chr(text: str, char: str) -> int | None:
    """Index of the first occurrence of char in text.

    Searching for the NUL character finds the end of the string.
    """
    char = _single(char)
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return index if index >= 0 else None


def str_rchr(text: str, char: str) -> int | None:
    """Index of the last occurrence of char in text.

    Searching for the NUL character finds the end of the string.
    """
    char = _single(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def str_nstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of needle in haystack, matching only within the first length characters.

    An empty needle is found at index 0.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack.find(needle, 0, length)
    return index if index >= 0 else None


def _codes(text: str) -> Iterator[int]:
    """Code points of text followed by an endless run of terminators."""
    return chain(map(ord, text), repeat(0))


def str_ncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters; return the difference at the first mismatch."""
    _non_negative(n, "n")
    for a, b in islice(zip(_codes(first), _codes(second)), n):
        if a != b or a == 0:
            return a - b
    return 0


def substr(text: str, start: int, length: int) -> str:
    """At most length characters of text from start; empty if start is past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def str_trim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, separator: str) -> list[str]:
    """Split text on separator, dropping empty pieces."""
    separator = _single(separator)
    return [piece for piece in text.split(separator) if piece]


def str_join(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strl_cpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied text and the full length of src.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strl_cat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest in a buffer of size characters including the terminator.

    Returns the resulting text and the length it would have had with
    unlimited room (or size plus len(src) if dest already fills the buffer).
    """
    _non_negative(size, "size")
    if size == 0:
        return dest, len(src)
    used = min(len(dest), size)
    if size <= used:
        return dest, used + len(src)
    room = size - 1 - len(dest)
    return dest + src[:max(room, 0)], len(dest) + len(src)


def str_mapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def str_iteri(text: str, func: Callable[[int, str], str | None]) -> str:
    """Visit every character with func(index, char).

    A string returned by func replaces the character; None leaves it as it was.
    The resulting text is returned.
    """
    pieces = []
    for index, char in enumerate(text):
        replacement = func(index, char)
        pieces.append(char if replacement is None else replacement)
    return "".join(pieces)


def str_ndup(text: str, n: int) -> str:
    """Copy of at most the first n characters of text."""
    _non_negative(n, "n")
    return text[:n]