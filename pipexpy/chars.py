"""Character classification and case conversion for single characters."""

from __future__ import annotations

_SPACES = frozenset(" \n\t\v\f\r")


def _code(c: int | str) -> int:
    """Return the code point of a one-character string, or an int unchanged."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for code points 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII (space through tilde)."""
    return 32 <= _code(c) <= 126


def is_space(c: int | str) -> bool:
    """True for space, newline, tab, vertical tab, form feed and carriage return."""
    code = _code(c)
    return 0 <= code < 0x110000 and chr(code) in _SPACES


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; other values pass through. Keeps the input type."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; other values pass through. Keeps the input type."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def is_number(text: str) -> bool:
    """True if text is an optionally signed integer with optional surrounding whitespace."""
    body = text.lstrip("".join(_SPACES))
    if body[:1] in ("-", "+"):
        body = body[1:]
    digits_end = 0
    for ch in body:
        if not is_digit(ch):
            break
        digits_end += 1
    if digits_end == 0:
        return False
    return all(is_space(ch) for ch in body[digits_end:])