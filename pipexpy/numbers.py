"""Integer parsing and formatting with C integer semantics."""

from __future__ import annotations

from .chars import is_digit

_INT_BITS = 32
_LONG_BITS = 64
LLONG_MAX = (1 << 63) - 1

_ATOI_SKIP = frozenset(chr(c) for c in range(8, 14)) | {" "}
_ATOL_SKIP = frozenset(" \t\n\r\f\v")


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a two's-complement signed integer of the given width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _split_sign(text: str, skip: frozenset[str]) -> tuple[int, str]:
    index = 0
    while index < len(text) and text[index] in skip:
        index += 1
    rest = text[index:]
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    return sign, rest


def _leading_digits(text: str):
    for ch in text:
        if not is_digit(ch):
            return
        yield ord(ch) - ord("0")


def atoi(text: str) -> int:
    """Parse a leading integer as a 32-bit int.

    On 64-bit overflow the positive result collapses to the 32-bit view of
    LONG_MAX (-1) and the negative one to that of LONG_MIN (0); otherwise the
    value is truncated to 32 bits.
    """
    sign, rest = _split_sign(text, _ATOI_SKIP)
    result = 0
    for digit in _leading_digits(rest):
        result = _wrap(result * 10 + digit, _LONG_BITS)
        if result < 0:
            return _wrap(LLONG_MAX if sign == 1 else -LLONG_MAX - 1, _INT_BITS)
    return _wrap(result * sign, _INT_BITS)


def atol(text: str) -> int:
    """Parse a leading integer as a 64-bit value, stopping before it would overflow."""
    sign, rest = _split_sign(text, _ATOL_SKIP)
    result = 0
    for digit in _leading_digits(rest):
        if result > (LLONG_MAX - digit) // 10:
            break
        result = result * 10 + digit
    return result * sign


def itoa(n: int) -> str:
    """Format an integer in decimal."""
    return str(n)