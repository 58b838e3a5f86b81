"""Byte-buffer filling, copying, searching and comparing."""

from __future__ import annotations

from collections.abc import Sequence

SIZE_MAX = (1 << 64) - 1


def _check_span(name: str, length: int, offset: int, n: int) -> None:
    if n < 0 or offset < 0:
        raise ValueError(f"{name}: offsets and sizes must not be negative")
    if offset + n > length:
        raise IndexError(f"{name}: {n} bytes at offset {offset} exceed length {length}")


def mem_set(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with the low byte of value."""
    _check_span("buffer", len(buffer), 0, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buffer."""
    return mem_set(buffer, 0, n)


def mem_cpy(dest: bytearray | None, src: Sequence[int] | None, n: int) -> bytearray | None:
    """Copy n bytes from src into the start of dest.

    When both buffers are missing nothing happens and None is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise ValueError("both dest and src are required")
    _check_span("dest", len(dest), 0, n)
    _check_span("src", len(src), 0, n)
    dest[:n] = bytes(src[:n])
    return dest


def mem_move(buffer: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy n bytes within buffer from src_offset to dest_offset; overlap is safe."""
    _check_span("dest", len(buffer), dest_offset, n)
    _check_span("src", len(buffer), src_offset, n)
    buffer[dest_offset:dest_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def mem_chr(data: bytes | bytearray, value: int, n: int) -> int | None:
    """Index of the first byte equal to the low byte of value within n bytes."""
    _check_span("data", len(data), 0, n)
    index = bytes(data).find(value & 0xFF, 0, n)
    return index if index >= 0 else None


def mem_cmp(first: bytes | bytearray, second: bytes | bytearray, n: int) -> int:
    """Compare n bytes; return the difference at the first mismatch, else 0."""
    _check_span("first", len(first), 0, n)
    _check_span("second", len(second), 0, n)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zeroed buffer of count * size bytes.

    Raises MemoryError when the total size would overflow a size_t.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size and count > SIZE_MAX // size:
        raise MemoryError(f"{count} * {size} bytes overflows the address space")
    return bytearray(count * size)