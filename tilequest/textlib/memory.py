"""Byte-buffer helpers working on bytes-like objects.

Functions that change memory take a writable buffer such as a bytearray and
return it. Ranges that reach past the end of a buffer raise IndexError.
"""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_range(buffer, start: int, n: int) -> None:
    if n < 0 or start < 0:
        raise ValueError("offsets and lengths must not be negative")
    if start + n > len(buffer):
        raise IndexError(
            f"range {start}..{start + n} exceeds buffer of length {len(buffer)}"
        )


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first n bytes of buffer to value truncated to a byte."""
    _check_range(buffer, 0, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buffer."""
    return memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count * size bytes.

    Raises OverflowError when the total would not fit a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > SIZE_MAX // size:
        raise OverflowError("requested allocation is too large")
    return bytearray(count * size)


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to value in data[:n], else None."""
    _check_range(data, 0, n)
    index = bytes(data[:n]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Compare the first n bytes; return the difference at the first mismatch."""
    _check_range(first, 0, n)
    _check_range(second, 0, n)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first n bytes of src into dest."""
    _check_range(dest, 0, n)
    _check_range(src, 0, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buffer from offset src to offset dest; overlap is safe."""
    _check_range(buffer, dest, n)
    _check_range(buffer, src, n)
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer