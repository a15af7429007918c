"""Conversions between integers and their decimal text."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

_SPACE = frozenset("\t\n\v\f\r ")


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is read, then digits up
    to the first non-digit. Text with no digits yields 0.
    """
    chars = iter(text)
    c = next(chars, "")
    while c in _SPACE and c:
        c = next(chars, "")
    sign = 1
    if c in ("+", "-"):
        if c == "-":
            sign = -1
        c = next(chars, "")
    value = 0
    while c and "0" <= c <= "9":
        value = value * 10 + (ord(c) - ord("0"))
        c = next(chars, "")
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal text of n, with a leading '-' when negative."""
    digits = []
    magnitude = abs(n)
    while True:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
        if magnitude == 0:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))


def put_number(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of n to stream (standard output by default)."""
    (stream if stream is not None else sys.stdout).write(itoa(n))