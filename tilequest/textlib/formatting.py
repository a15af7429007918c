"""Minimal printf-style formatting and plain text output helpers.

Supported conversions: %c %s %p %d %i %u %x %X and %%. Integer conversions
follow 32-bit C int semantics; %p treats its value as a 64-bit address.
An unknown conversion character produces nothing and consumes no argument.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Optional, TextIO

from tilequest.textlib.numbers import itoa

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _out(stream: Optional[TextIO]) -> TextIO:
    return stream if stream is not None else sys.stdout


def _as_int32(n: int) -> int:
    n &= _UINT32
    return n - (1 << 32) if n & 0x80000000 else n


def to_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of a non-negative integer, without prefix."""
    if n < 0:
        raise ValueError(f"cannot render a negative number in hex: {n}")
    return format(n, "X" if upper else "x")


def pointer_repr(address: Optional[int]) -> str:
    """Render an address as 0x-prefixed hex, or "(nil)" for a null address."""
    if not address:
        return "(nil)"
    return "0x" + to_hex(address & _UINT64)


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


_CONVERTERS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": pointer_repr,
    "d": lambda v: itoa(_as_int32(v)),
    "i": lambda v: itoa(_as_int32(v)),
    "u": lambda v: itoa(v & _UINT32),
    "x": lambda v: to_hex(v & _UINT32),
    "X": lambda v: to_hex(v & _UINT32, upper=True),
}


def sprintf(fmt: str, *args: Any) -> str:
    """Format args according to fmt and return the text."""
    pieces = []
    values = iter(args)
    chars = iter(fmt)
    for c in chars:
        if c != "%":
            pieces.append(c)
            continue
        spec = next(chars, "")
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERTERS:
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            pieces.append(_CONVERTERS[spec](value))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to stream and return the number of characters."""
    text = sprintf(fmt, *args)
    _out(stream).write(text)
    return len(text)


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write one character."""
    _out(stream).write(_char(c))


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write text; None writes nothing."""
    if text is not None:
        _out(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write text followed by a newline; None writes nothing."""
    if text is not None:
        _out(stream).write(text + "\n")