"""String helpers: searching, slicing, trimming, splitting and bounded copies.

Searches return an index into the text, or None when nothing is found.
Single characters are one-character strings, and "\\0" stands for the end of
the text.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, MutableSequence, Optional, Tuple

_END = "\0"


def _single(c: str, what: str = "character") -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single {what}, got {c!r}")
    return c


def _non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: str) -> List[str]:
    """Split text on the character sep, dropping empty pieces."""
    _single(sep, "separator character")
    return [piece for piece in text.split(sep) if piece]


def strchr(text: str, c: str) -> Optional[int]:
    """Index of the first c in text; "\\0" finds the end of the text."""
    _single(c)
    if c == _END:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> Optional[int]:
    """Index of the last c in text; "\\0" finds the end of the text."""
    _single(c)
    if c == _END:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strstr(big: str, little: str) -> Optional[int]:
    """Index of the first occurrence of little in big; empty little gives 0."""
    index = big.find(little)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Like strstr, but the match must lie within the first length characters."""
    _non_negative(length=length)
    index = big[:length].find(little)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Up to length characters of text from start; empty when start is past the end."""
    _non_negative(start=start, length=length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a destination of size characters including the terminator.

    Returns the text that fits and the full length of src, so truncation
    happened when the length is at least size.
    """
    _non_negative(size=size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters including the terminator.

    Returns the resulting text and the length it tried to create. When size
    does not exceed the length of dst, dst is returned unchanged and the
    length reported is len(src) + size.
    """
    _non_negative(size=size)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters; the sign of the result orders the strings."""
    _non_negative(n=n)
    for a, b in zip_longest(first[:n], second[:n], fillvalue=_END):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace every element of chars in place with func(index, char)."""
    for index, char in enumerate(chars):
        chars[index] = func(index, char)