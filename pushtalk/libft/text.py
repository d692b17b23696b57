"""String conversion, splitting, joining and trimming.

Strings are treated as ending at their first NUL character, as a
NUL-terminated string would.
"""

from __future__ import annotations

import operator
from itertools import takewhile
from typing import List, Optional

_WHITESPACE = " \t\n\v\f\r"


def _cstr(s: str) -> str:
    return s.partition("\0")[0]


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Leading blanks (space and \\t \\n \\v \\f \\r) are skipped, one optional
    sign is accepted, and parsing stops at the first non-digit. Text without
    digits gives zero.
    """
    text = _cstr(s).lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = "".join(takewhile(_is_ascii_digit, text))
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal form of *n*, with a leading '-' when negative."""
    return str(operator.index(n))


def split(s: str, sep: str) -> List[str]:
    """Split *s* on the character *sep*, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    return [word for word in _cstr(s).split(sep) if word]


def strdup(s: str) -> str:
    """Return a copy of *s* up to its terminator."""
    return _cstr(s)


def strjoin(s1: str, s2: str) -> str:
    """Return *s1* followed by *s2*."""
    return _cstr(s1) + _cstr(s2)


def strlen(s: Optional[str]) -> int:
    """Length of *s* up to its terminator; zero for None."""
    if s is None:
        return 0
    return len(_cstr(s))


def strtrim(s: str, chars: str) -> str:
    """Remove every leading and trailing character that appears in *chars*."""
    return _cstr(s).strip(_cstr(chars))


def substr(s: str, start: int, length: int) -> str:
    """Return at most *length* characters of *s* beginning at *start*.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("substr: start and length must not be negative")
    text = _cstr(s)
    if start >= len(text):
        return ""
    return text[start:start + length]