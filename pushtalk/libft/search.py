"""C-style string searching, comparison, bounded copying and mapping.

Strings are treated as ending at their first NUL character, as a
NUL-terminated string would. Positions are returned as indexes; a search
that finds nothing returns None.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Callable, Optional, Tuple, Union

CharLike = Union[int, str]


def _cstr(s: str) -> str:
    return s.partition("\0")[0]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first *c* in *s*; the terminator's index when *c* is NUL."""
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last *c* in *s*; the terminator's index when *c* is NUL."""
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def striteri(s: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Call ``f(index, item)`` for each item of *s*, in place.

    When *f* returns something other than None it replaces the item.
    """
    if isinstance(s, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence")
    for index, item in enumerate(s):
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, char)`` for every character."""
    return "".join(f(index, ch) for index, ch in enumerate(_cstr(s)))


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy *src* into a buffer of *size* characters.

    Returns the text that fits (at most ``size - 1`` characters, leaving room
    for the terminator) and the full length of *src*, so truncation shows as
    a length not smaller than *size*.
    """
    if size < 0:
        raise ValueError("strlcpy: negative size")
    text = _cstr(src)
    if size == 0:
        return "", len(text)
    return text[: size - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append *src* to *dst* within a buffer of *size* characters.

    Returns the resulting text and the length the full result would have had.
    When *dst* already fills the buffer it is returned unchanged together
    with ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("strlcat: negative size")
    head = _cstr(dst)
    tail = _cstr(src)
    if len(head) >= size:
        return head, size + len(tail)
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters; zero when equal, else the code difference."""
    if n < 0:
        raise ValueError("strncmp: negative length")
    a_text, b_text = _cstr(s1), _cstr(s2)
    for index in range(n):
        a = ord(a_text[index]) if index < len(a_text) else 0
        b = ord(b_text[index]) if index < len(b_text) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of *needle* lying wholly within the first *length* characters of *haystack*."""
    if length < 0:
        raise ValueError("strnstr: negative length")
    hay = _cstr(haystack)
    target = _cstr(needle)
    if not target:
        return 0
    index = hay.find(target, 0, length)
    return None if index < 0 else index