"""Helpers that write characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar_fd(c: str, stream: Optional[TextIO] = None) -> None:
    """Write the single character *c* to *stream* (standard output by default)."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def putstr_fd(s: str, stream: Optional[TextIO] = None) -> None:
    """Write *s* up to, but not including, its first NUL character."""
    text, _, _ = s.partition("\0")
    _target(stream).write(text)


def putendl_fd(s: str, stream: Optional[TextIO] = None) -> None:
    """Write *s* followed by a newline."""
    out = _target(stream)
    putstr_fd(s, out)
    out.write("\n")


def putnbr_fd(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of *n*, with a leading '-' when negative."""
    _target(stream).write(str(int(n)))


def print_info(message: str, stream: Optional[TextIO] = None) -> None:
    """Write *message* and a newline, standard output by default."""
    putendl_fd(message, stream)