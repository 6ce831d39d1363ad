"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a one-character string or a code point."""
    if isinstance(c, int) and not isinstance(c, bool):
        c = chr(c)
    elif not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text``; ``None`` writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; ``None`` writes nothing at all."""
    if text is None:
        return
    _target(stream).write(text + "\n")


def put_nbr(number: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal, with a leading '-' when negative."""
    _target(stream).write(str(int(number)))