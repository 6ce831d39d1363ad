"""String helpers with C-string semantics expressed over Python ``str``.

Searches return indices (or ``None``) instead of pointers, and functions that
would fill a caller's buffer return the new string instead.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, List, Optional, Tuple

__all__ = [
    "atoi",
    "itoa",
    "split",
    "strtrim",
    "substr",
    "strnstr",
    "strncmp",
    "strchr",
    "strrchr",
    "strlcpy",
    "strlcat",
    "strmapi",
    "striteri",
    "strjoin",
    "strdup",
    "strlen",
]

_SPACES = frozenset("\t\n\v\f\r ")
_NUL = "\0"


def _single_char(name: str, value: str) -> str:
    if len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")
    return value


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit.  Text with no digits yields 0.
    """
    rest = text.lstrip("".join(_SPACES))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def itoa(number: int) -> str:
    """Decimal representation of an integer, with a leading '-' if negative."""
    return str(int(number))


def split(text: str, sep: str) -> List[str]:
    """Split on a single separator character, dropping empty pieces."""
    _single_char("sep", sep)
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end gives an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0; ``None`` means not found.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters, stopping at the end of either string.

    Returns the code-point difference of the first differing position (the end
    of a string counts as code 0), or 0 when they match.
    """
    _non_negative("n", n)
    pairs = zip_longest(s1, s2, fillvalue=_NUL)
    for a, b in islice(pairs, n):
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``.

    Searching for NUL gives the position of the terminator, ``len(text)``.
    """
    if _single_char("char", char) == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``; NUL gives ``len(text)``."""
    if _single_char("char", char) == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy into a buffer of ``size`` slots, one of them for the terminator.

    Returns the copied string and ``len(src)``, the length it tried to create.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting string and the length it tried to create.  When the
    buffer is no larger than ``dst``, nothing is appended and the reported
    length is ``size + len(src)``.
    """
    _non_negative("size", size)
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """New string made of ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` for each character in order.

    A returned character replaces the original; ``None`` leaves it unchanged.
    The resulting string is returned.
    """
    result = []
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of ``s1`` and ``s2``."""
    return "".join((s1, s2))


def strdup(text: str) -> str:
    """A copy of ``text``."""
    return "".join(text)


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)