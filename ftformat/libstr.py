"""Small string helpers: integer parsing, splitting, trimming and searching."""

from __future__ import annotations

import re
from typing import Callable, Optional

__all__ = ["atoi", "itoa", "split", "strtrim", "substr", "strnstr", "strmapi"]

_LONG_MAX = 2**63 - 1
_LONG_LIMIT = _LONG_MAX // 10
_LEADING = re.compile(r"[\t\n\x0b\x0c\r ]*([+-]*)([0-9]*)")


def _int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def atoi(text: Optional[str]) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one optional sign is accepted; more
    than one sign character yields zero. Values that overflow a 64-bit long
    collapse to the truncated long limits, and the result wraps to 32 bits.
    """
    if text is None:
        return 0
    match = _LEADING.match(text)
    signs, digits = match.group(1), match.group(2)
    if len(signs) > 1:
        sign = 0
    elif signs == "-":
        sign = -1
    else:
        sign = 1
    num = 0
    for ch in digits:
        digit = ord(ch) - ord("0")
        if sign == -1 and (
            num > _LONG_LIMIT or (num == _LONG_LIMIT and digit >= 8)
        ):
            return _int32(-_LONG_MAX - 1)
        if num > _LONG_LIMIT or (num == _LONG_LIMIT and digit > 7):
            return _int32(_LONG_MAX)
        num = num * 10 + digit
    return _int32(_int32(num) * sign)


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError("itoa() expects an int")
    return str(number)


def split(text: str, separator: str) -> list[str]:
    """Split on a single separator character, dropping empty fields."""
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    if separator == "\0":
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the first occurrence, or None when absent. An empty
    needle is always found at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character.

    The index handed to ``func`` is reduced to one byte, so it wraps
    after 255.
    """
    return "".join(func(index & 0xFF, ch) for index, ch in enumerate(text))