"""Conversion directives: parsing ``%`` specifications and converting arguments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ftformat.libstr import atoi

__all__ = [
    "NOT_SPECIFIED",
    "FLAG_CHARS",
    "DECIMAL_DIGITS",
    "LOWER_HEX",
    "UPPER_HEX",
    "CONSUMING_SPECIFIERS",
    "Flags",
    "Directive",
    "parse_directive",
    "convert_argument",
    "format_character",
    "format_string",
    "format_pointer",
    "signed_digits",
    "unsigned_digits",
]

NOT_SPECIFIED = -1
FLAG_CHARS = "-+ 0#"
DECIMAL_DIGITS = "0123456789"
LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"
# Specifiers that take an argument from the argument list.
CONSUMING_SPECIFIERS = "cspdiuxX"

_ASCII_DIGITS = "0123456789"
_UINT32_MASK = 0xFFFFFFFF
_SIZE_MASK = 0xFFFFFFFFFFFFFFFF


@dataclass
class Flags:
    """The flag characters that may follow a ``%``."""

    minus: bool = False
    plus: bool = False
    space: bool = False
    zero: bool = False
    hash: bool = False


@dataclass
class Directive:
    """One parsed conversion: flags, width, precision and specifier.

    ``width`` and ``precision`` are ``NOT_SPECIFIED`` when absent. ``dot`` records
    whether a precision dot was present. ``converted`` holds the argument already
    turned into text, or None before conversion.
    """

    specifier: str = ""
    flags: Flags = field(default_factory=Flags)
    width: int = NOT_SPECIFIED
    precision: int = NOT_SPECIFIED
    dot: bool = False
    converted: Optional[str] = None


_FLAG_FIELDS = {"-": "minus", "+": "plus", " ": "space", "0": "zero", "#": "hash"}


def parse_directive(fmt: str, pos: int) -> tuple[Directive, int]:
    """Parse the directive whose ``%`` sits at ``fmt[pos]``.

    Returns the directive and the index just past its specifier. A ``%`` at the
    very end of ``fmt`` yields an empty specifier.
    """
    if not 0 <= pos < len(fmt) or fmt[pos] != "%":
        raise ValueError(f"no conversion directive at position {pos}")
    end = len(fmt)
    index = pos + 1
    directive = Directive()

    while index < end and fmt[index] in FLAG_CHARS:
        setattr(directive.flags, _FLAG_FIELDS[fmt[index]], True)
        index += 1

    target = "width"
    while index < end and (fmt[index] in _ASCII_DIGITS or fmt[index] == "."):
        if fmt[index] == ".":
            directive.dot = True
            directive.precision = 0
            target = "precision"
            index += 1
        start = index
        while index < end and fmt[index] in _ASCII_DIGITS:
            index += 1
        if index > start:
            setattr(directive, target, atoi(fmt[start:index]))

    if index < end:
        directive.specifier = fmt[index]
        index += 1
    return directive, index


def convert_argument(specifier: str, value: object = None) -> Optional[str]:
    """Turn one argument into the text its specifier calls for.

    Integers are reduced to 32 bits for ``d``, ``i``, ``u``, ``x`` and ``X``.
    ``%`` needs no argument. An unknown specifier gives None.
    """
    if specifier == "c":
        return format_character(value)
    if specifier == "s":
        return format_string(value)
    if specifier == "p":
        return format_pointer(value)
    if specifier in ("d", "i"):
        number = _require_int(value) & _UINT32_MASK
        if number & 0x80000000:
            number -= 0x100000000
        return signed_digits(number, DECIMAL_DIGITS)
    if specifier == "u":
        return unsigned_digits(_require_int(value) & _UINT32_MASK, DECIMAL_DIGITS)
    if specifier == "x":
        return unsigned_digits(_require_int(value) & _UINT32_MASK, LOWER_HEX)
    if specifier == "X":
        return unsigned_digits(_require_int(value) & _UINT32_MASK, UPPER_HEX)
    if specifier == "%":
        return "%"
    return None


def format_character(value: object) -> str:
    """Return the single character for ``%c``; code 0 gives ``"\\0"``."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("a character argument must be one character long")
        return value
    return chr(_require_int(value) & 0xFF)


def format_string(value: Optional[str]) -> str:
    """Return the text for ``%s``: ``(null)`` for None, cut at any NUL."""
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError("a string argument must be str or None")
    return value.split("\0", 1)[0]


def format_pointer(value: Optional[int]) -> str:
    """Return the lower-case hex digits of an address, or ``(nil)`` for null."""
    if value is None:
        return "(nil)"
    address = _require_int(value) & _SIZE_MASK
    if address == 0:
        return "(nil)"
    return unsigned_digits(address, LOWER_HEX)


def signed_digits(value: int, digits: str) -> str:
    """Write a signed integer in the base given by the digit alphabet."""
    number = _require_int(value)
    if number < 0:
        return "-" + unsigned_digits(-number, digits)
    return unsigned_digits(number, digits)


def unsigned_digits(value: int, digits: str) -> str:
    """Write a non-negative integer in the base given by the digit alphabet."""
    number = _require_int(value)
    if number < 0:
        raise ValueError("value must not be negative")
    base = len(digits)
    if base < 2:
        raise ValueError("digit alphabet needs at least two characters")
    if number == 0:
        return digits[0]
    out = []
    while number:
        number, rest = divmod(number, base)
        out.append(digits[rest])
    return "".join(reversed(out))


def _require_int(value: object) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {type(value).__name__}")
    return int(value)