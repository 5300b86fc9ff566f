"""Formatted output: expand ``%`` directives and write or return the result."""

from __future__ import annotations

import sys
from typing import Iterator

from ftformat.render import render
from ftformat.spec import CONSUMING_SPECIFIERS, convert_argument, parse_directive

__all__ = ["sprintf", "printf"]


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    """Yield literal text and rendered directives of ``fmt`` in order."""
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    remaining = iter(args)
    pos = 0
    end = len(fmt)
    while pos < end:
        percent = fmt.find("%", pos)
        if percent < 0:
            yield fmt[pos:]
            return
        if percent > pos:
            yield fmt[pos:percent]
        directive, pos = parse_directive(fmt, percent)
        specifier = directive.specifier
        if specifier and specifier in CONSUMING_SPECIFIERS:
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError(
                    f"not enough arguments for format directive %{specifier}"
                ) from None
            directive.converted = convert_argument(specifier, value)
        elif specifier == "%":
            directive.converted = convert_argument(specifier)
        else:
            raise ValueError(
                f"unknown conversion specifier {specifier!r} at position {percent}"
            )
        yield render(directive)


def sprintf(fmt: str, *args: object) -> str:
    """Return ``fmt`` with every directive replaced by its formatted argument.

    Supported specifiers are ``c s p d i u x X %``. Surplus arguments are
    ignored; a missing argument raises TypeError and an unknown specifier
    raises ValueError.
    """
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: object) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)