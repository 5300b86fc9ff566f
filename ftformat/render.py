"""Turn parsed directives into output text: padding, precision, signs, prefixes.

Field arithmetic follows the formatter's unsigned-size rules. Some
combinations of flags therefore give widths that differ from the C
standard library, for example ``%10p`` with a null pointer.
"""

from __future__ import annotations

from ftformat.libstr import atoi
from ftformat.spec import NOT_SPECIFIED, Directive

__all__ = [
    "render",
    "render_string",
    "render_number",
    "render_hex",
    "render_unsigned",
    "render_pointer",
]

_SIZE_MOD = 1 << 64
# Counts above this can only come from unsigned wrap-around.
_RUNAWAY = 1 << 32


def _size(value: int) -> int:
    return value % _SIZE_MOD


def _checked(count: int) -> int:
    if count > _RUNAWAY:
        raise OverflowError("field width arithmetic wrapped around")
    return count


def _pad_until(limit: int, counter: int) -> tuple[int, int]:
    """Count the steps of ``while (limit < counter--)``; return them and the final counter."""
    limit, counter = _size(limit), _size(counter)
    count = _checked(counter - limit if counter > limit else 0)
    return count, _size(counter - count - 1)


def _bounded_zeros(wanted: int, budget: int) -> tuple[int, int]:
    """Count the steps of ``while (i++ < wanted && budget--)``; return them and the final budget."""
    wanted, budget = _size(wanted), _size(budget)
    if wanted <= budget:
        return _checked(wanted), budget - wanted
    return _checked(budget), _SIZE_MOD - 1


def _text_of(directive: Directive) -> str:
    if directive.converted is None:
        raise ValueError("directive has no converted argument")
    return directive.converted


def _c_strlen(text: str) -> int:
    end = text.find("\0")
    return len(text) if end < 0 else end


def render(directive: Directive) -> str:
    """Render one directive according to its specifier."""
    spec = directive.specifier
    if spec in ("c", "s"):
        return render_string(directive)
    if spec in ("d", "i"):
        return render_number(directive)
    if spec in ("x", "X"):
        return render_hex(directive)
    if spec == "u":
        return render_unsigned(directive)
    if spec == "p":
        return render_pointer(directive)
    if spec == "%":
        return "%"
    raise ValueError(f"unknown conversion specifier {spec!r}")


def render_string(directive: Directive) -> str:
    """Render a ``%c`` or ``%s`` directive."""
    text = _text_of(directive)
    flags = directive.flags
    is_char = directive.specifier == "c"
    width = directive.width
    precision = NOT_SPECIFIED if is_char else directive.precision
    conv_len = _c_strlen(text)

    if precision < 6 and directive.dot and text == "(null)":
        print_len = 0
    elif 0 < precision <= conv_len:
        print_len = precision
    elif (conv_len < precision and precision) or precision == NOT_SPECIFIED:
        print_len = conv_len
    else:
        print_len = 0

    if print_len < width and width != NOT_SPECIFIED:
        put_width = width - print_len
    else:
        put_width = 0

    first = text[0] if text else "\0"
    printable = " " <= first <= "~"
    if is_char and first == "\0":
        put_width -= 1
    padding = max(put_width, 0)

    body = first if is_char and not printable else text[:print_len]
    if flags.minus:
        return body + " " * padding
    return ("0" if flags.zero else " ") * padding + body


def _sign(text: str, number: int, print_len: int, conv_len: int,
          plus: bool, space: bool, zero: bool) -> tuple[str, str, int, int]:
    if number < 0 and text[:1] != "0":
        if print_len > 0:
            print_len -= 1
        return "-", text[1:], print_len, _size(conv_len - 1)
    if (plus or space) and number >= 0:
        if not zero and print_len > 0:
            print_len -= 1
        return ("+" if plus else " "), text, print_len, conv_len
    return "", text, print_len, conv_len


def render_number(directive: Directive) -> str:
    """Render a ``%d`` or ``%i`` directive."""
    text = _text_of(directive)
    flags = directive.flags
    minus = flags.minus
    plus = flags.plus
    space = flags.space and not plus
    precision = directive.precision
    zero = flags.zero and not minus and precision == NOT_SPECIFIED
    plus_space = plus or space
    width = directive.width
    conv_len = _c_strlen(text)
    number = atoi(text)

    print_len = _size(width)
    put_prec = 0
    if width <= precision and directive.dot:
        print_len = _size(precision)
        if number < 0:
            if not minus or conv_len < width:
                print_len = _size(print_len + 1)
            if precision > 0:
                put_prec += 1
    if conv_len < width and number < 0 and plus_space:
        print_len = _size(print_len + 1)
    if precision != 0:
        if put_prec == 1 or conv_len < precision:
            put_prec = _size(put_prec + precision - conv_len)
        if width <= conv_len and precision <= conv_len and put_prec != 1:
            print_len = conv_len
            put_prec = 0
            width = 0
    if precision == 0 and number == 0:
        conv_len = 0
    elif number < 0 and conv_len - 1 < precision and width > precision:
        put_prec = _size(put_prec + 1)

    if minus:
        sign, text, print_len, conv_len = _sign(
            text, number, print_len, conv_len, plus, space, zero)
        zeros, print_len = _bounded_zeros(put_prec, print_len)
        body = "0" * zeros + text[:conv_len]
        if plus_space and number < 0 and print_len > 0:
            print_len -= 1
        pad, _ = _pad_until(conv_len, print_len)
        return sign + body + " " * pad

    parts = []
    if zero:
        sign, text, print_len, conv_len = _sign(
            text, number, print_len, conv_len, plus, space, zero)
        parts.append(sign)
    if plus_space and print_len > 0:
        print_len -= 1
    pad, print_len = _pad_until(put_prec + conv_len, print_len)
    parts.append(("0" if zero else " ") * pad)
    if not zero:
        sign, text, print_len, conv_len = _sign(
            text, number, print_len, conv_len, plus, space, zero)
        parts.append(sign)
    parts.append("0" * _checked(put_prec))
    parts.append(text[:conv_len])
    return "".join(parts)


def render_hex(directive: Directive) -> str:
    """Render a ``%x`` or ``%X`` directive."""
    text = _text_of(directive)
    flags = directive.flags
    width = directive.width
    precision = directive.precision
    conv_len = _c_strlen(text)

    print_len = _size(precision if width <= precision else width)
    put_prec = precision - conv_len if conv_len < precision else 0
    zero = flags.zero and not flags.minus and precision == NOT_SPECIFIED
    if width <= conv_len and precision <= conv_len:
        print_len = conv_len
        put_prec = 0

    if precision <= 0 and directive.dot:
        if width <= 0:
            print_len = 0
        if text[:1] == "0":
            conv_len = 0

    prefix = "0x" if directive.specifier == "x" else "0X"
    has_prefix = flags.hash and text[:1] != "0"

    def emit_prefix(length: int) -> tuple[str, int]:
        if not has_prefix:
            return "", length
        if length >= 2:
            length -= 2
        return prefix, length

    if flags.minus:
        head, print_len = emit_prefix(print_len)
        zeros = _checked(max(put_prec, 0))
        print_len -= min(zeros, print_len)
        pad, _ = _pad_until(conv_len, print_len)
        return head + "0" * zeros + text[:conv_len] + " " * pad

    parts = []
    if zero and flags.hash:
        head, print_len = emit_prefix(print_len)
        parts.append(head)
    elif has_prefix and conv_len < width and 2 < print_len:
        print_len -= 2
    pad, print_len = _pad_until(put_prec + conv_len, print_len)
    parts.append(("0" if zero else " ") * pad)
    if put_prec != 0 and flags.hash:
        head, print_len = emit_prefix(print_len)
        parts.append(head)
    parts.append("0" * _checked(max(put_prec, 0)))
    if not zero and put_prec == 0:
        head, print_len = emit_prefix(print_len)
        parts.append(head)
    parts.append(text[:conv_len])
    return "".join(parts)


def render_unsigned(directive: Directive) -> str:
    """Render a ``%u`` directive."""
    text = _text_of(directive)
    flags = directive.flags
    width = directive.width
    precision = directive.precision
    conv_len = _c_strlen(text)
    sign = atoi(text)

    put_prec = 0
    if width < precision:
        print_len = _size(precision)
        width = 0
        if sign < 0 and print_len == _size(conv_len - 1):
            put_prec += 1
    else:
        print_len = _size(width)
    if conv_len < precision:
        put_prec = precision - conv_len
    if width <= conv_len and precision <= conv_len and precision != 0:
        print_len = conv_len
        put_prec = 0

    shown = 0 if precision == 0 and sign == 0 else conv_len
    if flags.minus:
        zeros, print_len = _bounded_zeros(put_prec, print_len)
        pad, _ = _pad_until(shown, print_len)
        return "0" * zeros + text[:shown] + " " * pad

    fill = "0" if flags.zero and precision == NOT_SPECIFIED else " "
    pad, _ = _pad_until(put_prec + shown, print_len)
    return fill * pad + "0" * _checked(put_prec) + text[:shown]


def render_pointer(directive: Directive) -> str:
    """Render a ``%p`` directive."""
    text = _text_of(directive)
    flags = directive.flags
    minus = flags.minus
    zero = flags.zero and not minus and directive.precision == NOT_SPECIFIED
    precision = NOT_SPECIFIED if directive.specifier == "p" else directive.precision
    width = directive.width
    conv_len = _c_strlen(text)

    put_prec = 0
    print_len = 0
    if width < precision and conv_len < precision:
        print_len = _size(precision)
        put_prec = precision - conv_len
    elif conv_len < width:
        print_len = _size(width if precision < width else precision)
        if conv_len < precision:
            put_prec = precision - conv_len
    elif width < conv_len and precision < conv_len:
        print_len = conv_len

    prefix = "" if text == "(nil)" else "0x"

    def emit_prefix(length: int) -> tuple[str, int]:
        if conv_len < length and minus:
            length = _size(length - 2)
        return prefix, length

    if minus:
        head, print_len = emit_prefix(print_len)
        zeros = _checked(put_prec)
        print_len = _size(print_len - zeros)
        pad, _ = _pad_until(conv_len, print_len)
        return head + "0" * zeros + text[:conv_len] + " " * pad

    parts = []
    if zero:
        head, print_len = emit_prefix(print_len)
        parts.append(head)
    if 0 < width and width > conv_len and not zero and print_len >= 2:
        print_len -= 2
    pad, print_len = _pad_until(put_prec + conv_len, print_len)
    parts.append(("0" if zero else " ") * pad)
    parts.append("0" * _checked(put_prec))
    if not zero:
        head, print_len = emit_prefix(print_len)
        parts.append(head)
    parts.append(text[:conv_len])
    return "".join(parts)