import pytest

from ftformat.spec import (
    CONSUMING_SPECIFIERS,
    DECIMAL_DIGITS,
    LOWER_HEX,
    NOT_SPECIFIED,
    UPPER_HEX,
    Directive,
    Flags,
    convert_argument,
    format_character,
    format_pointer,
    format_string,
    parse_directive,
    signed_digits,
    unsigned_digits,
)


def test_parse_full_directive():
    directive, nxt = parse_directive("%-05.3d", 0)
    assert directive.flags == Flags(minus=True, zero=True)
    assert directive.width == 5
    assert directive.precision == 3
    assert directive.dot is True
    assert directive.specifier == "d"
    assert nxt == 7
    assert directive.converted is None


def test_parse_plain_directive_defaults():
    directive, nxt = parse_directive("%s", 0)
    assert directive == Directive(specifier="s")
    assert directive.width == NOT_SPECIFIED
    assert directive.precision == NOT_SPECIFIED
    assert nxt == 2


def test_parse_bare_dot_sets_zero_precision():
    directive, _ = parse_directive("%.d", 0)
    assert directive.dot is True
    assert directive.precision == 0
    assert directive.width == NOT_SPECIFIED


def test_parse_width_only():
    directive, _ = parse_directive("%12s", 0)
    assert directive.width == 12
    assert directive.precision == NOT_SPECIFIED
    assert directive.dot is False


def test_parse_all_flags():
    directive, _ = parse_directive("%-+ 0#x", 0)
    assert directive.flags == Flags(True, True, True, True, True)
    assert directive.specifier == "x"


def test_parse_in_middle_of_text():
    fmt = "abc%5dxyz"
    directive, nxt = parse_directive(fmt, 3)
    assert directive.width == 5
    assert directive.specifier == "d"
    assert fmt[nxt:] == "xyz"


def test_parse_second_dot_resets_precision():
    directive, _ = parse_directive("%5.3.2f", 0)
    assert directive.width == 5
    assert directive.precision == 2
    assert directive.specifier == "f"


def test_parse_trailing_percent():
    fmt = "ab%"
    directive, nxt = parse_directive(fmt, 2)
    assert directive.specifier == ""
    assert nxt == len(fmt)


def test_parse_requires_percent():
    with pytest.raises(ValueError):
        parse_directive("abc", 0)
    with pytest.raises(ValueError):
        parse_directive("%d", 5)


def test_convert_percent_and_unknown():
    assert convert_argument("%") == "%"
    assert convert_argument("z", 1) is None
    assert "%" not in CONSUMING_SPECIFIERS


def test_convert_signed_wraps_to_32_bits():
    assert convert_argument("d", 2**31) == "-2147483648"
    assert convert_argument("i", -42) == "-42"


def test_convert_unsigned_wraps_negative():
    assert int(convert_argument("u", -1)) == 2**32 - 1
    assert int(convert_argument("x", -1), 16) == 2**32 - 1


def test_convert_hex_cases_agree():
    for value in (0, 1, 255, 48879, 2**32 - 1):
        lower = convert_argument("x", value)
        upper = convert_argument("X", value)
        assert upper == lower.upper()
        assert int(lower, 16) == value


def test_convert_rejects_non_integer():
    with pytest.raises(TypeError):
        convert_argument("d", "12")


def test_format_character():
    assert format_character(65) == "A"
    assert format_character(256 + 65) == "A"
    assert format_character("B") == "B"
    assert format_character(0) == "\0"
    assert convert_argument("c", 90) == "Z"


def test_format_character_rejects_long_string():
    with pytest.raises(ValueError):
        format_character("ab")


def test_format_string():
    assert format_string(None) == "(null)"
    assert format_string("hello") == "hello"
    assert format_string("ab\0cd") == "ab"
    assert convert_argument("s", None) == "(null)"


def test_format_pointer():
    assert format_pointer(0) == "(nil)"
    assert format_pointer(None) == "(nil)"
    assert format_pointer(0xDEADBEEF) == "deadbeef"
    assert int(format_pointer(-1), 16) == 2**64 - 1


@pytest.mark.parametrize("value", [0, 7, -7, 10, -100, 2**40, -(2**40)])
def test_signed_digits_round_trip(value):
    assert int(signed_digits(value, DECIMAL_DIGITS)) == value
    assert int(signed_digits(value, LOWER_HEX), 16) == value


@pytest.mark.parametrize("value", [0, 1, 15, 16, 2**32 - 1, 2**64 - 1])
def test_unsigned_digits_round_trip(value):
    assert int(unsigned_digits(value, UPPER_HEX), 16) == value
    assert int(unsigned_digits(value, DECIMAL_DIGITS)) == value


def test_zero_is_single_digit():
    assert unsigned_digits(0, LOWER_HEX) == "0"
    assert signed_digits(0, DECIMAL_DIGITS) == "0"


def test_digit_errors():
    with pytest.raises(ValueError):
        unsigned_digits(-1, DECIMAL_DIGITS)
    with pytest.raises(ValueError):
        unsigned_digits(5, "0")
    with pytest.raises(TypeError):
        signed_digits("x", DECIMAL_DIGITS)