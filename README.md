# ftformat

A compact printf-style formatter. It understands a fixed set of conversions
and the flags `-`, `+`, space, `0` and `#`, a field width and a precision. Its
padding rules are its own. Most everyday directives give the same text as C's
`printf`, but some combinations of flags do not. One example is `%10p` with a
null pointer.

## Installation

```
pip install .
```

## Usage

```python
from ftformat.printf import sprintf, printf

sprintf("%5d|%-5s|%#x", 42, "ab", 255)
# -> "   42|ab   |0xff"

printf("%c%s%%\n", "h", "ello")   # writes "hello%\n" to standard output, returns 7
```

- `sprintf(fmt, *args)` returns the formatted string.
- `printf(fmt, *args)` writes the same text to standard output, flushes it,
  and returns the number of characters written.

Arguments are taken in order. Extra arguments are ignored.

The following raise errors:

- A missing argument raises `TypeError`.
- An unknown conversion character raises `ValueError`. This includes a `%`
  at the very end of the format.
- A format that is not a `str` raises `TypeError`.

### Supported conversions

| Conversion | Argument                               | Output                                    |
|------------|----------------------------------------|-------------------------------------------|
| `%c`       | a one-character `str` or an `int`      | the character (an `int` is cut to 8 bits) |
| `%s`       | a `str` or `None`                      | the text up to any NUL, `(null)` for `None` |
| `%p`       | an `int` address or `None`             | `0x` and lower-case hex, `(nil)` for 0/`None` |
| `%d`, `%i` | an `int`                               | signed decimal, reduced to 32 bits        |
| `%u`       | an `int`                               | unsigned decimal, reduced to 32 bits      |
| `%x`, `%X` | an `int`                               | lower / upper case hex, reduced to 32 bits |
| `%%`       | none                                   | a literal `%`                             |

A directive has three optional parts between the `%` and the conversion
character, in this order:

1. Any of the flags.
2. A field width.
3. A `.` followed by a precision.

### What it does not do

Several features of C's `printf` are not supported:

- Floating-point conversions.
- Length modifiers such as `l` or `h`.
- Widths or precisions given by `*`.

A directive that uses any of these raises `ValueError`.

Some flag combinations make the width arithmetic wrap around. These raise
`OverflowError` rather than producing runaway padding.

### Lower-level pieces

- `ftformat.spec.parse_directive(fmt, pos)` parses the directive whose `%` is
  at `fmt[pos]`. It returns a `Directive` and the index just past the
  directive. The `Directive` has these fields:
  - `specifier`
  - `flags`, a `Flags` with `minus`, `plus`, `space`, `zero` and `hash`
  - `width` and `precision`, which hold `NOT_SPECIFIED` (-1) when absent
  - `dot`
  - `converted`
- `ftformat.spec.convert_argument(specifier, value)` turns an argument into
  its bare text. Helpers for the single conversions:
  - `format_character`
  - `format_string`
  - `format_pointer`
  - `signed_digits`
  - `unsigned_digits`

  `signed_digits` and `unsigned_digits` take a digit alphabet, such as
  `DECIMAL_DIGITS`, `LOWER_HEX` or `UPPER_HEX`.
- `ftformat.render.render(directive)` applies the flags, width and precision
  to a directive whose `converted` text is set. There is one function per
  conversion:
  - `render_string`
  - `render_number`
  - `render_hex`
  - `render_unsigned`
  - `render_pointer`
- `ftformat.libstr` holds small string helpers:
  - `atoi`: leading-integer parsing with 32-bit wrap.
  - `itoa`.
  - `split`: on one character, dropping empty fields.
  - `strtrim`.
  - `substr`.
  - `strnstr`: returns an index or `None`.
  - `strmapi`.

## Running the tests

```
pip install .[test]
pytest
```