# ftformat

A compact printf-style formatter together with a set of plain string helpers.
It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Formatting

`ftformat.formatter.format_string` takes a format and the values it refers to,
and returns the result as a string. `print_formatted` writes the same text to
standard output and returns how many characters it wrote.

```python
from ftformat.formatter import format_string, print_formatted

format_string("%d apples", 42)          # "42 apples"
format_string("[%5s]", "abc")           # "[  abc]"
format_string("[%-5d]", 7)              # "[7    ]"
format_string("%05d", 42)               # "00042"
format_string("%.3s", "abcdef")         # "abc"
format_string("%#x", 255)               # "0xff"
format_string("%+d", 5)                 # "+5"
format_string("%p", 0)                  # "(nil)"
format_string("%s", None)               # "(null)"

count = print_formatted("%s=%u\n", "n", 10)
```

### Conversions

| Conversion | Value                                                   |
|------------|---------------------------------------------------------|
| `%c`       | a one-character string, or an integer character code    |
| `%s`       | a string, or `None` for `(null)`                        |
| `%p`       | an integer address, printed as `0x…`; `0` or `None` give `(nil)` |
| `%d`, `%i` | an integer, taken as signed 32-bit                      |
| `%u`       | an integer, taken as unsigned 32-bit                    |
| `%x`, `%X` | an integer, taken as unsigned 32-bit, in hex            |
| `%%`       | a literal percent sign; flags are ignored, no value used |

Flags read between the `%` and the conversion character are `-`
(left-justify), `0` (zero padding), `.` (precision), `#` (`0x`/`0X` prefix
for non-zero hex), `+` and space (sign for non-negative numbers), together
with a minimum field width. The set of conversions is available as
`ftformat.formatter.CONVERSIONS`.

A `%` with no conversion character anywhere after it is dropped from the
output. Too few values raise `TypeError`, as does a value of the wrong kind
(for instance a non-integer for `%d`, or a non-string for `%s`).

There are no floating-point conversions and no length modifiers.

## Building blocks

`ftformat.conversions` holds the steps the formatter is built from:

- `check_base(base)` returns the radix of a digit set, raising `ValueError`
  if it has fewer than two digits or repeats one.
- `to_base(value, base)` renders a non-negative integer with those digits;
  `HEX_LOWER` and `HEX_UPPER` are the hex digit sets.
- `pointer_repr(value)` and `utoa(n)` render addresses and unsigned numbers.
- `truncate_precision`, `numeric_precision`, `null_string`, `apply_hashtag`,
  `apply_sign`, `apply_zero_pad` and `pad_width` each take the format string
  and the index just past the `%`, and return the transformed text.

## String helpers

`ftformat.strutil` provides small string, character and byte helpers:

```python
from ftformat.strutil import atoi, itoa, split, strtrim, substr

atoi("  -42abc")            # -42
itoa(-2147483648)           # "-2147483648"
split("  a b  c ", " ")     # ["a", "b", "c"]
strtrim("xxhixx", "x")      # "hi"
substr("hello", 1, 3)       # "ell"
```

`atoi` and `itoa` wrap values into the signed 32-bit range.

Others: `strnstr`, `strchr`, `strrchr` and `memchr` return an index or
`None`; `strncmp` and `memcmp` return the difference at the first mismatch;
`strmapi` maps `func(index, char)` over a string; `is_alpha`, `is_digit`,
`is_alnum`, `is_ascii`, `is_print`, `to_upper` and `to_lower` accept a
one-character string or an integer code. Negative counts raise `ValueError`.