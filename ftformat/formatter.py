"""Format strings with a small printf-like conversion language.

Supported conversions are ``c s p d i u x X %``. Flags ``-``, ``0``, ``.``,
``#``, ``+`` and space are read between the ``%`` and the conversion
character. A ``%`` with no conversion character after it is dropped.
"""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterator
from typing import Any

from .conversions import (
    HEX_LOWER,
    HEX_UPPER,
    apply_hashtag,
    apply_sign,
    apply_zero_pad,
    null_string,
    numeric_precision,
    pad_width,
    pointer_repr,
    to_base,
    truncate_precision,
    utoa,
)
from .strutil import itoa

CONVERSIONS = frozenset("cspdiuxX%")

_UINT_MASK = (1 << 32) - 1

_Handler = Callable[[str, int, str, Iterator[Any]], str]


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _as_int(value: Any) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"integer argument expected, got {type(value).__name__}"
        ) from None


def _convert_char(fmt: str, start: int, conv: str, args: Iterator[Any]) -> str:
    value = _next_arg(args)
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        char = value
    else:
        char = chr(_as_int(value) & 0xFF)
    return pad_width(fmt, start, char)


def _convert_string(fmt: str, start: int, conv: str, args: Iterator[Any]) -> str:
    value = _next_arg(args)
    if value is None:
        return pad_width(fmt, start, null_string(fmt, start))
    if not isinstance(value, str):
        raise TypeError(f"%s requires a string, got {type(value).__name__}")
    text = truncate_precision(fmt, start, "s", value)
    return pad_width(fmt, start, text)


def _convert_pointer(fmt: str, start: int, conv: str, args: Iterator[Any]) -> str:
    value = _next_arg(args)
    address = 0 if value is None else _as_int(value)
    return pad_width(fmt, start, pointer_repr(address))


def _convert_signed(fmt: str, start: int, conv: str, args: Iterator[Any]) -> str:
    text = itoa(_as_int(_next_arg(args)))
    text = numeric_precision(fmt, start, conv, text)
    text = apply_sign(fmt, start, conv, text)
    text = apply_zero_pad(fmt, start, conv, text, 0)
    return pad_width(fmt, start, text)


def _convert_unsigned(fmt: str, start: int, conv: str, args: Iterator[Any]) -> str:
    text = utoa(_as_int(_next_arg(args)))
    # The precision scan stops at 'd' for this conversion as well.
    text = numeric_precision(fmt, start, "d", text)
    text = apply_sign(fmt, start, conv, text)
    text = apply_zero_pad(fmt, start, conv, text, 0)
    return pad_width(fmt, start, text)


def _convert_hex(fmt: str, start: int, conv: str, args: Iterator[Any]) -> str:
    value = _as_int(_next_arg(args)) & _UINT_MASK
    # Room for the prefix is reserved only when the format itself starts with '#'.
    extra = 2 if fmt.startswith("#") else 0
    if value == 0:
        text = numeric_precision(fmt, start, conv, "0")
        text = apply_zero_pad(fmt, start, conv, text, extra)
    else:
        digits = HEX_LOWER if conv == "x" else HEX_UPPER
        text = numeric_precision(fmt, start, conv, to_base(value, digits))
        text = apply_zero_pad(fmt, start, conv, text, extra)
        text = apply_hashtag(fmt, start, conv, text)
    return pad_width(fmt, start, text)


_HANDLERS: dict[str, _Handler] = {
    "c": _convert_char,
    "s": _convert_string,
    "p": _convert_pointer,
    "d": _convert_signed,
    "i": _convert_signed,
    "u": _convert_unsigned,
    "x": _convert_hex,
    "X": _convert_hex,
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            yield fmt[pos:]
            return
        if percent > pos:
            yield fmt[pos:percent]
        start = percent + 1
        conv_index = next(
            (i for i in range(start, len(fmt)) if fmt[i] in CONVERSIONS), None
        )
        if conv_index is None:
            pos = start
            continue
        conv = fmt[conv_index]
        if conv == "%":
            # A literal percent sign ignores any flags and consumes no argument.
            yield "%"
        else:
            yield _HANDLERS[conv](fmt, start, conv, remaining)
        pos = conv_index + 1


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    return "".join(_pieces(fmt, args))


def print_formatted(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)