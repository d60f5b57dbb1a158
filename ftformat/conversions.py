"""Building blocks for conversions: base rendering, precision, flags and width.

Every flag helper takes the format string and the index just past the ``%``
that introduced the conversion, scans forward from there the way the
formatter does, and returns the transformed text.
"""

from __future__ import annotations

from .strutil import atoi

HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT_MASK = (1 << 32) - 1
_POINTER_MASK = (1 << 64) - 1


def _char_at(fmt: str, index: int) -> str:
    """Character at ``index`` or an empty string when out of range."""
    return fmt[index] if 0 <= index < len(fmt) else ""


def _scan(fmt: str, start: int, stops: set[str]) -> int:
    """Index of the first character from ``start`` that is in ``stops``."""
    index = start
    while index < len(fmt) and fmt[index] not in stops:
        index += 1
    return index


def check_base(base: str) -> int:
    """Return the radix of ``base``; raise ValueError if it is unusable.

    A base must hold at least two characters and no character twice.
    """
    if len(base) < 2:
        raise ValueError("base must have at least two digits")
    if len(set(base)) != len(base):
        raise ValueError("base must not repeat a digit")
    return len(base)


def to_base(value: int, base: str) -> str:
    """Render a non-negative integer with the digits of ``base``."""
    radix = check_base(base)
    if value < 0:
        raise ValueError("value must not be negative")
    digits = []
    while True:
        value, rest = divmod(value, radix)
        digits.append(base[rest])
        if value == 0:
            break
    return "".join(reversed(digits))


def pointer_repr(value: int) -> str:
    """Render a pointer: ``(nil)`` for zero, else ``0x`` and lower-case hex."""
    value &= _POINTER_MASK
    if value == 0:
        return "(nil)"
    return "0x" + to_base(value, HEX_LOWER)


def utoa(n: int) -> str:
    """Decimal text of ``n`` taken as an unsigned 32-bit integer."""
    return str(n & _UINT_MASK)


def truncate_precision(fmt: str, start: int, conv: str, text: str) -> str:
    """Cut ``text`` to the precision given before ``conv``, if any."""
    index = _scan(fmt, start, {".", conv})
    if _char_at(fmt, index) != ".":
        return text
    precision = atoi(fmt[index + 1:])
    if 0 <= precision < len(text):
        return text[:precision]
    return text


def numeric_precision(fmt: str, start: int, conv: str, text: str) -> str:
    """Apply a precision to the digits of a number rendered as ``text``."""
    index = _scan(fmt, start, {".", conv})
    if _char_at(fmt, index) != ".":
        return text
    precision = atoi(fmt[index + 1:])
    if precision == 0 and text[:1] == "0":
        return ""
    if text[:1] == "-":
        digits = text[1:]
        if len(digits) < precision:
            return "-" + "0" * (precision - len(digits)) + digits
        return text
    if len(text) < precision:
        return "0" * (precision - len(text)) + text
    return text


def null_string(fmt: str, start: int) -> str:
    """Text shown for a missing string argument of an ``s`` conversion."""
    index = _scan(fmt, start, {"s", "."})
    if _char_at(fmt, index) == "." and atoi(fmt[index + 1:]) < 6:
        return ""
    return "(null)"


def apply_hashtag(fmt: str, start: int, conv: str, text: str) -> str:
    """Prefix ``0x`` or ``0X`` when the ``#`` flag precedes a hex conversion."""
    index = _scan(fmt, start, {conv, "#"})
    if _char_at(fmt, index) != "#":
        return text
    if conv == "x":
        return "0x" + text
    if conv == "X":
        return "0X" + text
    return text


def apply_sign(fmt: str, start: int, conv: str, text: str) -> str:
    """Prefix a space or ``+`` to a non-negative number when flagged."""
    index = _scan(fmt, start, {" ", "+", conv})
    flag = _char_at(fmt, index)
    if flag in (" ", "+") and text[:1] != "-":
        return flag + text
    return text


def apply_zero_pad(fmt: str, start: int, conv: str, text: str, extra: int) -> str:
    """Pad ``text`` with zeros for the ``0`` flag.

    ``extra`` counts characters that will be added later (such as a hex
    prefix) and are taken off the width. When a precision follows, spaces
    are used instead of zeros.
    """
    if not conv:
        return text
    index = start
    while (
        index < len(fmt)
        and fmt[index] != conv
        and fmt[index] != "0"
        and not ("0" <= _char_at(fmt, index - 1) <= "9" and index >= 1)
    ):
        index += 1
    if _char_at(fmt, index) != "0":
        return text
    missing = atoi(fmt[index:]) - (len(text) + extra)
    if missing <= 0:
        return text
    if _char_at(text, index) in (" ", "+", "-"):
        missing += 1
    limit = _scan(fmt, start, {".", "%"})
    if _char_at(fmt, limit) == ".":
        return " " * missing + text
    if text[:1] in (" ", "+", "-"):
        return text[0] + "0" * missing + text[1:]
    return "0" * missing + text


def pad_width(fmt: str, start: int, text: str) -> str:
    """Pad ``text`` with spaces to the field width, left-justified on ``-``."""
    index = start
    while _char_at(fmt, index) == "-" and _char_at(fmt, index + 1) == "-":
        index += 1
    if _char_at(fmt, index) == "-":
        width = atoi(fmt[index + 1:])
        return text + " " * max(width - len(text), 0)
    width = atoi(fmt[index:])
    return " " * max(width - len(text), 0) + text