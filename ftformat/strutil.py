"""Small string, character and byte helpers used by the formatter."""

from __future__ import annotations

from collections.abc import Callable
from itertools import zip_longest

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def _code(c: int | str) -> int:
    """Return the character code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def _check_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace; 0 if none.

    The result wraps like a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    if not digits:
        return 0
    return _wrap_int(sign * int("".join(digits)))


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    return str(_wrap_int(n))


def split(text: str | None, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    if not text:
        return []
    if not sep:
        return [text]
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``."""
    _check_non_negative(start=start, length=length)
    if length == 0 or len(text) <= start:
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Index of ``needle`` fully inside the first ``n`` characters, or None."""
    _check_non_negative(n=n)
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare up to ``n`` characters; return the difference of the first mismatch."""
    _check_non_negative(n=n)
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def strchr(text: str, c: str) -> int | None:
    """Index of the first ``c`` in ``text``; the end index for NUL; else None."""
    index = text.find(c)
    if index >= 0:
        return index
    if c == "\0":
        return len(text)
    return None


def strrchr(text: str, c: str) -> int | None:
    """Index of the last ``c`` in ``text``; the end index for NUL; else None."""
    if c == "\0":
        return len(text)
    index = text.rfind(c)
    return index if index >= 0 else None


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string by applying ``func(index, char)`` to each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; other values are returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; other values are returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def memchr(data: bytes, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_non_negative(n=n)
    index = bytes(data[:n]).find(c & 0xFF)
    return index if index >= 0 else None


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first mismatch."""
    _check_non_negative(n=n)
    left, right = bytes(a[:n]), bytes(b[:n])
    if len(left) < n or len(right) < n:
        raise ValueError("buffers are shorter than n")
    for x, y in zip(left, right):
        if x != y:
            return x - y
    return 0