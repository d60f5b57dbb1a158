"""Printf-style formatting with width, precision and flags, plus string helpers."""

__version__ = "0.1.0"
__all__ = ["conversions", "formatter", "strutil"]