"""Small string helpers: character conversion, trimming and upper-casing."""

from __future__ import annotations

import string

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def strcvt(s: str | None, from_char: str, to_char: str) -> str | None:
    """Replace every occurrence of ``from_char`` in ``s`` with ``to_char``."""
    if s is None:
        return None
    return s.replace(from_char, to_char)


def strtrim(s: str, trim_chars: str, trim: int) -> str:
    """Trim characters in ``trim_chars`` from the ends of ``s``.

    ``trim`` below zero trims the prefix only, zero trims both ends and
    above zero trims the suffix only.  Trim characters inside the string
    are kept.
    """
    chars = trim_chars or ""
    if trim <= 0:
        s = s.lstrip(chars)
    if trim >= 0:
        s = s.rstrip(chars)
    return s


def upcase(s: str | None) -> str | None:
    """Convert the ASCII letters of ``s`` to upper case."""
    if s is None:
        return None
    return s.translate(_ASCII_UPPER)