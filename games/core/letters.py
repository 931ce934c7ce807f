from __future__ import annotations

import re

_ASCII_LETTER = re.compile(r"[A-Za-z]")


def is_letter(value: str) -> bool:
    """
    Return True if `value` is exactly one ASCII letter (a–z, A–Z).

    Notes
    -----
    - Digits, spaces, punctuation, accented and non-Latin letters are not letters.
    - Empty and multi-character strings are rejected.
    """
    if not isinstance(value, str):
        return False
    return _ASCII_LETTER.fullmatch(value) is not None


def is_space(value: str) -> bool:
    """True for a single space character."""
    return value == " "


__all__ = ["is_letter", "is_space"]
