"""ASCII text helpers for parsing typed commands."""

from __future__ import annotations

import string

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def to_lower(text: str) -> str:
    """Lower-case ASCII letters only; other characters are kept."""
    return text.translate(_TO_LOWER)


def capitalize_only_first(text: str) -> str:
    """Upper-case an ASCII first letter and lower-case the rest."""
    if not text:
        return text
    return text[0].translate(_TO_UPPER) + to_lower(text[1:])


def split_words(text: str) -> list[str]:
    """Split on spaces, dropping empty pieces; other whitespace is kept."""
    return [word for word in text.split(" ") if word]