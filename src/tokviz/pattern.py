"""Splitting raw text into word, punctuation and whitespace units."""

from typing import Final

import regex as re

from .types import Unit
from .vocabulary import PUNCTUATION

SPACE: Final[str] = " "

# ECMAScript \s: White_Space without U+0085, plus U+FEFF
_WHITESPACE_RE: Final[re.Pattern[str]] = re.compile(
    r"[\t\n\x0b\x0c\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"
)
_PUNCTUATION_RE: Final[re.Pattern[str]] = re.compile(f"[{re.escape(PUNCTUATION)}]")


def is_whitespace(char: str) -> bool:
    return _WHITESPACE_RE.fullmatch(char) is not None


def is_punctuation(char: str) -> bool:
    return _PUNCTUATION_RE.fullmatch(char) is not None


def split_units(text: str) -> list[Unit]:
    """
    Split ``text`` into units.

    Maximal runs of characters that are neither whitespace nor punctuation form
    one unit each. Every punctuation character is its own unit, as is every
    whitespace character except the plain space, which only separates units.

    :param text: Raw input text.
    :returns: Units in input order.
    """
    units: list[Unit] = []
    pending: list[str] = []

    for char in text:
        if is_whitespace(char):
            if pending:
                units.append("".join(pending))
                pending = []
            # tabs and newlines survive as units
            if char != SPACE:
                units.append(char)
        elif is_punctuation(char):
            if pending:
                units.append("".join(pending))
                pending = []
            units.append(char)
        else:
            pending.append(char)

    if pending:
        units.append("".join(pending))
    return units
