"""
Arabic text helpers shared by the extraction heuristics.

Character classes are exposed as bare range strings so callers can embed
them inside their own regex character classes.
"""

from __future__ import annotations

import re

# Arabic letters plus tatweel and harakat. Excludes the Arabic-Indic digit
# blocks and Arabic punctuation so a letter run never swallows a serial.
ARABIC_LETTERS = "\u0621-\u063A\u0640-\u065F\u066E-\u06D3\u06D5"

# Arabic-Indic (U+0660) and Extended Arabic-Indic (U+06F0) digits
NATIVE_DIGITS = "\u0660-\u0669\u06F0-\u06F9"

# Any digit we accept as part of a serial or sub-number
ALL_DIGITS = "0-9" + NATIVE_DIGITS

_DIGIT_TABLE = {
    **{0x0660 + i: str(i) for i in range(10)},
    **{0x06F0 + i: str(i) for i in range(10)},
}

_WHITESPACE = re.compile(r"\s+")
_LEADING_NUMBERING = re.compile(rf"^(?:[{ALL_DIGITS}]+[\s.\-)(/:|]*)+")
_LETTER_RUN = re.compile(rf"[{ARABIC_LETTERS}]{{3,}}")


def normalize_digits(text: str) -> str:
    """
    Convert native-script decimal digits to ASCII digits.

    Every other character is left untouched, so the function is total and
    idempotent.

    >>> normalize_digits("٠٠٣")
    '003'
    """
    return text.translate(_DIGIT_TABLE)


def collapse_whitespace(text: str) -> str:
    """Trim and squeeze internal whitespace runs to single spaces."""
    return _WHITESPACE.sub(" ", text).strip()


def strip_leading_numbering(text: str) -> str:
    """Drop leading page/list numbering tokens such as ``"١٢ - "``."""
    return collapse_whitespace(_LEADING_NUMBERING.sub("", text.strip()))


def has_letter_run(text: str) -> bool:
    """True if text contains at least three consecutive Arabic letters."""
    return _LETTER_RUN.search(text) is not None


def split_lines(text: str) -> list[str]:
    """Split raw extracted text into trimmed, non-empty lines."""
    return [line.strip() for line in text.split("\n") if line.strip()]
