"""
Utility functions for the roster extraction application.
"""

from .text import (
    ARABIC_LETTERS,
    NATIVE_DIGITS,
    ALL_DIGITS,
    normalize_digits,
    collapse_whitespace,
    strip_leading_numbering,
    has_letter_run,
    split_lines,
)

from .timing import (
    Timer,
    format_duration,
)

__all__ = [
    # Text utilities
    "ARABIC_LETTERS",
    "NATIVE_DIGITS",
    "ALL_DIGITS",
    "normalize_digits",
    "collapse_whitespace",
    "strip_leading_numbering",
    "has_letter_run",
    "split_lines",

    # Timing utilities
    "Timer",
    "format_duration",
]
