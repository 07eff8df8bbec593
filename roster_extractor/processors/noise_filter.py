"""
Noise/footer filter.

Recognizes page furniture and legal boilerplate printed on every roster
page so it is dropped before line classification.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from ..config import ExtractionConfig

# Boilerplate substrings printed on roster pages
NOISE_KEYWORDS: Tuple[str, ...] = (
    # page-of-page markers and page labels
    "الصفحة رقم من",
    "صفحة",
    # law, decree and form references
    "انتخابات مجلس النواب",
    "نموذج رقم",
    "قانون",
    # section/ward and governorate labels
    "التابعة للجنة العامة",
    "قسم",
    "مراكز",
    "محافظة",
    # committee metadata labels, read by the header lookahead instead
    "ومقرها",
    "وعنوانها",
    "ومكوناتها",
)

# Column captions of the voter table
CAPTION_WORDS: Tuple[str, ...] = ("مسلسل", "الاسم")


class NoiseFilter:
    """
    Decide whether a line is boilerplate.

    A line is noise if it contains a boilerplate keyword or a table caption
    word, or if it is shorter than ``min_line_length``.
    """

    def __init__(
        self,
        config: Optional[ExtractionConfig] = None,
        keywords: Iterable[str] = NOISE_KEYWORDS,
        captions: Iterable[str] = CAPTION_WORDS,
    ):
        self.min_line_length = (config or ExtractionConfig()).min_line_length
        self.keywords = tuple(keywords)
        self.captions = tuple(captions)

    def contains_keyword(self, text: str) -> bool:
        """True if text contains any boilerplate keyword."""
        return any(keyword in text for keyword in self.keywords)

    def is_noise(self, line: str) -> bool:
        if len(line) < self.min_line_length:
            return True
        if self.contains_keyword(line):
            return True
        return any(caption in line for caption in self.captions)
