"""
Line classifier.

Labels a non-noise line as a committee header, a voter row or noise. Roster
layouts differ in how voter rows are printed, so classification is a
pluggable strategy:

- layered: header test with voter-row guard, then leading-numeral OR
  packed-scan voter rows (default)
- keyword-pair: bare keyword-pair header test, any letter run followed
  later by a native numeral is a voter row
- leading-numeral: voter rows start with a short serial
- packed-scan: voter rows embed name+numeral pairs anywhere in the line

Headers always take precedence over voter rows.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Optional, Tuple, Type

from ..config import ExtractionConfig
from ..exceptions import ConfigurationError
from ..utils.text import ARABIC_LETTERS, NATIVE_DIGITS, ALL_DIGITS, has_letter_run

COMMITTEE_KEYWORDS: Tuple[str, ...] = ("لجنة", "لجان", "كشف بأسماء الناخبين")
LOCATION_KEYWORDS: Tuple[str, ...] = ("مدرسة", "مدرسه", "معهد", "مركز", "وحدة صحية", "المقر")
NUMBER_PHRASES: Tuple[str, ...] = ("رقم", "الفرعية", "الفرعيه", "الانتخابية", "الانتخابيه")

_VOTER_LIKE_START = re.compile(rf"^[{ALL_DIGITS}]{{1,4}}\s+[{ARABIC_LETTERS}]")
_LEADING_NUMERAL_ROW = re.compile(
    rf"^[{ALL_DIGITS}]{{1,4}}\s+[{ARABIC_LETTERS}][{ARABIC_LETTERS}\s]{{2,}}"
)
_PACKED_PAIR = re.compile(rf"[{ARABIC_LETTERS}]{{3,}}\s*[{NATIVE_DIGITS}]+")
_LETTERS_THEN_NUMERAL = re.compile(rf"[{ARABIC_LETTERS}]{{3,}}.*[{NATIVE_DIGITS}]")


class LineKind(str, Enum):
    HEADER = "header"
    VOTER_ROW = "voter_row"
    NOISE = "noise"


def has_committee_keywords(line: str) -> bool:
    """Committee keyword AND (location keyword OR committee number phrase)."""
    if not any(k in line for k in COMMITTEE_KEYWORDS):
        return False
    return any(k in line for k in LOCATION_KEYWORDS) or any(k in line for k in NUMBER_PHRASES)


def is_leading_numeral_row(line: str) -> bool:
    return _LEADING_NUMERAL_ROW.match(line) is not None


def is_packed_row(line: str) -> bool:
    return _PACKED_PAIR.search(line) is not None


class LineClassifier(ABC):
    """
    Base classifier.

    ``classify`` expects lines that already passed the noise filter.
    """

    name: str = "base"

    def __init__(self, config: Optional[ExtractionConfig] = None):
        self.config = config or ExtractionConfig()

    def classify(self, line: str) -> LineKind:
        if self.is_header(line):
            return LineKind.HEADER
        if self.is_voter_row(line):
            return LineKind.VOTER_ROW
        return LineKind.NOISE

    def is_header(self, line: str) -> bool:
        """Keyword pair, not shaped like a voter row, long enough, real words."""
        return (
            has_committee_keywords(line)
            and _VOTER_LIKE_START.match(line) is None
            and len(line) >= self.config.min_header_length
            and has_letter_run(line)
        )

    @abstractmethod
    def is_voter_row(self, line: str) -> bool:
        """Whether the line carries voter entries."""


class LayeredClassifier(LineClassifier):
    name = "layered"

    def is_voter_row(self, line: str) -> bool:
        return is_leading_numeral_row(line) or is_packed_row(line)


class KeywordPairClassifier(LineClassifier):
    name = "keyword-pair"

    def is_header(self, line: str) -> bool:
        return has_committee_keywords(line)

    def is_voter_row(self, line: str) -> bool:
        return _LETTERS_THEN_NUMERAL.search(line) is not None


class LeadingNumeralClassifier(LineClassifier):
    name = "leading-numeral"

    def is_voter_row(self, line: str) -> bool:
        return is_leading_numeral_row(line)


class PackedScanClassifier(LineClassifier):
    name = "packed-scan"

    def is_voter_row(self, line: str) -> bool:
        return is_packed_row(line)


CLASSIFIERS: Dict[str, Type[LineClassifier]] = {
    cls.name: cls
    for cls in (LayeredClassifier, KeywordPairClassifier, LeadingNumeralClassifier, PackedScanClassifier)
}


def build_classifier(name: Optional[str] = None, config: Optional[ExtractionConfig] = None) -> LineClassifier:
    """
    Build a classifier strategy by name.

    Args:
        name: Strategy name (default from config)
        config: Extraction configuration

    Raises:
        ConfigurationError: If the name is unknown
    """
    config = config or ExtractionConfig()
    key = (name or config.classifier).strip().lower()
    try:
        return CLASSIFIERS[key](config)
    except KeyError:
        raise ConfigurationError(
            f"Unknown classifier '{key}', expected one of {', '.join(CLASSIFIERS)}",
            config_key="ROSTER_CLASSIFIER",
        ) from None
