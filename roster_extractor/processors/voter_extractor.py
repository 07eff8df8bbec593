"""
Voter extractor.

Parses (serial, full name) pairs out of a classified voter row. A single
sliding pattern is repeated across the line, so one-voter-per-line rows and
packed rows holding several pairs are handled the same way. Lines that
start with a numeral are read serial first, all others name first.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from ..config import ExtractionConfig
from ..models import Voter, ExtractionStats
from ..utils.text import ARABIC_LETTERS, ALL_DIGITS, normalize_digits, collapse_whitespace
from .noise_filter import NoiseFilter

_STARTS_WITH_DIGIT = re.compile(rf"^[{ALL_DIGITS}]")
_SERIAL_FIRST = re.compile(rf"([{ALL_DIGITS}]+)\s*([{ARABIC_LETTERS}][{ARABIC_LETTERS}\s]*)")
_NAME_FIRST = re.compile(rf"([{ARABIC_LETTERS}][{ARABIC_LETTERS}\s]*)([{ALL_DIGITS}]+)")

# Rejection reasons recorded in ExtractionStats
REJECT_SERIAL_CEILING = "serial_above_ceiling"
REJECT_SHORT_NAME = "name_too_short"
REJECT_NOISE_NAME = "name_contains_noise"


class VoterExtractor:
    """Extract and validate voter candidates from one line."""

    def __init__(
        self,
        config: Optional[ExtractionConfig] = None,
        noise_filter: Optional[NoiseFilter] = None,
        stats: Optional[ExtractionStats] = None,
    ):
        self.config = config or ExtractionConfig()
        self.noise_filter = noise_filter or NoiseFilter(self.config)
        self.stats = stats

    def candidates(self, line: str) -> List[Tuple[str, str]]:
        """Raw (serial, name) pairs in match order, before validation."""
        if _STARTS_WITH_DIGIT.match(line):
            return [(serial, name) for serial, name in _SERIAL_FIRST.findall(line)]
        return [(serial, name) for name, serial in _NAME_FIRST.findall(line)]

    def extract(self, line: str) -> List[Voter]:
        voters = []
        for raw_serial, raw_name in self.candidates(line.strip()):
            serial = normalize_digits(raw_serial)
            # Values this large are page numbers or years leaking into the match
            if self._above_ceiling(serial):
                self._reject(REJECT_SERIAL_CEILING)
                continue

            reason = self._check_name(collapse_whitespace(raw_name))
            if reason:
                self._reject(reason)
                continue

            voters.append(Voter(serial_number=serial, full_name=collapse_whitespace(raw_name)))

        if self.stats is not None:
            self.stats.voters_accepted += len(voters)
        return voters

    def _above_ceiling(self, serial: str) -> bool:
        # Compare lengths first: int() refuses digit runs past the interpreter's conversion limit
        digits = serial.lstrip("0")
        if len(digits) > len(str(self.config.serial_ceiling)):
            return True
        return int(digits or "0") > self.config.serial_ceiling

    def _check_name(self, name: str) -> Optional[str]:
        tokens = [token for token in name.split(" ") if len(token) > 1]
        if len(tokens) < 2 or len(name) <= 5:
            return REJECT_SHORT_NAME
        if self.noise_filter.contains_keyword(name):
            return REJECT_NOISE_NAME
        return None

    def _reject(self, reason: str) -> None:
        if self.stats is not None:
            self.stats.reject(reason)
