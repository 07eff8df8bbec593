"""
Committee header resolver.

Committee metadata (institution name, address, seat, sub-number) is printed
on the lines that follow a header. The resolver scans a bounded window of
those lines and keeps the first candidate for each field.
"""

from __future__ import annotations

import re
from typing import Optional, Sequence, Tuple

from ..config import ExtractionConfig
from ..models import OpenCommittee, DEFAULT_SUB_NUMBER
from ..utils.text import NATIVE_DIGITS, normalize_digits, collapse_whitespace, strip_leading_numbering

INSTITUTION_KEYWORDS: Tuple[str, ...] = ("مدرسة", "مدرسه", "معهد", "مركز", "وحدة صحية", "الوحدة الصحية")
ADDRESS_KEYWORDS: Tuple[str, ...] = ("شارع", "عنوان", "طريق")
LOCATION_KEYWORDS: Tuple[str, ...] = ("ومقرها", "المقر")

_SUB_NUMBER = re.compile(rf"^(?:[{NATIVE_DIGITS}]{{2,3}}|[0-9]{{2,3}})$")
_ADDRESS_LABEL = re.compile(r"^(?:وعنوانها|عنوانها|العنوان|عنوان)\s*[:\-]?\s*")
_LOCATION_LABEL = re.compile(r"^(?:ومقرها|مقرها|المقر)\s*[:\-]?\s*")


def parse_sub_number(line: str) -> Optional[str]:
    """Return the zero-padded sub-number if the line is a bare 2-3 digit token."""
    token = line.strip()
    if not _SUB_NUMBER.match(token):
        return None
    return normalize_digits(token).zfill(3)


class HeaderResolver:
    """
    Resolve committee fields from the lookahead window after a header line.

    The window covers the ``lookahead_lines`` lines right after the header.
    Each field takes the first matching line in window order; finding the
    sub-number ends the scan.
    """

    def __init__(self, config: Optional[ExtractionConfig] = None):
        self.config = config or ExtractionConfig()

    def window(self, lines: Sequence[str], index: int) -> Sequence[str]:
        return lines[index + 1:index + 1 + self.config.lookahead_lines]

    def resolve(self, lines: Sequence[str], index: int) -> OpenCommittee:
        """
        Build a new open committee for the header at ``lines[index]``.

        Args:
            lines: All trimmed, non-empty document lines
            index: Position of the header line

        Returns:
            OpenCommittee with resolved metadata and no voters
        """
        name: Optional[str] = None
        address: Optional[str] = None
        location: Optional[str] = None
        sub_number = DEFAULT_SUB_NUMBER

        for candidate in self.window(lines, index):
            if name is None and any(k in candidate for k in INSTITUTION_KEYWORDS):
                name = collapse_whitespace(candidate)
            if address is None and any(k in candidate for k in ADDRESS_KEYWORDS):
                address = _ADDRESS_LABEL.sub("", collapse_whitespace(candidate)) or None
            if location is None and any(k in candidate for k in LOCATION_KEYWORDS):
                location = _LOCATION_LABEL.sub("", collapse_whitespace(candidate)) or None

            parsed = parse_sub_number(candidate)
            if parsed is not None:
                sub_number = parsed
                break

        if not name:
            name = strip_leading_numbering(lines[index]) or self.config.placeholder_name

        return OpenCommittee(name=name, sub_number=sub_number, address=address, location=location)
