"""
Extraction statistics.

Per-document counters collected during the assembly fold. They are only
used for logging and diagnostics and never influence the result.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any


@dataclass
class ExtractionStats:
    """Counters for a single document extraction."""

    source_name: str = ""
    page_count: int = 0  # informational, from the text source

    # Line classification
    total_lines: int = 0
    noise_lines: int = 0
    header_lines: int = 0
    voter_lines: int = 0
    unclassified_lines: int = 0
    unattached_voter_lines: int = 0  # voter rows before any header

    # Voter candidates
    voters_accepted: int = 0
    rejected_candidates: dict[str, int] = field(default_factory=dict)

    # Committees
    committees_flushed: int = 0
    committees_discarded: int = 0

    # Timing
    elapsed_sec: float = 0.0

    def reject(self, reason: str) -> None:
        """Count a voter candidate rejected for ``reason``."""
        self.rejected_candidates[reason] = self.rejected_candidates.get(reason, 0) + 1

    @property
    def total_rejected(self) -> int:
        return sum(self.rejected_candidates.values())

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["total_rejected"] = self.total_rejected
        data["elapsed_sec"] = round(self.elapsed_sec, 4)
        return data

    def summary(self) -> str:
        """One-line summary for logs."""
        return (
            f"lines={self.total_lines} noise={self.noise_lines} headers={self.header_lines} "
            f"voter_lines={self.voter_lines} voters={self.voters_accepted} "
            f"rejected={self.total_rejected} committees={self.committees_flushed} "
            f"discarded={self.committees_discarded} pages={self.page_count}"
        )
