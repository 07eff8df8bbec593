"""
Document models.

Represents the complete extraction result and its flattened export rows.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import List, Tuple, Any

from .committee import Committee


@dataclass(frozen=True)
class ExportRow:
    """
    One flattened voter row with its committee repeated.

    This is the shape consumed by spreadsheet exporters and preview tables.
    """

    committee_name: str
    committee_sub_number: str
    voter_serial_number: str
    voter_full_name: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ExtractedDocument:
    """
    Complete extraction result.

    Totals are derived from ``committees`` on every access and cannot be
    set independently.
    """

    committees: Tuple[Committee, ...] = ()

    @property
    def total_voters(self) -> int:
        """Total number of voters across all committees."""
        return sum(c.voters_count for c in self.committees)

    @property
    def total_committees(self) -> int:
        return len(self.committees)

    def to_rows(self) -> List[ExportRow]:
        """Flatten into one row per voter, in document order."""
        return [
            ExportRow(
                committee_name=committee.name,
                committee_sub_number=committee.sub_number,
                voter_serial_number=voter.serial_number,
                voter_full_name=voter.full_name,
            )
            for committee in self.committees
            for voter in committee.voters
        ]

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Keys follow the camelCase contract expected by existing consumers.
        """
        return {
            "committees": [c.to_dict() for c in self.committees],
            "totalVoters": self.total_voters,
            "totalCommittees": self.total_committees,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExtractedDocument":
        """Rebuild a document; stored totals are ignored and recomputed."""
        return cls(committees=tuple(Committee.from_dict(c) for c in data.get("committees", [])))
