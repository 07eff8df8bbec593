"""
Committee models.

A committee is accumulated as an ``OpenCommittee`` while the assembler reads
its voter rows, then frozen into an immutable ``Committee`` when flushed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, List, Tuple, Any

from .voter import Voter

DEFAULT_SUB_NUMBER = "000"


@dataclass(frozen=True)
class Committee:
    """
    A named voting location with its ordered voters.

    Attributes:
        name: Institution or header text, never empty
        sub_number: Exactly three ASCII digits, zero-padded
        address: Street address when printed near the header
        location: Committee seat when printed near the header
        voters: Voters in document order
    """

    name: str
    sub_number: str = DEFAULT_SUB_NUMBER
    address: Optional[str] = None
    location: Optional[str] = None
    voters: Tuple[Voter, ...] = ()

    @property
    def voters_count(self) -> int:
        return len(self.voters)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON output contract, omitting absent optional fields."""
        data: dict[str, Any] = {"name": self.name, "subNumber": self.sub_number}
        if self.address:
            data["address"] = self.address
        if self.location:
            data["location"] = self.location
        data["voters"] = [v.to_dict() for v in self.voters]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Committee":
        """
        Read a committee back from the JSON output contract.

        Raises:
            ValueError: subNumber is not three ASCII digits, or there are no voters
        """
        sub_number = data.get("subNumber", DEFAULT_SUB_NUMBER)
        if not (isinstance(sub_number, str) and len(sub_number) == 3 and sub_number.isascii() and sub_number.isdigit()):
            raise ValueError(f"Invalid subNumber for committee {data['name']!r}: {sub_number!r}")

        voters = tuple(Voter.from_dict(v) for v in data.get("voters", []))
        if not voters:
            raise ValueError(f"Committee {data['name']!r} has no voters")

        return cls(
            name=data["name"],
            sub_number=sub_number,
            address=data.get("address"),
            location=data.get("location"),
            voters=voters,
        )


@dataclass
class OpenCommittee:
    """
    Committee still being accumulated by the assembler.

    An open committee that ends with zero voters is discarded rather than
    frozen: empty committees never appear in extracted output.
    """

    name: str
    sub_number: str = DEFAULT_SUB_NUMBER
    address: Optional[str] = None
    location: Optional[str] = None
    voters: List[Voter] = field(default_factory=list)

    @property
    def has_voters(self) -> bool:
        return bool(self.voters)

    def add_voters(self, voters: List[Voter]) -> None:
        self.voters.extend(voters)

    def freeze(self) -> Committee:
        return Committee(
            name=self.name,
            sub_number=self.sub_number,
            address=self.address,
            location=self.location,
            voters=tuple(self.voters),
        )
