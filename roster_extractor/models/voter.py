"""
Voter data model.

Represents a single (serial, full name) entry printed in a committee roster.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Voter:
    """
    One voter attributed to exactly one committee.

    ``serial_number`` is kept as printed (after digit normalization), so
    leading zeros survive and values are not guaranteed to be unique.
    """

    serial_number: str
    full_name: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON output contract."""
        return {"serialNumber": self.serial_number, "fullName": self.full_name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Voter":
        return cls(
            serial_number=str(data.get("serialNumber", "")),
            full_name=str(data.get("fullName", "")),
        )
