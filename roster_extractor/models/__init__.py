"""
Data models for the roster extraction application.

These models are immutable once produced and serialize to the JSON
contract consumed by exporters and viewers.
"""

from .voter import Voter
from .committee import Committee, OpenCommittee, DEFAULT_SUB_NUMBER
from .document import ExtractedDocument, ExportRow
from .processing_stats import ExtractionStats

__all__ = [
    # Roster models
    "Voter",
    "Committee",
    "OpenCommittee",
    "DEFAULT_SUB_NUMBER",

    # Document models
    "ExtractedDocument",
    "ExportRow",

    # Processing stats
    "ExtractionStats",
]
