"""
Electoral roster extraction.

Turns the text of Arabic electoral committee roster PDFs into committees
and voters.

Usage:
    from roster_extractor import extract_document
    document = extract_document(text)
    print(document.total_committees, document.total_voters)
"""

from .exceptions import (
    RosterError,
    ConfigurationError,
    ExtractionError,
    NoCommitteesFoundError,
    NoVotersFoundError,
    UpstreamExtractionError,
    DataPersistenceError,
)
from .models import Voter, Committee, ExtractedDocument, ExportRow
from .pipeline import extract_document, extract_pdf

__version__ = "1.0.0"

__all__ = [
    "extract_document",
    "extract_pdf",
    "Voter",
    "Committee",
    "ExtractedDocument",
    "ExportRow",
    "RosterError",
    "ConfigurationError",
    "ExtractionError",
    "NoCommitteesFoundError",
    "NoVotersFoundError",
    "UpstreamExtractionError",
    "DataPersistenceError",
]
