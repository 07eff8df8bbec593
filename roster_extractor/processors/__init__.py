"""
Extraction processors.

Contains the components of the roster extraction engine:
- NoiseFilter: Drop page furniture and legal boilerplate
- LineClassifier strategies: Label lines as header, voter row or noise
- HeaderResolver: Recover committee metadata from the lines after a header
- VoterExtractor: Parse (serial, name) pairs from a voter row
- DocumentAssembler: Fold lines into committees
- DocumentValidator: Reject extractions with no usable structure
- PDFTextExtractor: Read the text layer of a PDF
"""

from .base import BaseProcessor, ProcessingContext
from .noise_filter import NoiseFilter
from .line_classifier import (
    LineKind,
    LineClassifier,
    LayeredClassifier,
    KeywordPairClassifier,
    LeadingNumeralClassifier,
    PackedScanClassifier,
    build_classifier,
)
from .header_resolver import HeaderResolver
from .voter_extractor import VoterExtractor
from .assembler import DocumentAssembler, AssemblyResult
from .validator import DocumentValidator
from .pdf_text import PDFTextExtractor, SourceText

__all__ = [
    "BaseProcessor",
    "ProcessingContext",
    "NoiseFilter",
    "LineKind",
    "LineClassifier",
    "LayeredClassifier",
    "KeywordPairClassifier",
    "LeadingNumeralClassifier",
    "PackedScanClassifier",
    "build_classifier",
    "HeaderResolver",
    "VoterExtractor",
    "DocumentAssembler",
    "AssemblyResult",
    "DocumentValidator",
    "PDFTextExtractor",
    "SourceText",
]
