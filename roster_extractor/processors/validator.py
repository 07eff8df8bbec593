"""
Document validator.

Turns an assembly result into an ExtractedDocument, or fails with a
diagnostic error when extraction yielded no usable structure.
"""

from __future__ import annotations

from ..exceptions import NoCommitteesFoundError, NoVotersFoundError
from ..models import ExtractedDocument
from .assembler import AssemblyResult
from .base import BaseProcessor, ProcessingContext

# Lines echoed in NoCommitteesFoundError to help adjust input or heuristics
SAMPLE_LINE_COUNT = 20


class DocumentValidator(BaseProcessor):
    """
    Post-pass checks on the assembled committees.

    - no header recognized: NoCommitteesFoundError with the line count
    - headers recognized but every committee discarded:
      NoVotersFoundError with the detected committee names
    """

    name = "DocumentValidator"

    def __init__(self, context: ProcessingContext, assembly: AssemblyResult):
        super().__init__(context)
        self.assembly = assembly

    def process(self) -> ExtractedDocument:
        document = ExtractedDocument(committees=self.assembly.committees)

        if not self.assembly.detected_committee_names:
            raise NoCommitteesFoundError(
                line_count=self.assembly.line_count,
                sample_lines=self.assembly.lines[:SAMPLE_LINE_COUNT],
            )

        if document.total_voters == 0:
            raise NoVotersFoundError(committee_names=self.assembly.detected_committee_names)

        return document
