"""
PDF text source.

Extracts the text layer of a roster PDF using PyMuPDF. This is the boundary
to the text-extraction collaborator: it produces raw text plus a page count
and surfaces any failure as UpstreamExtractionError.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

import fitz  # PyMuPDF

from .base import BaseProcessor, ProcessingContext
from ..exceptions import UpstreamExtractionError


@dataclass(frozen=True)
class SourceText:
    """Text extracted from a PDF."""
    text: str
    page_count: int
    source_name: str = ""


class PDFTextExtractor(BaseProcessor):
    """
    Extract the text of every page, in page order.

    Accepts a path or the raw bytes of an upload. Byte sources larger than
    the configured limit are refused.
    """

    name = "PDFTextExtractor"

    def __init__(self, context: ProcessingContext, source: Union[Path, str, bytes]):
        super().__init__(context)
        self.source = Path(source) if isinstance(source, str) else source

    @property
    def source_name(self) -> str:
        if isinstance(self.source, Path):
            return self.source.name
        return self.context.source_name or "<upload>"

    def validate(self) -> bool:
        """Check the path exists."""
        if isinstance(self.source, Path) and not self.source.is_file():
            self.log_error(f"PDF not found: {self.source}")
            return False
        return True

    def process(self) -> SourceText:
        if isinstance(self.source, bytes):
            limit = self.config.pdf.max_file_size_bytes
            if len(self.source) > limit:
                raise UpstreamExtractionError(
                    source=self.source_name,
                    detail=f"File is {len(self.source)} bytes, limit is {limit}",
                )

        try:
            if isinstance(self.source, bytes):
                doc = fitz.open(stream=self.source, filetype="pdf")
            else:
                doc = fitz.open(self.source)
        except Exception as e:
            raise UpstreamExtractionError(source=self.source_name, detail=str(e)) from e

        try:
            page_count = doc.page_count
            pages = [page.get_text("text") for page in doc]
        except Exception as e:
            raise UpstreamExtractionError(source=self.source_name, detail=str(e)) from e
        finally:
            doc.close()

        self.log_info(f"Extracted text from {self.source_name}", pages=page_count)
        return SourceText(text="\n".join(pages), page_count=page_count, source_name=self.source_name)
