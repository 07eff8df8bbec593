"""
Extraction pipeline entry points.

    text -> lines -> DocumentAssembler -> DocumentValidator -> ExtractedDocument

Every call builds its own context and processors, so independent documents
can be extracted concurrently.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .config import Config, get_config
from .logger import get_logger, log_timing
from .models import ExtractedDocument
from .processors import (
    DocumentAssembler,
    DocumentValidator,
    PDFTextExtractor,
    ProcessingContext,
    build_classifier,
)
from .utils.text import split_lines
from .utils.timing import Timer

logger = get_logger("roster_extractor.pipeline")


def _build_context(config: Optional[Config], source_name: str, page_count: int) -> ProcessingContext:
    config = config or get_config()
    config.extraction.validate()
    return ProcessingContext(config=config, source_name=source_name, page_count=page_count)


def extract_document(
    text: str,
    page_count: int = 0,
    config: Optional[Config] = None,
    classifier: Optional[str] = None,
    source_name: str = "",
) -> ExtractedDocument:
    """
    Extract committees and voters from raw roster text.

    Args:
        text: Extracted document text with line breaks preserved
        page_count: Page count reported by the text source (diagnostics only)
        config: Configuration (default: global config)
        classifier: Classifier strategy name (default from config)
        source_name: Document name used in logs

    Returns:
        ExtractedDocument with at least one committee

    Raises:
        NoCommitteesFoundError: No committee header was recognized
        NoVotersFoundError: Headers were found but no voters
        ConfigurationError: Invalid configuration or strategy name
    """
    context = _build_context(config, source_name, page_count)
    timer = Timer()

    lines = split_lines(text)
    line_classifier = build_classifier(classifier, context.config.extraction)

    try:
        assembly = DocumentAssembler(context, lines, classifier=line_classifier).run()
        document = DocumentValidator(context, assembly).run()
    finally:
        context.stats.elapsed_sec = timer.elapsed
        logger.info(f"Extraction stats: {context.stats.summary()}")

    log_timing(logger, f"Extracted {source_name or 'document'}", context.stats.elapsed_sec)
    return document


def extract_pdf(
    source: Union[Path, str, bytes],
    config: Optional[Config] = None,
    classifier: Optional[str] = None,
    source_name: str = "",
) -> ExtractedDocument:
    """
    Read a PDF's text layer and extract it.

    Args:
        source: Path to a PDF, or the raw bytes of an uploaded PDF
        config: Configuration (default: global config)
        classifier: Classifier strategy name (default from config)
        source_name: Name used in logs for byte sources

    Raises:
        UpstreamExtractionError: The PDF could not be read
        NoCommitteesFoundError, NoVotersFoundError: See extract_document
    """
    context = _build_context(config, source_name, 0)
    source_text = PDFTextExtractor(context, source).run()

    return extract_document(
        source_text.text,
        page_count=source_text.page_count,
        config=context.config,
        classifier=classifier,
        source_name=source_text.source_name,
    )
