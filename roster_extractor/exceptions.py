"""
Custom exceptions for the roster extraction application.

All application-specific exceptions inherit from RosterError.
"""

from __future__ import annotations

from typing import Optional, Any, Sequence


class RosterError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message: Human-readable error message
        details: Additional error details (for debugging)
        recoverable: Whether the error can potentially be recovered from
    """

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(RosterError):
    """
    Invalid or missing configuration.

    Examples:
        - Unknown classifier strategy name
        - Lookahead window outside the supported range
    """

    def __init__(self, message: str, config_key: Optional[str] = None):
        details = {"config_key": config_key} if config_key else None
        super().__init__(message, details=details, recoverable=False)


class ExtractionError(RosterError):
    """
    Extraction finished but produced no usable structure.

    These are deterministic outcomes of the heuristics not matching the
    input shape, not crashes. Retrying with the same input is pointless.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, details=details, recoverable=True)


class NoCommitteesFoundError(ExtractionError):
    """No committee header line was recognized anywhere in the input."""

    def __init__(self, line_count: int, sample_lines: Sequence[str] = ()):
        message = (
            "لم يتم العثور على أي لجان في الملف. "
            f"الملف يحتوي على {line_count} سطر. "
            'تأكد من أن الملف يحتوي على رؤوس لجان مثل "لجنة مدرسة..." أو "اللجنة الانتخابية".'
        )
        super().__init__(
            message,
            details={"line_count": line_count, "sample_lines": list(sample_lines)},
        )
        self.line_count = line_count
        self.sample_lines = list(sample_lines)


class NoVotersFoundError(ExtractionError):
    """Committees were recognized but none of them accumulated a voter."""

    def __init__(self, committee_names: Sequence[str]):
        names = list(committee_names)
        message = (
            f"تم العثور على {len(names)} لجنة ولكن لم يتم العثور على أي ناخبين. "
            'تأكد من أن الملف يحتوي على جداول الناخبين بتنسيق "رقم اسم_الناخب". '
            f"اللجان المكتشفة: {'، '.join(names)}"
        )
        super().__init__(message, details={"committee_names": names})
        self.committee_names = names


class UpstreamExtractionError(RosterError):
    """
    The text-extraction collaborator failed.

    Examples:
        - Corrupted PDF file
        - Password-protected PDF
        - Upload larger than the configured limit
    """

    def __init__(
        self,
        message: str = "حدث خطأ أثناء معالجة الملف",
        source: Optional[str] = None,
        detail: Optional[str] = None
    ):
        details = {}
        if source:
            details["source"] = source
        if detail:
            details["detail"] = detail
        super().__init__(message, details=details, recoverable=False)


class DataPersistenceError(RosterError):
    """
    Failed to save or load data.

    Examples:
        - File write permission denied
        - Invalid JSON format
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        operation: Optional[str] = None  # "save" or "load"
    ):
        details = {}
        if file_path:
            details["file_path"] = file_path
        if operation:
            details["operation"] = operation
        super().__init__(message, details=details, recoverable=False)


ProcessingError = RosterError  # Generic processing error
