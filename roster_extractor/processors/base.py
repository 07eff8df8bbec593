"""
Base processor class and processing context.

Provides common functionality for pipeline processors including
logging, timing and configuration access.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from ..config import Config
from ..exceptions import ProcessingError, RosterError
from ..logger import get_logger
from ..models import ExtractionStats
from ..utils.timing import Timer, format_duration


@dataclass
class ProcessingContext:
    """
    Per-document context passed between processors.

    A fresh context is built for every document, so processors never share
    mutable state across documents.
    """

    config: Config
    source_name: str = ""
    page_count: int = 0
    stats: ExtractionStats = field(default_factory=ExtractionStats)

    def __post_init__(self):
        self.stats.source_name = self.source_name
        self.stats.page_count = self.page_count


class BaseProcessor(ABC):
    """
    Abstract base class for pipeline processors.

    Provides:
    - Consistent logging
    - Timing instrumentation
    - Error logging (errors are re-raised to the caller)
    """

    # Processor name for logging (override in subclass)
    name: str = "BaseProcessor"

    def __init__(self, context: ProcessingContext):
        self.context = context
        self.config = context.config
        self.logger = get_logger(self.name)
        self._timer = Timer()

    @property
    def debug_mode(self) -> bool:
        return self.config.debug

    def log_debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message (only in debug mode)."""
        if self.debug_mode:
            extra = " ".join(f"{k}={v}" for k, v in kwargs.items())
            self.logger.debug(f"{message} {extra}".strip())

    def log_info(self, message: str, **kwargs: Any) -> None:
        extra = " ".join(f"{k}={v}" for k, v in kwargs.items())
        self.logger.info(f"{message} {extra}".strip())

    def log_warning(self, message: str, **kwargs: Any) -> None:
        extra = " ".join(f"{k}={v}" for k, v in kwargs.items())
        self.logger.warning(f"{message} {extra}".strip())

    def log_error(self, message: str, error: Optional[Exception] = None) -> None:
        if error:
            self.logger.error(f"{message}: {error}", exc_info=self.debug_mode)
        else:
            self.logger.error(message)

    @abstractmethod
    def process(self) -> Any:
        """
        Execute the processor's main task.

        Returns:
            The processor's result
        """

    def validate(self) -> bool:
        """
        Validate that processor can run.

        Override in subclass to check prerequisites.
        """
        return True

    def run(self) -> Any:
        """
        Run processor with timing and logging.

        Returns:
            Result of ``process()``

        Raises:
            ProcessingError: If validation fails
            RosterError: Whatever the processor raised, after logging it
        """
        self.log_debug(f"Starting {self.name}", source=self.context.source_name or "-")
        self._timer = Timer()

        if not self.validate():
            raise ProcessingError(f"{self.name} validation failed", details={"processor": self.name})

        try:
            result = self.process()
        except RosterError as e:
            if e.recoverable:
                self.log_warning(f"{self.name} finished without result", reason=type(e).__name__)
            else:
                self.log_error(f"{self.name} failed after {format_duration(self._timer.elapsed)}", error=e)
            raise

        self.log_debug(f"Completed {self.name}", duration=format_duration(self._timer.elapsed))
        return result
