"""
Centralized configuration management.

Configuration is loaded from:
1. Environment variables
2. .env file (if present)
3. Default values

Usage:
    from roster_extractor.config import get_config
    config = get_config()
    print(config.extraction.lookahead_lines)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError


def _load_dotenv(dotenv_path: Optional[Path] = None) -> None:
    """
    Minimal .env loader.

    Supports KEY=VALUE, ignores blank lines and comments (#).
    Does not override existing environment variables.
    """
    if dotenv_path is None:
        dotenv_path = Path(__file__).resolve().parent.parent / ".env"

    if not dotenv_path.exists() or not dotenv_path.is_file():
        return

    for raw_line in dotenv_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if not key:
            continue
        if os.getenv(key) in (None, ""):
            os.environ[key] = value.strip().strip('"').strip("'")


# Load .env on module import
_load_dotenv()


def _get_bool_env(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    value = os.getenv(key, "").strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    return default


def _get_int_env(key: str, default: int) -> int:
    """Get integer from environment variable."""
    value = os.getenv(key, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


# Placeholder used when a committee header yields no usable name
DEFAULT_COMMITTEE_NAME = "لجنة انتخابية"

CLASSIFIER_NAMES = ("layered", "keyword-pair", "leading-numeral", "packed-scan")

LOOKAHEAD_MIN = 10
LOOKAHEAD_MAX = 15


@dataclass
class ExtractionConfig:
    """Heuristic knobs for the roster extraction engine."""
    classifier: str = field(
        default_factory=lambda: os.getenv("ROSTER_CLASSIFIER", "layered").strip().lower()
    )
    lookahead_lines: int = field(default_factory=lambda: _get_int_env("ROSTER_LOOKAHEAD_LINES", 10))
    serial_ceiling: int = field(default_factory=lambda: _get_int_env("ROSTER_SERIAL_CEILING", 10000))
    min_line_length: int = field(default_factory=lambda: _get_int_env("ROSTER_MIN_LINE_LENGTH", 10))
    min_header_length: int = field(default_factory=lambda: _get_int_env("ROSTER_MIN_HEADER_LENGTH", 10))
    placeholder_name: str = field(
        default_factory=lambda: os.getenv("ROSTER_PLACEHOLDER_NAME", "").strip() or DEFAULT_COMMITTEE_NAME
    )

    def validate(self) -> None:
        """
        Check that values are usable.

        Raises:
            ConfigurationError: If any value is out of range
        """
        if self.classifier not in CLASSIFIER_NAMES:
            raise ConfigurationError(
                f"Unknown classifier '{self.classifier}', expected one of {', '.join(CLASSIFIER_NAMES)}",
                config_key="ROSTER_CLASSIFIER",
            )
        if not LOOKAHEAD_MIN <= self.lookahead_lines <= LOOKAHEAD_MAX:
            raise ConfigurationError(
                f"Lookahead window must be between {LOOKAHEAD_MIN} and {LOOKAHEAD_MAX} lines, "
                f"got {self.lookahead_lines}",
                config_key="ROSTER_LOOKAHEAD_LINES",
            )
        if self.serial_ceiling < 1:
            raise ConfigurationError(
                f"Serial ceiling must be positive, got {self.serial_ceiling}",
                config_key="ROSTER_SERIAL_CEILING",
            )
        if self.min_line_length < 0 or self.min_header_length < 0:
            raise ConfigurationError("Length thresholds cannot be negative")


@dataclass
class PDFConfig:
    """PDF text source configuration."""
    max_file_size_mb: int = field(default_factory=lambda: _get_int_env("PDF_MAX_FILE_SIZE_MB", 100))

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024


@dataclass
class Config:
    """
    Main application configuration.

    All settings are loaded from environment variables with sensible defaults.
    Set DEBUG=1 in environment to enable debug mode.
    """

    # Base directory for relative output and log paths (working directory)
    base_dir: Path = field(default_factory=Path.cwd)

    # Directory paths
    output_dir: Path = field(default=None)
    logs_dir: Path = field(default=None)

    # Debug mode (enables verbose logging)
    debug: bool = field(default_factory=lambda: _get_bool_env("DEBUG", False))
    log_to_file: bool = field(default_factory=lambda: _get_bool_env("LOG_TO_FILE", True))

    # Sub-configurations
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    pdf: PDFConfig = field(default_factory=PDFConfig)

    def __post_init__(self):
        """Resolve paths after initialization."""
        if self.output_dir is None:
            self.output_dir = self.base_dir / os.getenv("OUTPUT_DIR", "extracted")
        if self.logs_dir is None:
            self.logs_dir = self.base_dir / os.getenv("LOG_DIR", "logs")


# Global config instance (lazily initialized)
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
