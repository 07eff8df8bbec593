import logging
import os

# CLI tests configure logging; keep them from writing log files
os.environ["LOG_TO_FILE"] = "0"

import pytest

from roster_extractor.config import Config, reset_config
from roster_extractor.logger import ROOT_LOGGER_NAME
from roster_extractor.processors import ProcessingContext

ROSTER_ENV = (
    "DEBUG",
    "ROSTER_CLASSIFIER",
    "ROSTER_LOOKAHEAD_LINES",
    "ROSTER_SERIAL_CEILING",
    "ROSTER_MIN_LINE_LENGTH",
    "ROSTER_MIN_HEADER_LENGTH",
    "ROSTER_PLACEHOLDER_NAME",
    "PDF_MAX_FILE_SIZE_MB",
)


def _reset_package_logger():
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    for key in ROSTER_ENV:
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()
    _reset_package_logger()


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def context(config):
    return ProcessingContext(config=config)
