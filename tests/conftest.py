"""Pytest configuration and shared fixtures."""

import logging
from collections.abc import Generator

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo any logging configuration a test applied."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)


@pytest.fixture
def sample_srt_content() -> str:
    """Return sample SRT content for testing."""
    return """1
00:00:01,000 --> 00:00:02,000
Hello

2
00:00:03,000 --> 00:00:04,000
World
"""


@pytest.fixture
def bilingual_srt_content() -> str:
    """Return SRT content whose entries carry three text lines each."""
    return """1
00:00:01,000 --> 00:00:03,000
Hello
Bonjour
(greeting)

2
00:00:04,000 --> 00:00:06,000
Goodbye
Au revoir
(farewell)
"""
