"""Pytest configuration and shared fixtures for integration tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from srtshift.utils.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the get_settings LRU cache before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def no_env_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Switch to a temporary directory with no .env file or SRTSHIFT_* vars."""
    monkeypatch.chdir(tmp_path)
    for name in ("SRTSHIFT_ENCODING", "SRTSHIFT_LOG_LEVEL", "SRTSHIFT_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def input_srt(tmp_path: Path, sample_srt_content: str) -> Path:
    """Write the two-entry sample to disk."""
    path = tmp_path / "input.srt"
    path.write_text(sample_srt_content, encoding="utf-8")
    return path


@pytest.fixture
def bilingual_srt(tmp_path: Path, bilingual_srt_content: str) -> Path:
    """Write the three-line bilingual sample to disk."""
    path = tmp_path / "bilingual.srt"
    path.write_text(bilingual_srt_content, encoding="utf-8")
    return path
