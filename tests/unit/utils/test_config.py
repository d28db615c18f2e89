"""Unit tests for configuration utilities."""

import pytest

from srtshift.utils.config import get_settings

pytestmark = pytest.mark.unit


class TestSettings:
    """Test cases for Settings class."""

    @pytest.fixture(autouse=True)
    def clear_cache(self):
        """Clear settings cache before and after each test."""
        get_settings.cache_clear()
        yield
        get_settings.cache_clear()

    @pytest.fixture
    def no_env_file(self, tmp_path, monkeypatch):
        """Run test in a directory without .env file."""
        monkeypatch.chdir(tmp_path)
        for name in ("SRTSHIFT_ENCODING", "SRTSHIFT_LOG_LEVEL", "SRTSHIFT_LOG_JSON"):
            monkeypatch.delenv(name, raising=False)
        get_settings.cache_clear()
        yield
        get_settings.cache_clear()

    def test_settings_defaults(self, no_env_file):
        """Should default to UTF-8 files and INFO console logging."""
        settings = get_settings()

        assert settings.encoding == "utf-8"
        assert settings.log_level == "INFO"
        assert settings.log_json is False

    def test_settings_loads_from_prefixed_env(self, monkeypatch, no_env_file):
        """Should load SRTSHIFT_* environment variables."""
        monkeypatch.setenv("SRTSHIFT_ENCODING", "utf-8-sig")
        monkeypatch.setenv("SRTSHIFT_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("SRTSHIFT_LOG_JSON", "true")

        settings = get_settings()

        assert settings.encoding == "utf-8-sig"
        assert settings.log_level == "DEBUG"
        assert settings.log_json is True

    def test_settings_loads_from_env_file(self, tmp_path, no_env_file):
        """Should read settings from a .env file in the working directory."""
        (tmp_path / ".env").write_text("SRTSHIFT_ENCODING=cp1252\n", encoding="utf-8")

        assert get_settings().encoding == "cp1252"

    def test_get_settings_is_cached(self, monkeypatch, no_env_file):
        """Should return cached settings on subsequent calls."""
        monkeypatch.setenv("SRTSHIFT_ENCODING", "latin-1")

        settings1 = get_settings()
        monkeypatch.setenv("SRTSHIFT_ENCODING", "utf-16")
        settings2 = get_settings()

        # Same instance due to caching
        assert settings1 is settings2
        assert settings1.encoding == "latin-1"

    def test_cache_clear_reloads_settings(self, monkeypatch, no_env_file):
        """Should reload settings after cache clear."""
        monkeypatch.setenv("SRTSHIFT_ENCODING", "latin-1")
        settings1 = get_settings()

        get_settings.cache_clear()
        monkeypatch.setenv("SRTSHIFT_ENCODING", "utf-16")
        settings2 = get_settings()

        assert settings1.encoding == "latin-1"
        assert settings2.encoding == "utf-16"
        assert settings1 is not settings2
