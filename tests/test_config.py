"""Tests for library settings."""

import pytest
from pydantic import ValidationError

from mazemap.config import Settings, get_settings


class TestSettings:
    """Tests for Settings and get_settings."""

    def test_defaults(self):
        """Defaults apply when no MAZEMAP_* variables are set."""
        settings = Settings(_env_file=None)

        assert settings.pause_time == 0.0
        assert settings.max_maze_size is None
        assert settings.maze_file_encoding == "utf-8"
        assert settings.default_maze_file is None

    def test_reads_environment(self, monkeypatch):
        """Settings are read from prefixed environment variables."""
        monkeypatch.setenv("MAZEMAP_PAUSE_TIME", "0.5")
        monkeypatch.setenv("MAZEMAP_MAX_MAZE_SIZE", "10")
        monkeypatch.setenv("mazemap_maze_file_encoding", "latin-1")

        settings = Settings(_env_file=None)

        assert settings.pause_time == 0.5
        assert settings.max_maze_size == 10
        assert settings.maze_file_encoding == "latin-1"

    @pytest.mark.parametrize("value", ["-1", "nan", "inf"])
    def test_invalid_pause_time(self, monkeypatch, value):
        """Negative and non-finite pause times are rejected."""
        monkeypatch.setenv("MAZEMAP_PAUSE_TIME", value)
        with pytest.raises(ValidationError, match="PAUSE_TIME"):
            Settings(_env_file=None)

    def test_invalid_max_maze_size(self, monkeypatch):
        """The size limit must be positive."""
        monkeypatch.setenv("MAZEMAP_MAX_MAZE_SIZE", "0")
        with pytest.raises(ValidationError, match="MAX_MAZE_SIZE"):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        """get_settings returns one shared instance until the cache is cleared."""
        first = get_settings()
        assert get_settings() is first
        get_settings.cache_clear()
        assert get_settings() is not first
