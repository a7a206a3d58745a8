"""Tests for application settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from mxfantasy.config.settings import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch, tmp_path):
        """Test defaults match a standard three player game."""
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.results_file == Path("results.txt")
        assert settings.player_count == 3
        assert settings.podium_size == 3
        assert settings.debug is False

    def test_environment_override(self, monkeypatch, tmp_path):
        """Test MXF_ environment variables override defaults."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("MXF_RESULTS_PATH", "data/round1.txt")
        monkeypatch.setenv("MXF_PLAYER_COUNT", "5")

        settings = Settings()

        assert settings.results_file == Path("data/round1.txt")
        assert settings.player_count == 5

    def test_dotenv_file(self, monkeypatch, tmp_path):
        """Test settings are read from a .env file."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("MXF_DEBUG=true\n", encoding="utf-8")

        assert Settings().debug is True

    def test_player_count_must_be_positive(self, monkeypatch, tmp_path):
        """Test a game needs at least one player."""
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ValidationError):
            Settings(player_count=0)

    def test_get_settings_is_cached(self):
        """Test get_settings returns the same instance."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
