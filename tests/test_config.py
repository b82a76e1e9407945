"""Tests for configuration management."""

import pytest
from pydantic import ValidationError


class TestSettingsDefaults:
    """Test default settings."""

    def test_defaults(self, tmp_path, monkeypatch):
        """Defaults apply when nothing is configured."""
        monkeypatch.chdir(tmp_path)

        from pamphlet_tiler.config import Settings

        settings = Settings()

        assert settings.tile_size == 512
        assert settings.quality == 80
        assert settings.lossless is False
        assert settings.port == 8000


class TestSettingsFromEnvFile:
    """Test loading settings from .env file."""

    def test_loads_from_env_file(self, tmp_path, monkeypatch):
        """Settings loads values from .env file."""
        # Create .env file
        env_file = tmp_path / ".env"
        env_file.write_text("TILER_TILE_SIZE=256\nTILER_QUALITY=90\n")

        # Change to tmp_path so .env is found
        monkeypatch.chdir(tmp_path)

        from pamphlet_tiler.config import Settings

        settings = Settings()

        assert settings.tile_size == 256
        assert settings.quality == 90

    def test_env_var_overrides_env_file(self, tmp_path, monkeypatch):
        """Environment variables take precedence over .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("TILER_TILE_SIZE=256\n")

        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("TILER_TILE_SIZE", "1024")

        from pamphlet_tiler.config import Settings

        settings = Settings()

        assert settings.tile_size == 1024  # env var wins

    def test_invalid_quality_rejected(self, tmp_path, monkeypatch):
        """Out-of-range quality fails validation."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("TILER_QUALITY", "150")

        from pamphlet_tiler.config import Settings

        with pytest.raises(ValidationError):
            Settings()

    @pytest.mark.parametrize("tile_size", ["0", "16384", "1000000"])
    def test_invalid_tile_size_rejected(self, tmp_path, monkeypatch, tile_size):
        """Tile sizes outside 1-16383 fail validation."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("TILER_TILE_SIZE", tile_size)

        from pamphlet_tiler.config import Settings

        with pytest.raises(ValidationError):
            Settings()
