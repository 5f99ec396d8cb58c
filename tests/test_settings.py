# tests/test_settings.py
# ============================================================
# Unit Tests — Settings
# ============================================================

import pytest
from pydantic import ValidationError

from config.settings import Settings


class TestSettings:
    """Test defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        """Out of the box the ImageMagick backend is used."""
        monkeypatch.delenv("RASTERIZER_BACKEND", raising=False)
        monkeypatch.delenv("MAGICK_BINARY", raising=False)
        settings = Settings(_env_file=None)
        assert settings.rasterizer_backend == "magick"
        assert settings.magick_binary == "magick"
        assert settings.poppler_path is None
        assert settings.log_level == "INFO"

    def test_environment_override(self, monkeypatch):
        """Environment variables take precedence over defaults."""
        monkeypatch.setenv("RASTERIZER_BACKEND", "poppler")
        monkeypatch.setenv("MAGICK_BINARY", "/opt/im7/bin/magick")
        settings = Settings(_env_file=None)
        assert settings.rasterizer_backend == "poppler"
        assert settings.magick_binary == "/opt/im7/bin/magick"

    def test_unknown_backend_rejected(self, monkeypatch):
        """Only magick and poppler are valid backends."""
        monkeypatch.setenv("RASTERIZER_BACKEND", "ghostscript")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
