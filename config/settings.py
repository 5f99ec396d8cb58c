# config/settings.py
# ============================================================
# Centralized Configuration for the Document Rasterizer
# ============================================================
# All settings are loaded from environment variables (or .env file).
# Pydantic validates types and provides sensible defaults.
#
# Rendering constants (density, bounding box, image format) are
# fixed in docraster.render.rasterizer / docraster.document.paths
# and are NOT settings: the on-disk cache layout depends on them.
#
# Usage:
#   from config.settings import settings
#   rasterizer = build_rasterizer(settings.rasterizer_backend)
# ============================================================

from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """
    Application-wide settings. Values are loaded from environment variables
    or a .env file. Every setting has a typed default so the app can run
    out-of-the-box with zero configuration.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Rasterizer ---
    rasterizer_backend: Literal["magick", "poppler"] = Field(
        default="magick",
        description="External tool used to rasterize pages: magick (ImageMagick) | poppler (pdf2image).",
    )
    magick_binary: str = Field(
        default="magick",
        description="ImageMagick executable name or absolute path.",
    )
    poppler_path: Optional[str] = Field(
        default=None,
        description="Directory holding the poppler binaries. Uses PATH when unset.",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG | INFO | WARNING | ERROR.",
    )


# ============================================================
# Singleton instance — import this everywhere:
#   from config.settings import settings
# ============================================================
settings = Settings()
