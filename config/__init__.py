# config/__init__.py
# ============================================================
# Configuration package for the document rasterizer.
# Provides centralized, validated settings loaded from .env file.
#
# Usage:
#   from config.settings import settings
#   print(settings.rasterizer_backend)
# ============================================================

from config.settings import settings

__all__ = ["settings"]
