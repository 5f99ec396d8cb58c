# docraster/render/__init__.py
# ============================================================
# Render Package
# ============================================================
# External single-page rasterization:
#   - Rasterizer: protocol every backend implements
#   - MagickRasterizer / PopplerRasterizer: concrete backends
#   - build_rasterizer: backend selected by settings
# ============================================================

from docraster.render.rasterizer import (
    IMAGE_DENSITY,
    IMAGE_MAX_SIZE,
    MagickRasterizer,
    PopplerRasterizer,
    Rasterizer,
    build_magick_args,
    build_rasterizer,
)

__all__ = [
    "IMAGE_DENSITY",
    "IMAGE_MAX_SIZE",
    "MagickRasterizer",
    "PopplerRasterizer",
    "Rasterizer",
    "build_magick_args",
    "build_rasterizer",
]
