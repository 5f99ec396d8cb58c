# docraster/utils/__init__.py
# ============================================================
# Shared Utilities Package
# ============================================================
# Provides reusable helpers used across the pipeline:
#   - logger: Structured logging with Rich formatting
#   - image: Bounding-box resizing and metadata extraction
# ============================================================

from docraster.utils.logger import get_logger
from docraster.utils.image import fit_within, get_image_info

__all__ = [
    "get_logger",
    "fit_within",
    "get_image_info",
]
