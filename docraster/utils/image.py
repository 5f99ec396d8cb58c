# docraster/utils/image.py
# ============================================================
# Image Utility Functions
# ============================================================
# Pillow helpers used by the poppler rasterizer backend to bring
# a freshly rendered page into the fixed bounding box and to
# report image metadata in debug logs.
#
# Usage:
#   from docraster.utils.image import fit_within, get_image_info
#   img = fit_within(page_image, (1000, 1000))
#   info = get_image_info(img)
# ============================================================

import time

from PIL import Image

from docraster.utils.logger import get_logger

logger = get_logger(__name__)


def fit_within(image: Image.Image, box: tuple[int, int]) -> Image.Image:
    """
    Scale an image so it fits inside ``box`` while keeping its aspect ratio.

    Matches ImageMagick's ``-resize WxH`` geometry: the image is enlarged
    or shrunk until one side touches the box.
    """
    start = time.perf_counter()
    width, height = image.size
    max_width, max_height = box

    scale = min(max_width / width, max_height / height)
    new_width = max(int(round(width * scale)), 1)
    new_height = max(int(round(height * scale)), 1)

    if (new_width, new_height) == (width, height):
        return image

    resized = image.resize((new_width, new_height), Image.Resampling.LANCZOS)

    duration = (time.perf_counter() - start) * 1000
    logger.debug(f"Image resizing ({width}x{height} -> {new_width}x{new_height}) took {duration:.2f}ms")
    return resized


def get_image_info(image: Image.Image) -> dict:
    """
    Extract metadata from a PIL Image for logging and diagnostics.

    Args:
        image: PIL Image to inspect.

    Returns:
        Dictionary with width, height, mode (RGB/RGBA/L), and
        estimated size in MB.

    Example:
        >>> info = get_image_info(Image.new("RGB", (1000, 750)))
        >>> info["width"]
        1000
    """
    width, height = image.size
    # Estimate uncompressed size: width * height * channels
    channels = len(image.getbands())
    estimated_bytes = width * height * channels
    estimated_mb = round(estimated_bytes / (1024 * 1024), 2)

    return {
        "width": width,
        "height": height,
        "mode": image.mode,
        "channels": channels,
        "estimated_size_mb": estimated_mb,
    }
