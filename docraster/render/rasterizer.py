# docraster/render/rasterizer.py
# ============================================================
# Rasterizer — External Page Conversion
# ============================================================
# Converts ONE page of a PDF into ONE image file by driving an
# external tool. Two backends share the Rasterizer protocol:
#
#   - MagickRasterizer:  spawns ImageMagick as an asyncio
#     subprocess; the event loop is free while it runs.
#   - PopplerRasterizer: renders through pdf2image (poppler),
#     fits the page with Pillow and saves WebP. pdf2image is
#     blocking, so it runs on a worker thread.
#
# Output is fixed: 150 DPI, fitted inside 1000x1000 keeping the
# aspect ratio, WebP. The destination file is trusted only when
# the tool reported success; its content is never inspected.
#
# Usage:
#   rasterizer = build_rasterizer()
#   await rasterizer.render(Path("report.pdf"), 0, Path("report_data/1.webp"))
# ============================================================

import asyncio
from pathlib import Path
from typing import Optional, Protocol

from pdf2image import convert_from_path
from pdf2image.exceptions import (
    PDFInfoNotInstalledError,
    PDFPageCountError,
    PDFPopplerTimeoutError,
    PDFSyntaxError,
)

from config.settings import settings
from docraster.document.paths import IMAGE_FORMAT
from docraster.errors import ExternalToolError
from docraster.utils.image import fit_within, get_image_info
from docraster.utils.logger import get_logger

logger = get_logger(__name__)

IMAGE_DENSITY = 150
IMAGE_MAX_SIZE = (1000, 1000)
IMAGE_RESIZE = f"{IMAGE_MAX_SIZE[0]}x{IMAGE_MAX_SIZE[1]}"


class Rasterizer(Protocol):
    """Capability that renders a single page of a document to a file."""

    async def render(self, source: Path, page_index: int, destination: Path) -> None:
        """
        Render page ``page_index`` (0-based) of ``source`` into ``destination``.

        Raises:
            ExternalToolError: If the conversion did not succeed.
        """
        ...


def build_magick_args(source: Path, page_index: int, destination: Path) -> list[str]:
    """
    Build the ImageMagick argument list for a single page.

    The page is selected with ImageMagick's ``file[index]`` syntax;
    ``-scene 1 +adjoin`` keeps the output a single frame.
    """
    return [
        "-density",
        str(IMAGE_DENSITY),
        f"{source}[{page_index}]",
        "-resize",
        IMAGE_RESIZE,
        "-scene",
        "1",
        "+adjoin",
        str(destination),
    ]


class MagickRasterizer:
    """Renders pages by running the ImageMagick command line tool."""

    def __init__(self, binary: Optional[str] = None):
        self.binary = binary or settings.magick_binary

    async def render(self, source: Path, page_index: int, destination: Path) -> None:
        args = build_magick_args(source, page_index, destination)
        logger.debug(f"Running {self.binary} {' '.join(args)}")

        try:
            process = await asyncio.create_subprocess_exec(
                self.binary,
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise ExternalToolError(
                f"Failed to run magick command '{self.binary}': {exc}",
                exit_code=None,
                stderr=str(exc),
            ) from exc

        stdout, stderr = await process.communicate()
        stderr_text = stderr.decode("utf-8", errors="replace")

        if process.returncode != 0:
            raise ExternalToolError(
                f"Magick command failed with exit code {process.returncode}, "
                f"stderr: {stderr_text}",
                exit_code=process.returncode,
                stderr=stderr_text,
            )

        logger.info(
            f"Magick command succeeded: {stdout.decode('utf-8', errors='replace')}"
        )


class PopplerRasterizer:
    """Renders pages through pdf2image and saves them with Pillow."""

    def __init__(self, poppler_path: Optional[str] = None):
        self.poppler_path = poppler_path or settings.poppler_path

    async def render(self, source: Path, page_index: int, destination: Path) -> None:
        await asyncio.to_thread(self._render_sync, source, page_index, destination)

    def _render_sync(self, source: Path, page_index: int, destination: Path) -> None:
        page_number = page_index + 1
        try:
            images = convert_from_path(
                str(source),
                dpi=IMAGE_DENSITY,
                first_page=page_number,
                last_page=page_number,
                poppler_path=self.poppler_path,
            )
        except (
            PDFInfoNotInstalledError,
            PDFPageCountError,
            PDFPopplerTimeoutError,
            PDFSyntaxError,
            OSError,
        ) as exc:
            raise ExternalToolError(
                f"Poppler failed on page {page_number} of '{source}': {exc}",
                exit_code=None,
                stderr=str(exc),
            ) from exc

        if not images:
            raise ExternalToolError(
                f"Poppler produced no image for page {page_number} of '{source}'",
                exit_code=None,
            )

        image = fit_within(images[0], IMAGE_MAX_SIZE)
        info = get_image_info(image)
        logger.debug(f"  PDF page {page_number}: {info['width']}x{info['height']}")

        try:
            image.save(str(destination), format=IMAGE_FORMAT.upper())
        except OSError as exc:
            raise ExternalToolError(
                f"Failed to write '{destination}': {exc}",
                exit_code=None,
                stderr=str(exc),
            ) from exc

        logger.info(f"Poppler render succeeded: {destination.name}")


def build_rasterizer(backend: Optional[str] = None) -> Rasterizer:
    """
    Create the rasterizer selected by ``backend`` (default: settings).

    Raises:
        ValueError: For an unknown backend name.
    """
    backend = backend or settings.rasterizer_backend
    if backend == "magick":
        return MagickRasterizer()
    if backend == "poppler":
        return PopplerRasterizer()
    raise ValueError(f"Unknown rasterizer backend: '{backend}'. Supported: magick, poppler")
