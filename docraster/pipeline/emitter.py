# docraster/pipeline/emitter.py
# ============================================================
# Result Emitter — Page Delivery to the Subscriber
# ============================================================
# Reads a rendered page from disk and hands its bytes to the
# host's notifier on the "image" channel. The notifier is
# injected, so the host decides the transport (UI event bus,
# console printer, test recorder).
#
# Pages are delivered one at a time and the pipeline waits for
# each delivery before touching the next page, which keeps the
# subscriber's view in ascending page order.
# ============================================================

import inspect
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Optional, Protocol, Union

from docraster.errors import CacheIOError
from docraster.utils.logger import get_logger

logger = get_logger(__name__)

IMAGE_CHANNEL = "image"


@dataclass
class PageImage:
    """
    One rendered page held in memory on its way to the subscriber.

    Attributes:
        page_number: 1-indexed page number within the source document.
        path: Rendered page file the bytes were read from.
        data: Encoded image bytes.
    """
    page_number: int
    path: Path
    data: bytes


@dataclass(frozen=True)
class ImageLoaded:
    """Event payload published on the image channel."""
    page_number: int
    source_path: str
    image_bytes: bytes

    def to_payload(self) -> dict[str, Any]:
        return {
            "page_number": self.page_number,
            "source_path": self.source_path,
            "image_bytes": self.image_bytes,
        }


class Notifier(Protocol):
    """Named-channel event sink supplied by the host application."""

    def emit(self, channel: str, event: ImageLoaded) -> Optional[Awaitable[None]]:
        ...


class ResultEmitter:
    """Delivers rendered pages, in order, to an injected notifier."""

    def __init__(self, notifier: Notifier, channel: str = IMAGE_CHANNEL):
        self.notifier = notifier
        self.channel = channel

    def load(self, path: Path, page_number: int) -> PageImage:
        """
        Read a rendered page file into memory.

        Raises:
            CacheIOError: If the file cannot be read.
        """
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise CacheIOError(f"Failed to read rendered page '{path}': {exc}") from exc
        return PageImage(page_number=page_number, path=path, data=data)

    async def emit(self, page: PageImage) -> None:
        """Publish a page; waits for the notifier when it returns an awaitable."""
        logger.info(f"Sending image: {page.path}")
        logger.info(f"Sending page number: {page.page_number}")

        event = ImageLoaded(
            page_number=page.page_number,
            source_path=str(page.path),
            image_bytes=page.data,
        )
        result = self.notifier.emit(self.channel, event)
        if inspect.isawaitable(result):
            await result

    async def send(self, path: Union[str, Path], page_number: int) -> None:
        """Read a rendered page and deliver it."""
        page = self.load(Path(path), page_number)
        await self.emit(page)
