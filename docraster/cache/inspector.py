# docraster/cache/inspector.py
# ============================================================
# Rendered-Page Cache Inspection
# ============================================================
# Decides whether a document's cache directory can be replayed
# as-is. Only the NUMBER of rendered pages is compared with the
# document's page count; no content fingerprint is kept. A
# document edited in place without changing its page count will
# therefore be served from the stale cache.
#
# A mismatch invalidates the whole cache: the count alone cannot
# tell which individual pages are stale.
#
# Usage:
#   status = inspect_cache(cache_dir, expected_pages=12)
#   if status.state is CacheState.MISMATCHED:
#       invalidate_cache(cache_dir)
# ============================================================

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from docraster.document.paths import is_rendered_page
from docraster.errors import CacheIOError
from docraster.utils.logger import get_logger

logger = get_logger(__name__)


class CacheState(str, Enum):
    """Outcome of comparing a cache directory against a page count."""
    COMPLETE = "complete"
    MISMATCHED = "mismatched"
    ABSENT = "absent"


@dataclass(frozen=True)
class CacheStatus:
    """
    Result of a cache inspection.

    Attributes:
        state: Complete, mismatched, or absent.
        found: Number of rendered-page files present (0 when absent).
        expected: Page count of the source document.
    """
    state: CacheState
    found: int
    expected: int

    @property
    def is_complete(self) -> bool:
        return self.state is CacheState.COMPLETE


def list_rendered_pages(cache_dir: Path) -> list[Path]:
    """
    List rendered-page files in a cache directory, ordered by page number.

    Raises:
        CacheIOError: If the directory cannot be read.
    """
    try:
        entries = [p for p in cache_dir.iterdir() if p.is_file() and is_rendered_page(p)]
    except OSError as exc:
        raise CacheIOError(f"Failed to read data directory '{cache_dir}': {exc}") from exc
    return sorted(entries, key=lambda p: int(p.stem))


def count_rendered_pages(cache_dir: Path) -> int:
    """Count rendered-page files in a cache directory."""
    return len(list_rendered_pages(cache_dir))


def inspect_cache(cache_dir: Path, expected_pages: int) -> CacheStatus:
    """
    Classify a cache directory against the document's page count.

    Returns:
        ABSENT if the directory does not exist, COMPLETE if it holds
        exactly ``expected_pages`` rendered pages, MISMATCHED otherwise.
    """
    if not cache_dir.exists():
        return CacheStatus(state=CacheState.ABSENT, found=0, expected=expected_pages)

    logger.info("Data dir already exists. Verifying...")
    found = count_rendered_pages(cache_dir)

    if found == expected_pages:
        state = CacheState.COMPLETE
    else:
        state = CacheState.MISMATCHED
        logger.warning(
            f"Mismatch in page count. PDF has {expected_pages} pages, "
            f"but found {found} webp files."
        )

    return CacheStatus(state=state, found=found, expected=expected_pages)


def invalidate_cache(cache_dir: Path) -> int:
    """
    Delete every rendered-page file in the cache directory.

    Other files in the directory are left alone.

    Returns:
        Number of files removed.

    Raises:
        CacheIOError: If listing or deleting fails.
    """
    removed = 0
    for page_file in list_rendered_pages(cache_dir):
        logger.info(f"Removing {page_file}")
        try:
            page_file.unlink()
        except OSError as exc:
            raise CacheIOError(f"Failed to remove existing webp file '{page_file}': {exc}") from exc
        removed += 1
    return removed


def ensure_cache_dir(cache_dir: Path) -> None:
    """
    Create the cache directory (the parent must already exist).

    Raises:
        CacheIOError: If the directory cannot be created.
    """
    try:
        cache_dir.mkdir(exist_ok=True)
    except OSError as exc:
        raise CacheIOError(f"Failed to create data directory '{cache_dir}': {exc}") from exc


def discard_rendered_page(page_file: Path) -> None:
    """
    Remove a page file left behind by a failed render.

    Raises:
        CacheIOError: If the file exists but cannot be deleted.
    """
    try:
        page_file.unlink(missing_ok=True)
    except OSError as exc:
        raise CacheIOError(f"Failed to remove partial page '{page_file}': {exc}") from exc
