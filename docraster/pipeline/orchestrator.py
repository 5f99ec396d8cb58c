# docraster/pipeline/orchestrator.py
# ============================================================
# Pipeline Orchestrator — Document → Cached Page Images
# ============================================================
# Runs one document through the whole flow:
#
#   START → RESOLVED → COUNTED → CACHE_COMPLETE ───────────→ DONE
#                              └→ CACHE_ABSENT_OR_INVALID
#                                   → RENDERING(0..n-1) ────→ DONE
#   (any state) → ERROR
#
# Pages are processed strictly one after another: page i is
# rendered, then delivered, before page i+1 is started. A failure
# aborts the run; pages already written stay on disk and the
# next run's count check redoes the whole cache.
#
# Concurrent runs against the same document are not guarded;
# callers serialize requests per document path.
#
# Usage:
#   from docraster.pipeline.orchestrator import PipelineOrchestrator
#   pipeline = PipelineOrchestrator(notifier=my_notifier)
#   result = await pipeline.prepare("/docs/report.pdf")
# ============================================================

import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Union

from docraster.cache.inspector import (
    CacheState,
    discard_rendered_page,
    ensure_cache_dir,
    inspect_cache,
    invalidate_cache,
)
from docraster.document.counter import count_pages
from docraster.document.paths import rendered_page_path, resolve_cache_dir
from docraster.pipeline.emitter import Notifier, ResultEmitter
from docraster.render.rasterizer import Rasterizer, build_rasterizer
from docraster.utils.logger import get_logger

logger = get_logger(__name__)


class PipelineState(str, Enum):
    START = "start"
    RESOLVED = "resolved"
    COUNTED = "counted"
    CACHE_COMPLETE = "cache_complete"
    CACHE_ABSENT_OR_INVALID = "cache_absent_or_invalid"
    RENDERING = "rendering"
    DONE = "done"
    ERROR = "error"


@dataclass
class PipelineResult:
    """
    Summary of a completed pipeline run.

    Attributes:
        source_path: Absolute path of the source document.
        cache_dir: Directory holding the rendered pages.
        page_count: Number of pages in the document (and images delivered).
        cache_hit: True when the cache was replayed without rendering.
        pages_rendered: Rasterizer invocations made during the run.
        pages_emitted: Pages delivered to the notifier.
        files_removed: Stale rendered pages deleted before re-rendering.
        latency_ms: End-to-end run time in milliseconds.
    """
    source_path: str
    cache_dir: str
    page_count: int
    cache_hit: bool
    pages_rendered: int = 0
    pages_emitted: int = 0
    files_removed: int = 0
    latency_ms: float = 0.0


class PipelineOrchestrator:
    """
    Sequences cache-path derivation, page counting, cache inspection,
    rendering and delivery for one document per call.

    Collaborators are injected so hosts and tests can swap them:
    the notifier receives every delivered page, the rasterizer renders
    missing pages, and the page counter reads the document's page count.

    Example:
        >>> pipeline = PipelineOrchestrator(notifier=bus, rasterizer=MagickRasterizer())
        >>> result = await pipeline.prepare("/docs/report.pdf")
        >>> result.cache_hit
        False
    """

    def __init__(
        self,
        notifier: Notifier,
        rasterizer: Optional[Rasterizer] = None,
        page_counter: Callable[[Path], int] = count_pages,
    ):
        self.notifier = notifier
        self.rasterizer = rasterizer or build_rasterizer()
        self.page_counter = page_counter
        self.state = PipelineState.START

    def _transition(self, state: PipelineState) -> None:
        logger.debug(f"Pipeline state: {self.state.value} → {state.value}")
        self.state = state

    async def prepare(self, document_path: Union[str, Path]) -> PipelineResult:
        """
        Make every page of a document available to the subscriber.

        Replays the cache when it holds exactly one image per page,
        otherwise (re)renders every page from the first one.

        Returns:
            PipelineResult describing what the run did.

        Raises:
            InvalidPathError, DocumentLoadError, CacheIOError,
            ExternalToolError: The run is aborted on the first failure.
        """
        self.state = PipelineState.START
        start = time.perf_counter()
        source = Path(document_path).expanduser().absolute()
        logger.info(f"Preparing document: [bold]{source}[/bold]")

        try:
            result = await self._run(source)
        except Exception as exc:
            self._transition(PipelineState.ERROR)
            logger.error(f"Preparation of {source.name} failed: {exc}")
            raise

        result.latency_ms = (time.perf_counter() - start) * 1000
        self._transition(PipelineState.DONE)
        logger.info(
            f"Document ready — {result.pages_emitted}/{result.page_count} pages, "
            f"{'cache hit' if result.cache_hit else f'{result.pages_rendered} rendered'}, "
            f"{result.latency_ms:.0f}ms"
        )
        return result

    async def _run(self, source: Path) -> PipelineResult:
        cache_dir = resolve_cache_dir(source)
        self._transition(PipelineState.RESOLVED)

        page_count = self.page_counter(source)
        self._transition(PipelineState.COUNTED)

        result = PipelineResult(
            source_path=str(source),
            cache_dir=str(cache_dir),
            page_count=page_count,
            cache_hit=False,
        )
        emitter = ResultEmitter(self.notifier)
        status = inspect_cache(cache_dir, page_count)

        if status.state is CacheState.COMPLETE:
            self._transition(PipelineState.CACHE_COMPLETE)
            logger.info("All pages are already processed. Emitting existing images.")
            result.cache_hit = True
            for page_number in range(1, page_count + 1):
                await emitter.send(rendered_page_path(cache_dir, page_number), page_number)
                result.pages_emitted += 1
            return result

        if status.state is CacheState.ABSENT:
            ensure_cache_dir(cache_dir)
        else:
            result.files_removed = invalidate_cache(cache_dir)
        self._transition(PipelineState.CACHE_ABSENT_OR_INVALID)

        for page_index in range(page_count):
            self._transition(PipelineState.RENDERING)
            page_number = page_index + 1
            output = rendered_page_path(cache_dir, page_number)
            logger.debug(f"Rendering page {page_number}/{page_count} → {output.name}")

            try:
                await self.rasterizer.render(source, page_index, output)
            except Exception:
                discard_rendered_page(output)
                raise
            result.pages_rendered += 1

            await emitter.send(output, page_number)
            result.pages_emitted += 1

        return result
