# docraster/pipeline/__init__.py
# ============================================================
# Pipeline Package
# ============================================================
# Contains the PipelineOrchestrator that ties path derivation,
# page counting, cache inspection, rendering and delivery into
# one run per document.
#
# Key classes:
#   - PipelineOrchestrator: document → cached page images → notifier
#   - PipelineResult: summary of a run
#   - ResultEmitter / ImageLoaded: ordered page delivery
# ============================================================

from docraster.pipeline.emitter import (
    IMAGE_CHANNEL,
    ImageLoaded,
    Notifier,
    PageImage,
    ResultEmitter,
)
from docraster.pipeline.orchestrator import (
    PipelineOrchestrator,
    PipelineResult,
    PipelineState,
)

__all__ = [
    "IMAGE_CHANNEL",
    "ImageLoaded",
    "Notifier",
    "PageImage",
    "PipelineOrchestrator",
    "PipelineResult",
    "PipelineState",
    "ResultEmitter",
]
