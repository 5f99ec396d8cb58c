# docraster/__init__.py
# ============================================================
# docraster — PDF to per-page image pipeline
# ============================================================
# Root package. Sub-packages:
#   - docraster.document → Cache path derivation, page counting, selection
#   - docraster.cache    → Rendered-page cache inspection/invalidation
#   - docraster.render   → External rasterizer invocation
#   - docraster.pipeline → Orchestrator and result delivery
#   - docraster.utils    → Shared utilities (logging, image helpers)
# ============================================================

__version__ = "0.1.0"
