# docraster/cache/__init__.py
# ============================================================
# Cache Package
# ============================================================
# Count-based validation of a document's rendered-page cache:
#   - inspect_cache: COMPLETE / MISMATCHED / ABSENT
#   - invalidate_cache: all-or-nothing removal of rendered pages
# ============================================================

from docraster.cache.inspector import (
    CacheState,
    CacheStatus,
    count_rendered_pages,
    discard_rendered_page,
    ensure_cache_dir,
    inspect_cache,
    invalidate_cache,
    list_rendered_pages,
)

__all__ = [
    "CacheState",
    "CacheStatus",
    "count_rendered_pages",
    "discard_rendered_page",
    "ensure_cache_dir",
    "inspect_cache",
    "invalidate_cache",
    "list_rendered_pages",
]
