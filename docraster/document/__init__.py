# docraster/document/__init__.py
# ============================================================
# Document Package
# ============================================================
# Everything that is derived from the source document itself:
#   - resolve_cache_dir / rendered_page_path: on-disk cache layout
#   - count_pages: page count via pypdf (no rendering)
#   - select_document: picker capability → document path
# ============================================================

from docraster.document.counter import count_pages
from docraster.document.paths import (
    CACHE_DIR_SUFFIX,
    IMAGE_FORMAT,
    is_rendered_page,
    rendered_page_path,
    resolve_cache_dir,
)
from docraster.document.selection import select_document

__all__ = [
    "CACHE_DIR_SUFFIX",
    "IMAGE_FORMAT",
    "count_pages",
    "is_rendered_page",
    "rendered_page_path",
    "resolve_cache_dir",
    "select_document",
]
