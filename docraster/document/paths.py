# docraster/document/paths.py
# ============================================================
# Cache Path Derivation
# ============================================================
# Maps a source document to its cache directory and to the file
# each rendered page lives in. The layout is shared with other
# tools reading the same cache, so it must stay bit-exact:
#
#   <document_dir>/<document_stem>_data/<page_number>.webp
#
# Usage:
#   from docraster.document.paths import resolve_cache_dir
#   resolve_cache_dir("/docs/report.pdf")   # → /docs/report_data
# ============================================================

import re
from pathlib import Path
from typing import Union

from docraster.errors import InvalidPathError

CACHE_DIR_SUFFIX = "_data"
IMAGE_FORMAT = "webp"


def resolve_cache_dir(document_path: Union[str, Path]) -> Path:
    """
    Derive the cache directory for a source document.

    The document's extension is stripped and ``_data`` appended to the
    remaining file name; the directory sits next to the document.
    Pure function of its input: no filesystem access.

    Raises:
        InvalidPathError: If the path has no file-name component.
    """
    path = Path(document_path)
    if path.name in ("", ".", ".."):
        raise InvalidPathError(f"Document path has no file name: '{document_path}'")

    stem = path.with_suffix("").name
    return path.with_name(f"{stem}{CACHE_DIR_SUFFIX}")


def rendered_page_path(cache_dir: Path, page_number: int) -> Path:
    """Return the file a 1-based page is rendered to."""
    return cache_dir / f"{page_number}.{IMAGE_FORMAT}"


def is_rendered_page(path: Path) -> bool:
    """True for files named like ``<digits>.webp`` (ASCII digits only)."""
    return path.suffix == f".{IMAGE_FORMAT}" and re.fullmatch(r"[0-9]+", path.stem) is not None
