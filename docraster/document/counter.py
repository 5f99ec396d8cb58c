# docraster/document/counter.py
# ============================================================
# Page Counting
# ============================================================
# Reads the PDF's page tree with pypdf to learn how many pages
# the document has. Nothing is rendered here; the count is the
# number of page images the cache is expected to hold.
# ============================================================

from pathlib import Path
from typing import Union

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from docraster.errors import DocumentLoadError
from docraster.utils.logger import get_logger

logger = get_logger(__name__)


def count_pages(document_path: Union[str, Path]) -> int:
    """
    Return the number of pages in a PDF document.

    Encrypted documents are opened with the empty user password,
    which is how most "protected" PDFs are distributed.

    Raises:
        DocumentLoadError: If the file is missing, unreadable, not a PDF,
            or encrypted with a non-empty password.
    """
    path = Path(document_path)

    try:
        reader = PdfReader(str(path))
    except (OSError, PdfReadError) as exc:
        raise DocumentLoadError(f"Failed to load PDF document '{path}': {exc}") from exc
    except Exception as exc:
        raise DocumentLoadError(f"Unexpected error reading PDF '{path}': {exc}") from exc

    if reader.is_encrypted:
        try:
            decrypted = reader.decrypt("")
        except Exception as exc:
            raise DocumentLoadError(f"Failed to decrypt PDF document '{path}': {exc}") from exc
        if not decrypted:
            raise DocumentLoadError(f"PDF document '{path}' is encrypted with a password.")

    try:
        page_count = len(reader.pages)
    except Exception as exc:
        raise DocumentLoadError(f"Failed to read page tree of '{path}': {exc}") from exc

    logger.debug(f"{path.name}: {page_count} pages")
    return page_count
