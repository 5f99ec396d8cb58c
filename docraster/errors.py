# docraster/errors.py
# ============================================================
# Error Taxonomy
# ============================================================
# Every failure that ends a pipeline run is one of these. The
# message text is what the caller shows to the user, so it
# carries the external tool's stderr verbatim.
#
#   DocRasterError
#     ├── InvalidPathError    — input path has no file name
#     ├── DocumentLoadError   — source cannot be opened as a PDF
#     ├── CacheIOError        — cache dir / page file I/O failed
#     ├── ExternalToolError   — rasterizer exited unsuccessfully
#     └── NoSelectionError    — user picked no document
# ============================================================

from typing import Optional


class DocRasterError(Exception):
    """Base exception for all document rasterizer errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown document rasterizer error occurred."


class InvalidPathError(DocRasterError):
    """Raised when a document path has no file-name component."""

    @property
    def default_message(self) -> str:
        return "Invalid document path."


class DocumentLoadError(DocRasterError):
    """Raised when the source document cannot be parsed as a PDF."""

    @property
    def default_message(self) -> str:
        return "Failed to load PDF document."


class CacheIOError(DocRasterError):
    """Raised when creating, reading, listing or deleting cache files fails."""

    @property
    def default_message(self) -> str:
        return "Cache directory I/O failed."


class ExternalToolError(DocRasterError):
    """Raised when the external rasterizer reports failure."""

    def __init__(
        self,
        message: str = "",
        exit_code: Optional[int] = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.stderr = stderr

    @property
    def default_message(self) -> str:
        return "External rasterizer failed."


class NoSelectionError(DocRasterError):
    """Raised when the user declines to pick a document."""

    @property
    def default_message(self) -> str:
        return "No document selected"
