# tests/conftest.py
# ============================================================
# Shared Fixtures
# ============================================================
# Sample PDFs are built with pypdf; the rasterizer and notifier
# are replaced by the doubles in tests/doubles.py so no external
# binary is needed to exercise the pipeline.
# ============================================================

from pathlib import Path
from typing import Optional

import pytest
from pypdf import PdfWriter

from tests.doubles import FakeRasterizer, RecordingNotifier


def write_pdf(path: Path, pages: int) -> Path:
    """Write a PDF with ``pages`` blank pages."""
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=200, height=300)
    with path.open("wb") as stream:
        writer.write(stream)
    return path


@pytest.fixture
def make_pdf(tmp_path):
    """Factory: make_pdf(pages, name="report.pdf") → path of a new PDF."""
    def _make(pages: int, name: str = "report.pdf", directory: Optional[Path] = None) -> Path:
        return write_pdf((directory or tmp_path) / name, pages)
    return _make


@pytest.fixture
def sample_pdf(make_pdf) -> Path:
    """A three-page PDF."""
    return make_pdf(3)


@pytest.fixture
def rasterizer() -> FakeRasterizer:
    return FakeRasterizer()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()
