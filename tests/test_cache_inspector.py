# tests/test_cache_inspector.py
# ============================================================
# Unit Tests — Cache Inspector
# ============================================================
# Count-based cache validation and all-or-nothing invalidation.
#
# Run:
#   pytest tests/test_cache_inspector.py -v
# ============================================================

import pytest

from docraster.cache.inspector import (
    CacheState,
    count_rendered_pages,
    discard_rendered_page,
    ensure_cache_dir,
    inspect_cache,
    invalidate_cache,
    list_rendered_pages,
)
from docraster.errors import CacheIOError


# ============================================================
# Fixtures
# ============================================================

@pytest.fixture
def cache_dir(tmp_path):
    """An existing, empty cache directory."""
    path = tmp_path / "report_data"
    path.mkdir()
    return path


def _fill(cache_dir, count):
    for page in range(1, count + 1):
        (cache_dir / f"{page}.webp").write_bytes(b"img")


# ============================================================
# Inspection Tests
# ============================================================

class TestInspectCache:
    """Test cache classification."""

    def test_absent_when_directory_missing(self, tmp_path):
        """No directory means ABSENT with nothing found."""
        status = inspect_cache(tmp_path / "missing_data", expected_pages=3)
        assert status.state is CacheState.ABSENT
        assert status.found == 0
        assert status.expected == 3

    def test_complete_when_counts_match(self, cache_dir):
        """Exactly one image per page means COMPLETE."""
        _fill(cache_dir, 3)
        status = inspect_cache(cache_dir, expected_pages=3)
        assert status.state is CacheState.COMPLETE
        assert status.is_complete

    def test_mismatched_when_too_few(self, cache_dir):
        """A partially rendered cache is MISMATCHED."""
        _fill(cache_dir, 2)
        status = inspect_cache(cache_dir, expected_pages=3)
        assert status.state is CacheState.MISMATCHED
        assert status.found == 2

    def test_mismatched_when_too_many(self, cache_dir):
        """Leftovers from a longer document are MISMATCHED too."""
        _fill(cache_dir, 5)
        status = inspect_cache(cache_dir, expected_pages=3)
        assert status.state is CacheState.MISMATCHED
        assert status.found == 5

    def test_empty_directory_for_empty_document(self, cache_dir):
        """Zero pages expected and zero found is COMPLETE."""
        assert inspect_cache(cache_dir, expected_pages=0).is_complete

    def test_unrelated_files_are_not_counted(self, cache_dir):
        """Only <number>.webp files are rendered pages."""
        _fill(cache_dir, 2)
        (cache_dir / "notes.txt").write_text("keep me")
        (cache_dir / "cover.webp").write_bytes(b"x")
        assert count_rendered_pages(cache_dir) == 2

    def test_non_ascii_digit_names_are_not_counted(self, cache_dir):
        """Names like ².webp are not page numbers and do not break the scan."""
        _fill(cache_dir, 1)
        (cache_dir / "².webp").write_bytes(b"x")
        status = inspect_cache(cache_dir, expected_pages=2)
        assert status.state is CacheState.MISMATCHED
        assert status.found == 1

    def test_cache_path_is_a_file_raises_error(self, tmp_path):
        """A file where the cache directory should be is an I/O error."""
        blocker = tmp_path / "report_data"
        blocker.write_text("not a directory")
        with pytest.raises(CacheIOError):
            inspect_cache(blocker, expected_pages=1)


class TestListRenderedPages:
    """Test page listing order."""

    def test_sorted_numerically(self, cache_dir):
        """Page 10 comes after page 9, not after page 1."""
        _fill(cache_dir, 11)
        names = [p.name for p in list_rendered_pages(cache_dir)]
        assert names[:3] == ["1.webp", "2.webp", "3.webp"]
        assert names[-2:] == ["10.webp", "11.webp"]


# ============================================================
# Invalidation Tests
# ============================================================

class TestInvalidateCache:
    """Test rendered page removal."""

    def test_removes_every_rendered_page(self, cache_dir):
        """All rendered pages are deleted and counted."""
        _fill(cache_dir, 4)
        assert invalidate_cache(cache_dir) == 4
        assert count_rendered_pages(cache_dir) == 0

    def test_keeps_unrelated_files(self, cache_dir):
        """Files outside the naming convention survive."""
        _fill(cache_dir, 2)
        (cache_dir / "notes.txt").write_text("keep me")
        invalidate_cache(cache_dir)
        assert (cache_dir / "notes.txt").exists()

    def test_empty_directory(self, cache_dir):
        """Nothing to remove is not an error."""
        assert invalidate_cache(cache_dir) == 0


class TestEnsureCacheDir:
    """Test cache directory creation."""

    def test_creates_directory(self, tmp_path):
        """The directory is created next to the document."""
        target = tmp_path / "report_data"
        ensure_cache_dir(target)
        assert target.is_dir()

    def test_missing_parent_raises_error(self, tmp_path):
        """Creation failures surface as CacheIOError."""
        with pytest.raises(CacheIOError, match="Failed to create data directory"):
            ensure_cache_dir(tmp_path / "nowhere" / "report_data")


class TestDiscardRenderedPage:
    """Test removal of a single page left by a failed render."""

    def test_removes_existing_file(self, cache_dir):
        """The partial page file is deleted."""
        page_file = cache_dir / "3.webp"
        page_file.write_bytes(b"PARTIAL")
        discard_rendered_page(page_file)
        assert not page_file.exists()

    def test_missing_file_is_ignored(self, cache_dir):
        """Nothing written is nothing to remove."""
        discard_rendered_page(cache_dir / "3.webp")
