# tests/test_emitter.py
# ============================================================
# Unit Tests — Result Emitter
# ============================================================

import pytest

from docraster.errors import CacheIOError
from docraster.pipeline.emitter import IMAGE_CHANNEL, ImageLoaded, ResultEmitter

from tests.doubles import AsyncRecordingNotifier, RecordingNotifier


class TestImageLoaded:
    """Test the event payload."""

    def test_to_payload(self):
        """The dict form carries page number, path and bytes."""
        event = ImageLoaded(page_number=2, source_path="/d/report_data/2.webp", image_bytes=b"abc")
        assert event.to_payload() == {
            "page_number": 2,
            "source_path": "/d/report_data/2.webp",
            "image_bytes": b"abc",
        }


class TestResultEmitter:
    """Test reading and delivering pages."""

    def test_load_reads_bytes(self, tmp_path):
        """load() returns the file's bytes with its page number."""
        page_file = tmp_path / "1.webp"
        page_file.write_bytes(b"webp-bytes")

        page = ResultEmitter(RecordingNotifier()).load(page_file, 1)
        assert page.page_number == 1
        assert page.data == b"webp-bytes"
        assert page.path == page_file

    def test_load_missing_file_raises_error(self, tmp_path):
        """An unreadable page is a CacheIOError."""
        with pytest.raises(CacheIOError, match="Failed to read rendered page"):
            ResultEmitter(RecordingNotifier()).load(tmp_path / "1.webp", 1)

    @pytest.mark.asyncio
    async def test_send_with_sync_notifier(self, tmp_path):
        """Plain notifiers are called once per page on the image channel."""
        page_file = tmp_path / "3.webp"
        page_file.write_bytes(b"three")
        notifier = RecordingNotifier()

        await ResultEmitter(notifier).send(page_file, 3)

        channel, event = notifier.events[0]
        assert channel == IMAGE_CHANNEL
        assert event.page_number == 3
        assert event.image_bytes == b"three"
        assert event.source_path == str(page_file)

    @pytest.mark.asyncio
    async def test_send_awaits_async_notifier(self, tmp_path):
        """Coroutine notifiers are awaited before send() returns."""
        page_file = tmp_path / "1.webp"
        page_file.write_bytes(b"one")
        notifier = AsyncRecordingNotifier()

        await ResultEmitter(notifier).send(page_file, 1)

        assert notifier.acknowledged == [1]

    @pytest.mark.asyncio
    async def test_custom_channel(self, tmp_path):
        """The channel name can be overridden by the host."""
        page_file = tmp_path / "1.webp"
        page_file.write_bytes(b"one")
        notifier = RecordingNotifier()

        await ResultEmitter(notifier, channel="pages").send(page_file, 1)

        assert notifier.events[0][0] == "pages"
