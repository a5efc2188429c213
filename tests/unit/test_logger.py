import io
import logging
import sys

import pytest

from owner_resolver.logging.logger import Log


@pytest.fixture(autouse=True)
def _restore_handlers():  # type: ignore[no-untyped-def]
    logger = logging.getLogger("owner_resolver")
    saved = list(logger.handlers)
    yield
    logger.handlers = saved


class TestLogConfigure:
    def test_writes_to_given_stream(self) -> None:
        stream = io.StringIO()
        Log.configure("INFO", stream=stream)
        Log.info("scanning /data/alice")
        assert "[INFO] scanning /data/alice" in stream.getvalue()

    def test_level_filters_debug(self) -> None:
        stream = io.StringIO()
        Log.configure("info", stream=stream)
        Log.debug("hidden")
        Log.warning("shown")
        assert "hidden" not in stream.getvalue()
        assert "[WARNING] shown" in stream.getvalue()

    def test_reconfigure_keeps_single_handler(self) -> None:
        first = io.StringIO()
        second = io.StringIO()
        Log.configure("INFO", stream=first)
        Log.configure("INFO", stream=second)
        Log.error("boom")
        assert len(logging.getLogger("owner_resolver").handlers) == 1
        assert first.getvalue() == ""
        assert "[ERROR] boom" in second.getvalue()

    def test_defaults_to_stderr(self) -> None:
        Log.configure("INFO")
        handler = logging.getLogger("owner_resolver").handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
