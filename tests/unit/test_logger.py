import io
import logging

import pytest

from statement_scanner.logging.logger import Log


@pytest.fixture()
def restore_logger():
    logger = logging.getLogger("statement_scanner")
    level, handlers, propagate = logger.level, list(logger.handlers), logger.propagate
    handler = Log._handler
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    Log._handler = handler


class TestConfigure:
    def test_writes_formatted_lines_to_stream(self, restore_logger: None) -> None:
        stream = io.StringIO()
        Log.configure("info", stream)
        Log.info("Starting run over 2 documents")
        assert "[INFO] Starting run over 2 documents" in stream.getvalue()

    def test_level_filters_debug(self, restore_logger: None) -> None:
        stream = io.StringIO()
        Log.configure("INFO", stream)
        Log.debug("Extraction prompt")
        assert stream.getvalue() == ""

    def test_reconfigure_replaces_stream(self, restore_logger: None) -> None:
        first, second = io.StringIO(), io.StringIO()
        Log.configure("DEBUG", first)
        Log.configure("DEBUG", second)
        Log.warning("No transactions found")
        assert first.getvalue() == ""
        assert "[WARNING] No transactions found" in second.getvalue()


class TestExcerpt:
    def test_short_text_is_unchanged(self) -> None:
        assert Log.excerpt('{"transactions": []}') == '{"transactions": []}'

    def test_long_text_is_cut_with_remainder_noted(self) -> None:
        assert Log.excerpt("x" * 15, limit=10) == "xxxxxxxxxx... [5 more characters]"
