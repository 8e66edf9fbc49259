"""Property-based tests for logging functionality."""

import json
import logging
from io import StringIO
from xml.sax.saxutils import escape

from hypothesis import given
from hypothesis import strategies as st

from rss_parser.logging_config import (
    StructuredFormatter,
    create_execution_logger,
)
from rss_parser.rss import ChannelExtractor


def capture_logs():
    """Attach a JSON-formatting capture handler to the rss_parser logger."""
    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("rss_parser")
    original_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    def restore():
        logger.removeHandler(handler)
        logger.setLevel(original_level)
        handler.close()

    return log_capture, restore


class TestLoggingProperties:
    """Property-based tests for structured logging."""

    @given(
        st.text(
            alphabet=st.characters(whitelist_categories=("Ll", "Nd")),
            min_size=3,
            max_size=20,
        ),
        st.integers(min_value=0, max_value=5),
    )
    def test_parsed_channel_logged_as_json(self, title, item_count):
        """
        Every successful parse emits a JSON log line carrying the execution
        context and the number of extracted items.
        """
        items = "<item><title>x</title></item>" * item_count
        document = f"<rss><channel><title>{escape(title)}</title>{items}</channel></rss>"

        log_capture, restore = capture_logs()
        try:
            ChannelExtractor(execution_id="exec_test").parse(document)
        finally:
            restore()

        entries = [json.loads(line) for line in log_capture.getvalue().splitlines()]
        parsed = [e for e in entries if e["message"].startswith("Parsed channel")]

        assert len(parsed) == 1
        assert parsed[0]["execution_id"] == "exec_test"
        assert parsed[0]["component"] == "channel_extractor"
        assert parsed[0]["channel_title"] == title
        assert parsed[0]["items_count"] == item_count
        assert parsed[0]["logger"] == "rss_parser.channel_extractor"

    @given(st.sampled_from(["<rss>", "<rss><channel></rss>", "not xml", ""]))
    def test_malformed_document_logged_as_error(self, document):
        """Malformed documents produce an ERROR entry with the parser's reason."""
        log_capture, restore = capture_logs()
        try:
            result = ChannelExtractor().parse(document)
        finally:
            restore()

        entries = [json.loads(line) for line in log_capture.getvalue().splitlines()]
        errors = [e for e in entries if e["level"] == "ERROR"]

        assert result is None
        assert len(errors) == 1
        assert errors[0]["message"].startswith("Failed to parse XML")
        assert errors[0]["reason"]


class TestExecutionLogger:
    """Unit tests for ExecutionLogger."""

    def test_generated_execution_id(self):
        """Test that an execution ID is generated when none is given."""
        logger = create_execution_logger("cli")

        assert logger.execution_id.startswith("exec_")
        assert logger.logger.name == "rss_parser.cli"

    def test_execution_start_and_end(self):
        """Test that start and end entries include timing information."""
        log_capture, restore = capture_logs()
        try:
            logger = create_execution_logger("cli", "exec_1")
            logger.log_execution_start(feed_url="https://example.com/feed")
            logger.log_execution_end(success=True, items_count=3)
        finally:
            restore()

        start, end = [json.loads(line) for line in log_capture.getvalue().splitlines()]

        assert start["message"] == "Starting cli execution"
        assert start["feed_url"] == "https://example.com/feed"
        assert end["message"] == "Completed cli execution"
        assert end["execution_success"] is True
        assert end["execution_duration_seconds"] >= 0
        assert end["items_count"] == 3
