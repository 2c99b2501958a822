"""Unit tests for ln.logging.sink module."""

from unittest.mock import MagicMock

import pytest
import structlog

from ln.logging.setup import callsite_parameter_adder
from ln.logging.sink import LoggerSink, StructlogSink


@pytest.mark.unit
class TestStructlogSink:
    """Test suite for StructlogSink level mapping."""

    @pytest.fixture
    def logger(self):
        return MagicMock()

    @pytest.fixture
    def sink(self, logger):
        return StructlogSink(logger)

    def test_is_logger_sink(self, sink):
        assert isinstance(sink, LoggerSink)

    def test_default_logger(self):
        assert StructlogSink().logger is not None

    def test_default_logger_has_no_sink_component(self):
        """The fallback logger is not tagged with the sink module."""
        context = structlog.get_context(StructlogSink().logger)
        assert "component" not in context

    def test_callsite_points_at_sink_caller(self):
        capture = structlog.testing.CapturingLogger()
        logger = structlog.wrap_logger(
            capture,
            wrapper_class=structlog.BoundLogger,
            processors=[
                callsite_parameter_adder(),
                lambda _logger, _method, event_dict: event_dict,
            ],
        )

        StructlogSink(logger).warn("event_name")

        call = capture.calls[0]
        assert call.method_name == "warning"
        assert call.kwargs["func_name"] == "test_callsite_points_at_sink_caller"
        assert call.kwargs["filename"] == "test_sink.py"

    @pytest.mark.parametrize(
        "level,method",
        [
            ("info", "info"),
            ("trace", "debug"),
            ("warn", "warning"),
            ("error", "error"),
            ("fatal", "critical"),
        ],
    )
    def test_level_mapping(self, sink, logger, level, method):
        getattr(sink, level)("event_name", key="value")
        getattr(logger, method).assert_called_once_with("event_name", key="value")


@pytest.mark.unit
class TestLoggerSinkProtocol:
    """Any object with the five level methods is a LoggerSink."""

    def test_custom_sink_conforms(self):
        class ListSink:
            def __init__(self):
                self.records = []

            def info(self, event, **kwargs):
                self.records.append(("info", event))

            def trace(self, event, **kwargs):
                self.records.append(("trace", event))

            def warn(self, event, **kwargs):
                self.records.append(("warn", event))

            def error(self, event, **kwargs):
                self.records.append(("error", event))

            def fatal(self, event, **kwargs):
                self.records.append(("fatal", event))

        assert isinstance(ListSink(), LoggerSink)

    def test_incomplete_sink_does_not_conform(self):
        class InfoOnly:
            def info(self, event, **kwargs):
                pass

        assert not isinstance(InfoOnly(), LoggerSink)
