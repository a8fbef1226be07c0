"""Tests for logging configuration and interval logging."""

from datetime import date
from unittest.mock import Mock, patch

import structlog

from datediff import difference
from datediff.config.defaults import LoggingParams
from datediff.interval import Interval
from datediff.logging import configure_logging, get_logger, log_interval
from datediff.logging.config import configure_from_params


class TestConfigureLogging:
    """Test structlog configuration."""

    def test_json_renderer(self):
        configure_logging(level="DEBUG", format_json=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer(self):
        configure_logging(level="INFO", format_json=False)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_optional_processors(self):
        configure_logging(include_timestamp=False, include_caller=True)

        processors = structlog.get_config()["processors"]
        assert not any(isinstance(p, structlog.processors.TimeStamper) for p in processors)
        assert any(isinstance(p, structlog.processors.CallsiteParameterAdder) for p in processors)

    def test_base_processor_chain(self):
        """Level filtering and naming run first, then the renderer."""
        configure_logging(include_timestamp=False, format_json=True)

        processors = structlog.get_config()["processors"]
        assert processors[:3] == [
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
        ]
        assert len(processors) == 6

    def test_extra_processors_run_before_renderer(self):
        extra = Mock()
        configure_logging(format_json=True, extra_processors=[extra])

        processors = structlog.get_config()["processors"]
        assert processors[-2] is extra

    def test_configure_from_params(self):
        with patch("datediff.logging.config.configure_logging") as mock_configure:
            configure_from_params(LoggingParams(level="WARNING", format_json=True))

        mock_configure.assert_called_once_with(
            level="WARNING",
            format_json=True,
            include_timestamp=True,
            include_caller=False,
        )

    def test_get_logger(self):
        logger = get_logger("datediff.test")
        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")


class TestCalculatorLogging:
    """The calculator reports each computation at debug level."""

    def test_debug_event(self):
        with patch("datediff.calculator.logger") as mock_logger:
            difference(date(2020, 1, 31), date(2021, 1, 5))

        mock_logger.debug.assert_called_once_with(
            "Computed date difference",
            start="2020-01-31",
            end="2021-01-05",
            borrowed_days=True,
            borrowed_months=True,
            years=0,
            months=11,
            days=5,
            positive=True,
        )

    def test_debug_event_without_borrow(self):
        with patch("datediff.calculator.logger") as mock_logger:
            difference(date(2021, 1, 5), date(2020, 1, 1))

        kwargs = mock_logger.debug.call_args.kwargs
        assert kwargs["borrowed_days"] is False
        assert kwargs["borrowed_months"] is False
        assert kwargs["positive"] is False


class TestLogInterval:
    """Test standardized interval logging."""

    def test_log_interval(self):
        logger = Mock()
        bound = logger.bind.return_value

        log_interval(logger, Interval(2, 5, 11, True), "tenure")

        logger.bind.assert_called_once_with(
            label="tenure",
            rendered="(2 years 5 months 11 days Ahead)",
            years=2,
            months=5,
            days=11,
            positive=True,
        )
        bound.info.assert_called_once_with("Interval")

    def test_log_interval_with_context(self):
        logger = Mock()
        bound = logger.bind.return_value
        rebound = bound.bind.return_value

        log_interval(logger, Interval(0, 0, 1, False), "delay", context={"order": 7})

        bound.bind.assert_called_once_with(context={"order": 7})
        rebound.info.assert_called_once_with("Interval")
