"""
Centralized logging configuration for datediff.

The library itself only emits debug events; applications decide how they are
rendered by calling ``configure_logging`` once at startup, either directly or
from a loaded ``LoggingParams`` via ``configure_from_params``.
"""
import logging
import sys
from typing import TYPE_CHECKING, Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

if TYPE_CHECKING:
    from ..config.defaults import LoggingParams
    from ..interval import Interval


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_params(params: "LoggingParams") -> None:
    """Configure logging from a loaded ``LoggingParams`` section."""
    configure_logging(
        level=params.level,
        format_json=params.format_json,
        include_timestamp=params.include_timestamp,
        include_caller=params.include_caller,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a structlog logger backed by the stdlib logger of the same name.

    Events pass through stdlib level filtering, so nothing is emitted
    until the application configures logging.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.wrap_logger(logging.getLogger(name))


def log_interval(
    logger: FilteringBoundLogger,
    interval: "Interval",
    label: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log an interval with standardized fields.

    Args:
        logger: Structlog logger instance
        interval: Interval to report
        label: What the interval measures (e.g. "account_age")
        context: Additional context data
    """
    bound_logger = logger.bind(
        label=label,
        rendered=str(interval),
        **interval.to_dict()
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Interval")
