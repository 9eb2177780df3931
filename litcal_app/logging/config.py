"""
Centralized logging configuration for the liturgical calendar library.

Package loggers are structlog wrappers around stdlib loggers under the
``litcal_app`` namespace, so records follow the host's stdlib logging
setup and stay silent until something enables them. Applications that
want structlog's console or JSON output call configure_logging() once
at startup.
"""
import logging
import sys
from datetime import date
from typing import Any, Optional, TextIO

import structlog

PACKAGE_LOGGER = "litcal_app"


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    stream: Optional[TextIO] = None
) -> None:
    """
    Configure structlog and the ``litcal_app`` stdlib logger.

    Only the package logger gets a handler; the root logger and other
    libraries' loggers are left as the host set them. Calling again
    replaces the handler installed by the previous call.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
        stream: Output stream, stdout by default
    """
    log_level = getattr(logging, level.upper())

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))  # rendered by structlog

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(log_level)
    package_logger.propagate = False

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
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
        processors.append(structlog.dev.ConsoleRenderer(colors=stream is None and sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger backed by the stdlib logger of the same name.

    The wrapper is lazy: processors are taken from the structlog
    configuration in force at first use, so loggers created at import
    time pick up a later configure_logging() call.

    Args:
        name: Logger name (typically __name__)
        **initial_values: Context bound to every record

    Returns:
        Structlog logger proxy
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        **initial_values
    )


def get_calendar_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a logger bound to the calendar subsystem.

    Used by the season classifier and calendar generator so their
    records can be filtered apart from configuration noise.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger for calendar computations
    """
    return get_logger(name, subsystem="calendar")


def log_season_transition(
    logger: structlog.stdlib.BoundLogger,
    sunday: date,
    from_season: Optional[str],
    to_season: str,
    week: int,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the first Sunday of a new season run with standardized format.

    Args:
        logger: Structlog logger instance
        sunday: Sunday on which the new season run starts
        from_season: Season of the previous Sunday, None at the start of a year
        to_season: Season of this Sunday
        week: Week number assigned to this Sunday
        context: Additional context data
    """
    bound_logger = logger.bind(
        sunday=sunday.isoformat(),
        from_season=from_season,
        to_season=to_season,
        week=week,
        kind="season_transition"
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Season transition")
