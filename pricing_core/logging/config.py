"""
Centralized logging configuration for the pricing core.

The library only obtains loggers; it never configures logging on import.
Loggers sit on top of the stdlib ``pricing_core`` hierarchy, which carries a
``NullHandler``, so nothing is written until the host configures logging.
Applications call ``configure_logging`` once to choose level and rendering.
"""
import logging
import sys
from typing import Any, Optional

import structlog

from pricing_core.config import get_config

LIBRARY_LOGGER = "pricing_core"


def configure_logging(
    level: Optional[str] = None,
    format_json: Optional[bool] = None,
    include_timestamp: Optional[bool] = None,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the library and the host application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            defaults to the active configuration
        format_json: If True, output JSON; otherwise human-readable
        include_timestamp: Include an ISO timestamp in log output
        extra_processors: Additional structlog processors to include
    """
    params = get_config().logging
    level = level if level is not None else params.level
    format_json = format_json if format_json is not None else params.format_json
    if include_timestamp is None:
        include_timestamp = params.include_timestamp

    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )
    logging.getLogger(LIBRARY_LOGGER).setLevel(log_level)

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

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger backed by the stdlib logger of the same name.

    Level filtering and output are left to the stdlib handlers, so the
    logger stays silent until the host configures logging.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def log_curve_built(
    logger: structlog.stdlib.BoundLogger,
    curve_type: str,
    reference_date: Any,
    num_points: int,
    context: Optional[dict[str, Any]] = None
) -> None:
    """Log a completed curve build with standardized fields."""
    bound_logger = logger.bind(
        curve_type=curve_type,
        reference_date=str(reference_date),
        num_points=num_points,
    )
    if context:
        bound_logger = bound_logger.bind(context=context)
    bound_logger.debug("curve_built")


def log_price(
    logger: structlog.stdlib.BoundLogger,
    option: Any,
    price: Any,
    inputs: dict[str, Any]
) -> None:
    """Log a priced option together with the model inputs used."""
    logger.bind(option=str(option), price=str(price), **inputs).debug("option_priced")
