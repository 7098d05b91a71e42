"""
Structured Logging (structlog).

Library modules log through ``get_logger(__name__)`` with snake_case event
names (``github_request``, ``github_create_issue`` ...). Applications call
``setup_logging`` once at startup; until then structlog's defaults apply.
"""

import logging
import sys

import structlog

from hubwire_config.settings import Settings

# Transport loggers that emit one INFO line per HTTP call
_TRANSPORT_LOGGERS = ("httpx", "httpcore")


def _renderer(log_format: str):
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(settings: Settings) -> None:
    """
    Configure stdlib logging and structlog.

    Output format: JSON (default) or text (dev). The httpx/httpcore loggers
    stay at WARNING unless LOG_LEVEL is DEBUG.
    """
    level = settings.LOG_LEVEL.upper()
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    transport_level = logging.DEBUG if level == "DEBUG" else logging.WARNING
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            _renderer(settings.LOG_FORMAT),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get configured logger."""
    return structlog.get_logger(name)
