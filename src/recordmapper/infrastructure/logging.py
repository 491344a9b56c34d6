"""Structured logging for the record mapper.

Modules log through ``structlog.get_logger(__name__)``. Once
``configure_logging`` has run, events are routed to stdlib loggers under the
``recordmapper`` namespace and filtered by their level.
"""

import logging
from typing import Optional

import structlog

from .config import MapperSettings, get_settings

ROOT_LOGGER_NAME = "recordmapper"


def configure_logging(settings: Optional[MapperSettings] = None) -> None:
    """Configure structlog processors and the ``recordmapper`` log level.

    Args:
        settings: Settings to apply, defaults to the cached settings
    """
    settings = settings or get_settings()

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(settings.log_level)
    if not package_logger.handlers:
        package_logger.addHandler(logging.StreamHandler())
