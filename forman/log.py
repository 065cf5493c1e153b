"""Process-wide logging setup for the API server.

Modules log through ``logging.getLogger(__name__)``. structlog renders
to the console in development and to JSON lines in production.
"""

from __future__ import annotations

import logging
import sys

import structlog

from forman.config import Settings


def _renderer(production: bool) -> structlog.types.Processor:
    if production:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(config: Settings) -> None:
    """Configure stdlib logging and structlog from settings."""
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _renderer(config.is_production),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
    # SQL echo is driven by the engine, not the root level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
