"""Structured logging for the catalog using structlog.

structlog events and standard-library records (SQLAlchemy's engine
logger in particular) share one processor chain and one renderer, so SQL
statements echoed in debug mode come out in the same format as catalog
events.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from catalog.config import settings

SERVICE_NAME = "catalog"

# Stdlib loggers that SQL echo is routed through
SQL_LOGGERS = ("sqlalchemy.engine",)

_stdlib_handler: logging.Handler | None = None


def _catalog_context(environment: str) -> Processor:
    """Processor stamping every event with the service and environment."""

    def add_catalog_context(
        logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict.setdefault("service", SERVICE_NAME)
        event_dict.setdefault("environment", environment)
        return event_dict

    return add_catalog_context


def _install_stdlib_handler(formatter: logging.Formatter, level: int) -> None:
    """Replace the handler a previous setup_logging() call installed."""
    global _stdlib_handler

    root = logging.getLogger()
    if _stdlib_handler is not None:
        root.removeHandler(_stdlib_handler)

    _stdlib_handler = logging.StreamHandler(sys.stdout)
    _stdlib_handler.setFormatter(formatter)
    root.addHandler(_stdlib_handler)
    root.setLevel(level)


def setup_logging() -> None:
    """Configure structlog and the standard library for the catalog.

    - JSON output outside development when ``log_json`` is set
    - Console output otherwise
    - SQLAlchemy statements logged at INFO when ``debug`` is set
    """
    use_json = settings.log_json and settings.environment != "dev"
    level = logging.getLevelName(settings.log_level)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        _catalog_context(settings.environment),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: Processor
    if use_json:
        renderer = structlog.processors.JSONRenderer()
        shared_processors.append(structlog.processors.format_exc_info)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    _install_stdlib_handler(formatter, level)

    sql_level = logging.INFO if settings.debug else logging.WARNING
    for name in SQL_LOGGERS:
        logging.getLogger(name).setLevel(sql_level)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """Get a logger carrying ``name`` and ``initial_context`` on every event.

    Binding is lazy, so module-level loggers pick up the configuration
    applied by a later setup_logging() call.

    Args:
        name: Logger name (usually __name__)
        **initial_context: Context to bind, e.g. ``entity="Product"``

    Returns:
        Lazily bound structlog logger
    """
    if name:
        initial_context.setdefault("logger", name)
    return structlog.get_logger(**initial_context)
