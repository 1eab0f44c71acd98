"""Infrastructure - Database, logging."""

from catalog.infra.database import (
    DatabaseSession,
    close_db_engine,
    get_db_session,
    init_models,
    verify_db_connection,
)
from catalog.infra.logging import get_logger, setup_logging

__all__ = [
    "get_db_session",
    "DatabaseSession",
    "close_db_engine",
    "init_models",
    "verify_db_connection",
    "setup_logging",
    "get_logger",
]
