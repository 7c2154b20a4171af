"""
Core package containing configuration, database, logging, and exceptions.
"""
from catalog.core.config import settings
from catalog.core.database import Base, DbSession, get_db_session
from catalog.core.exceptions import (
    CatalogError,
    ReservedSlugError,
    SlugTakenError,
    UnknownCategoryError,
)
from catalog.core.logging import configure_logging, get_logger

__all__ = [
    "settings",
    "Base",
    "DbSession",
    "get_db_session",
    "configure_logging",
    "get_logger",
    "CatalogError",
    "ReservedSlugError",
    "SlugTakenError",
    "UnknownCategoryError",
]
