"""secstore Storage Layer - persistent security registries."""

from secstore.storage.models import Base, SecurityRecord
from secstore.storage.database import (
    get_database_url,
    get_sync_engine,
    get_session,
    init_db,
    check_database_health,
    close_database,
    reset_engines,
)
from secstore.storage.registry import InMemorySecurityRegistry
from secstore.storage.repositories import SecurityRepository, SqlSecurityRegistry

__all__ = [
    "Base",
    "SecurityRecord",
    "get_database_url",
    "get_sync_engine",
    "get_session",
    "init_db",
    "check_database_health",
    "close_database",
    "reset_engines",
    "InMemorySecurityRegistry",
    "SecurityRepository",
    "SqlSecurityRegistry",
]
