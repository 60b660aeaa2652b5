"""Database access for the persistent world (read-only)."""

from worldref.database.connection import get_db_session, init_db, make_engine
from worldref.database.graph import DatabaseObjectGraph
from worldref.database.models import Base, WorldObjectRecord

__all__ = [
    "Base",
    "DatabaseObjectGraph",
    "WorldObjectRecord",
    "get_db_session",
    "init_db",
    "make_engine",
]
