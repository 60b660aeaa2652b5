"""SQLAlchemy models."""

from worldref.database.models.base import Base
from worldref.database.models.objects import WorldObjectRecord

__all__ = ["Base", "WorldObjectRecord"]
