"""Read-only object graph over the world_objects table."""

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from worldref.database.models.objects import WorldObjectRecord
from worldref.world.graph import NOTHING, ObjectId

logger = logging.getLogger(__name__)

# Largest id a 64-bit signed INTEGER column can hold.
MAX_OBJECT_ID = 2**63 - 1


class DatabaseObjectGraph:
    """ObjectGraph and PrivilegeCheck backed by a SQLAlchemy session.

    Contents are ordered by (position, id). Nothing is ever written.
    """

    def __init__(self, db: Session) -> None:
        """Initialize with a database session.

        Args:
            db: SQLAlchemy session to read from.
        """
        self.db = db

    def _get(self, object_id: ObjectId) -> WorldObjectRecord | None:
        if not 0 <= object_id <= MAX_OBJECT_ID:
            return None
        return self.db.get(WorldObjectRecord, object_id)

    def is_live(self, object_id: ObjectId) -> bool:
        return self._get(object_id) is not None

    def contents_of(self, object_id: ObjectId) -> list[ObjectId]:
        if not 0 <= object_id <= MAX_OBJECT_ID:
            return []
        stmt = (
            select(WorldObjectRecord.id)
            .where(WorldObjectRecord.location_id == object_id)
            .order_by(WorldObjectRecord.position, WorldObjectRecord.id)
        )
        return list(self.db.scalars(stmt))

    def container_of(self, object_id: ObjectId) -> ObjectId:
        record = self._get(object_id)
        if record is None or record.location_id is None:
            return NOTHING
        return record.location_id

    def primary_name(self, object_id: ObjectId) -> str:
        record = self._get(object_id)
        return record.name if record else ""

    def string_list_attribute(
        self, object_id: ObjectId, attribute: str
    ) -> Sequence[str] | None:
        record = self._get(object_id)
        if record is None or not record.properties:
            return None
        value = record.properties.get(attribute)
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            if value is not None:
                logger.debug("Property %r on #%d is not a string list", attribute, object_id)
            return None
        return value

    def is_privileged(self, actor: ObjectId) -> bool:
        record = self._get(actor)
        return bool(record and record.is_wizard)
