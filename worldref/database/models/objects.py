"""World object model."""

from typing import Any

from sqlalchemy import JSON, Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from worldref.database.models.base import Base


class WorldObjectRecord(Base):
    """One object of the persistent world, as stored in the database."""

    __tablename__ = "world_objects"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        default="",
        comment="Primary display name",
    )
    location_id: Mapped[int | None] = mapped_column(
        ForeignKey("world_objects.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="Containing object; NULL when nowhere",
    )
    position: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Ordering of this object within its container's contents",
    )
    is_wizard: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Holds elevated privilege (may use #N references)",
    )
    properties: Mapped[dict[str, Any] | None] = mapped_column(
        JSON,
        nullable=True,
        comment="Object properties, e.g. {'aliases': ['ball']}",
    )

    def __repr__(self) -> str:
        return f"<WorldObjectRecord #{self.id} {self.name!r}>"
