"""In-memory object graph.

Holds a small world as pydantic records. Used by the CLI for JSON
world files and throughout the tests.

Example world file:

    {
      "objects": [
        {"id": 1, "name": "Lobby"},
        {"id": 2, "name": "Wizard", "location": 1, "wizard": true},
        {"id": 3, "name": "red ball", "location": 2, "aliases": ["ball"]}
      ]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Sequence

from pydantic import BaseModel, Field, ValidationError

from worldref.exceptions import ObjectGraphError, WorldLoadError
from worldref.world.graph import NOTHING, ObjectId

logger = logging.getLogger(__name__)


class WorldObject(BaseModel):
    """One object in an in-memory world."""

    id: int = Field(ge=0)
    name: str = Field(default="")
    location: int = Field(default=NOTHING)
    aliases: list[str] | None = Field(default=None)
    wizard: bool = Field(default=False)

    # Arbitrary extra properties; string lists are readable as attributes
    properties: dict[str, Any] = Field(default_factory=dict)


class WorldFile(BaseModel):
    """Top-level shape of a JSON world description."""

    objects: list[WorldObject] = Field(default_factory=list)


class InMemoryObjectGraph:
    """Object graph backed by a dict of WorldObject records.

    Contents are ordered by insertion into the graph, which for world
    files is the order objects appear in the file.

    Usage:
        graph = InMemoryObjectGraph()
        graph.add(WorldObject(id=1, name="Lobby"))
        graph.add(WorldObject(id=2, name="Wizard", location=1, wizard=True))
    """

    def __init__(self, objects: Sequence[WorldObject] = ()) -> None:
        self._objects: dict[ObjectId, WorldObject] = {}
        self._contents: dict[ObjectId, list[ObjectId]] = {}
        for obj in objects:
            self.add(obj)

    @classmethod
    def from_file(cls, path: str | Path) -> InMemoryObjectGraph:
        """Load a graph from a JSON world file.

        Args:
            path: Path to the world file.

        Returns:
            The loaded graph.

        Raises:
            WorldLoadError: If the file is unreadable or invalid.
        """
        source = str(path)
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
            world = WorldFile.model_validate(raw)
        except (OSError, json.JSONDecodeError) as e:
            raise WorldLoadError(f"Cannot read world file: {e}", source=source) from e
        except ValidationError as e:
            raise WorldLoadError(f"Invalid world file: {e}", source=source) from e

        graph = cls()
        try:
            for obj in world.objects:
                graph.add(obj)
            graph.check_locations()
        except ObjectGraphError as e:
            raise WorldLoadError(str(e), source=source) from e

        logger.info("Loaded %d objects from %s", len(world.objects), source)
        return graph

    def add(self, obj: WorldObject) -> None:
        """Add an object; its location need not exist yet."""
        if obj.id in self._objects:
            raise ObjectGraphError(f"Duplicate object id #{obj.id}", object_id=obj.id)
        self._objects[obj.id] = obj
        self._contents.setdefault(obj.location, []).append(obj.id)

    def check_locations(self) -> None:
        """Ensure every location refers to an object in the graph.

        Raises:
            ObjectGraphError: For the first dangling location found.
        """
        for obj in self._objects.values():
            if obj.location != NOTHING and obj.location not in self._objects:
                raise ObjectGraphError(
                    f"Object #{obj.id} is located in unknown object #{obj.location}",
                    object_id=obj.id,
                )

    def get(self, object_id: ObjectId) -> WorldObject | None:
        return self._objects.get(object_id)

    def __len__(self) -> int:
        return len(self._objects)

    # ObjectGraph protocol

    def is_live(self, object_id: ObjectId) -> bool:
        return object_id in self._objects

    def contents_of(self, object_id: ObjectId) -> list[ObjectId]:
        return list(self._contents.get(object_id, ()))

    def container_of(self, object_id: ObjectId) -> ObjectId:
        obj = self._objects.get(object_id)
        return obj.location if obj else NOTHING

    def primary_name(self, object_id: ObjectId) -> str:
        obj = self._objects.get(object_id)
        return obj.name if obj else ""

    def string_list_attribute(
        self, object_id: ObjectId, attribute: str
    ) -> list[str] | None:
        obj = self._objects.get(object_id)
        if obj is None:
            return None
        if attribute == "aliases" and obj.aliases is not None:
            return list(obj.aliases)
        value = obj.properties.get(attribute)
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            return list(value)
        return None

    # PrivilegeCheck protocol

    def is_privileged(self, actor: ObjectId) -> bool:
        obj = self._objects.get(actor)
        return bool(obj and obj.wizard)
