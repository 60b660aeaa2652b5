"""Factory functions for creating test worlds with sensible defaults."""

from typing import Any

from sqlalchemy.orm import Session

from worldref.database.models.objects import WorldObjectRecord
from worldref.world.graph import NOTHING
from worldref.world.memory_graph import InMemoryObjectGraph, WorldObject


# Object ids used by the sample world
LOBBY = 1
WIZARD = 2
PLAYER = 3
RED_BALL = 10
GOLD_COIN = 11
SILVER_COIN = 12
REDWOOD_CHEST = 13
BALL = 14
GHOST = 20
LANTERN = 21


def sample_objects() -> list[WorldObject]:
    """The sample world, in content order.

    Lobby
      Wizard (wizard)
      Player
        red ball (aliases: ball)
        gold coin (aliases: coin)
      silver coin (aliases: coin)
      redwood chest
      ball
    Ghost (nowhere)
      lantern
    """
    return [
        WorldObject(id=LOBBY, name="Lobby"),
        WorldObject(id=WIZARD, name="Wizard", location=LOBBY, wizard=True),
        WorldObject(id=PLAYER, name="Player", location=LOBBY),
        WorldObject(id=RED_BALL, name="red ball", location=PLAYER, aliases=["ball"]),
        WorldObject(id=GOLD_COIN, name="gold coin", location=PLAYER, aliases=["coin"]),
        WorldObject(id=SILVER_COIN, name="silver coin", location=LOBBY, aliases=["coin"]),
        WorldObject(id=REDWOOD_CHEST, name="redwood chest", location=LOBBY),
        WorldObject(id=BALL, name="ball", location=LOBBY),
        WorldObject(id=GHOST, name="Ghost"),
        WorldObject(id=LANTERN, name="lantern", location=GHOST),
    ]


def create_world(*objects: WorldObject) -> InMemoryObjectGraph:
    """Create an in-memory graph, defaulting to the sample world."""
    return InMemoryObjectGraph(objects or sample_objects())


def sample_world_json() -> dict[str, Any]:
    """The sample world as a JSON-ready world file."""
    return {"objects": [obj.model_dump(exclude_defaults=True) for obj in sample_objects()]}


def create_object_record(
    db: Session,
    id: int,
    name: str,
    location: int = NOTHING,
    position: int = 0,
    is_wizard: bool = False,
    properties: dict[str, Any] | None = None,
) -> WorldObjectRecord:
    """Create a WorldObjectRecord row and flush it."""
    record = WorldObjectRecord(
        id=id,
        name=name,
        location_id=location if location != NOTHING else None,
        position=position,
        is_wizard=is_wizard,
        properties=properties,
    )
    db.add(record)
    db.flush()
    return record


def populate_sample_world(db: Session) -> None:
    """Insert the sample world into the database.

    Rows are flushed one at a time so containers exist before their
    contents reference them.
    """
    for position, obj in enumerate(sample_objects()):
        properties = dict(obj.properties)
        if obj.aliases is not None:
            properties["aliases"] = list(obj.aliases)
        create_object_record(
            db,
            id=obj.id,
            name=obj.name,
            location=obj.location,
            position=position,
            is_wizard=obj.wizard,
            properties=properties or None,
        )
