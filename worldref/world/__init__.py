"""World access layer.

The resolver reads objects through the ObjectGraph protocol:
- ObjectGraph / PrivilegeCheck protocols and the NamingHook type
- InMemoryObjectGraph for JSON world files and tests
"""

from worldref.world.graph import (
    AMBIGUOUS,
    FAILED_MATCH,
    NOTHING,
    NamingHook,
    ObjectGraph,
    ObjectId,
    PrivilegeCheck,
)
from worldref.world.memory_graph import InMemoryObjectGraph, WorldFile, WorldObject

__all__ = [
    "AMBIGUOUS",
    "FAILED_MATCH",
    "NOTHING",
    "NamingHook",
    "ObjectGraph",
    "ObjectId",
    "PrivilegeCheck",
    "InMemoryObjectGraph",
    "WorldFile",
    "WorldObject",
]
