"""Object graph protocol definitions.

The resolver reads the world through these interfaces only. Object ids
are plain integers; ``NOTHING`` is the distinguished invalid id.
"""

from typing import Callable, Protocol, Sequence, runtime_checkable

ObjectId = int

# Distinguished object ids
NOTHING: ObjectId = -1
AMBIGUOUS: ObjectId = -2
FAILED_MATCH: ObjectId = -3

# (actor, candidate) -> (name, aliases) or None
NamingHook = Callable[[ObjectId, ObjectId], tuple[str, Sequence[str]] | None]


@runtime_checkable
class ObjectGraph(Protocol):
    """Protocol for read access to the persistent object graph.

    Implementations must return contents in a stable order; that order
    is observable in ambiguous and ordinal matches.
    """

    def is_live(self, object_id: ObjectId) -> bool:
        """Return whether the id names an existing object."""
        ...

    def contents_of(self, object_id: ObjectId) -> Sequence[ObjectId]:
        """Return the direct contents of an object, in stable order."""
        ...

    def container_of(self, object_id: ObjectId) -> ObjectId:
        """Return the object's location, or NOTHING."""
        ...

    def primary_name(self, object_id: ObjectId) -> str:
        """Return the object's display name."""
        ...

    def string_list_attribute(
        self, object_id: ObjectId, attribute: str
    ) -> Sequence[str] | None:
        """Return a string-list property, or None if absent or mistyped."""
        ...


@runtime_checkable
class PrivilegeCheck(Protocol):
    """Protocol for the elevated-privilege (wizard) check."""

    def is_privileged(self, actor: ObjectId) -> bool:
        """Return whether the actor may use literal #N references."""
        ...
