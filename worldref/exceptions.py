"""Exception definitions for world adapters and loaders.

The resolution engine itself never raises; these are raised by the
object graph adapters and the CLI loaders when the world data they are
given is structurally invalid.
"""


class WorldRefError(Exception):
    """Base exception for worldref."""

    pass


class ObjectGraphError(WorldRefError):
    """The object graph contains inconsistent data.

    Attributes:
        object_id: Offending object id, if known.
    """

    def __init__(self, message: str, object_id: int | None = None) -> None:
        super().__init__(message)
        self.object_id = object_id


class WorldLoadError(WorldRefError):
    """A world description could not be read or validated.

    Attributes:
        source: Path or URL the world was loaded from.
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source
