"""Name and alias lookup for candidate objects."""

import logging
from typing import Sequence

from worldref.world.graph import NamingHook, ObjectGraph, ObjectId

logger = logging.getLogger(__name__)

ALIASES_ATTRIBUTE = "aliases"


def _usable_hook_result(result: object) -> tuple[str, Sequence[str]] | None:
    """Return the hook result if it is a (name, [aliases]) pair."""
    if not isinstance(result, (tuple, list)) or len(result) != 2:
        return None
    name, aliases = result
    if not isinstance(name, str):
        return None
    if isinstance(aliases, str) or not isinstance(aliases, (tuple, list)):
        return None
    if not all(isinstance(alias, str) for alias in aliases):
        return None
    return name, aliases


class NameResolver:
    """Builds the ordered set of names a candidate answers to.

    The default names are the object's primary name followed by its
    "aliases" property. An optional naming hook can add more names; its
    result is merged in front of the defaults, never replacing them.

    Usage:
        names = NameResolver(graph, naming_hook=disguise_hook)
        names.names_of(actor, 42)
        # -> ("cloaked figure", "figure", "Bob", "bob", "builder")
    """

    def __init__(self, graph: ObjectGraph, naming_hook: NamingHook | None = None) -> None:
        """Initialize NameResolver.

        Args:
            graph: Object graph to read names and aliases from.
            naming_hook: Optional (actor, id) -> (name, aliases) override.
        """
        self.graph = graph
        self.naming_hook = naming_hook

    def default_names(self, candidate_id: ObjectId) -> tuple[str, ...]:
        """Primary name then aliases, in source order, duplicates kept."""
        names = [self.graph.primary_name(candidate_id)]
        aliases = self.graph.string_list_attribute(candidate_id, ALIASES_ATTRIBUTE)
        if aliases is not None and not isinstance(aliases, str):
            names.extend(alias for alias in aliases if isinstance(alias, str))
        return tuple(names)

    def hook_names(self, actor: ObjectId, candidate_id: ObjectId) -> tuple[str, ...] | None:
        """Names supplied by the naming hook, or None if it gave nothing usable."""
        if self.naming_hook is None:
            return None

        try:
            result = self.naming_hook(actor, candidate_id)
        except Exception:
            logger.warning(
                "Naming hook failed for #%d (actor #%d); using default names",
                candidate_id,
                actor,
                exc_info=True,
            )
            return None

        usable = _usable_hook_result(result)
        if usable is None:
            if result is not None:
                logger.debug("Ignoring unusable naming hook result for #%d: %r", candidate_id, result)
            return None

        name, aliases = usable
        return (name, *aliases)

    def names_of(self, actor: ObjectId, candidate_id: ObjectId) -> tuple[str, ...]:
        """Return every name the candidate answers to for this actor.

        Args:
            actor: The player doing the looking.
            candidate_id: The object being named.

        Returns:
            Hook names then default names, deduplicated by exact string
            equality when a hook contributed; the default names unchanged
            otherwise.
        """
        defaults = self.default_names(candidate_id)
        hooked = self.hook_names(actor, candidate_id)
        if hooked is None:
            return defaults

        # dict preserves first-seen order
        return tuple(dict.fromkeys((*hooked, *defaults)))
