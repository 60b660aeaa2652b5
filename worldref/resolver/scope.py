"""Scope enumeration: which objects an actor can refer to."""

from worldref.world.graph import ObjectGraph, ObjectId


def visible_candidates(graph: ObjectGraph, actor: ObjectId) -> list[ObjectId]:
    """List the objects visible to an actor.

    The actor's own contents come first, then the contents of its
    container. A pass is skipped when its container is not live.
    Duplicates across the two passes are kept.

    Args:
        graph: Object graph to read.
        actor: The player doing the looking.

    Returns:
        Object ids in scan order.
    """
    candidates: list[ObjectId] = []
    for holder in (actor, graph.container_of(actor)):
        if not graph.is_live(holder):
            continue
        candidates.extend(graph.contents_of(holder))
    return candidates
