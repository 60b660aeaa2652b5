"""ReferenceResolver: turn a typed phrase into an object id.

Resolution order:
1. Empty text - no reference
2. "#123" literal - privileged actors only
3. "me" / "here" keywords
4. Name matching against everything in the actor's scope

When several objects tie, the outcome is ambiguous and lists them so the
caller can ask the player which one they meant.
"""

from __future__ import annotations

import logging
import re
import time

from worldref.matching.tiered_matcher import complex_match
from worldref.observability.events import ResolutionEvent
from worldref.observability.hooks import NullHook, ResolutionHook
from worldref.resolver.names import NameResolver
from worldref.resolver.schemas import (
    Candidate,
    ReferenceOutcome,
    ResolutionMethod,
)
from worldref.resolver.scope import visible_candidates
from worldref.world.graph import NamingHook, ObjectGraph, ObjectId, PrivilegeCheck

logger = logging.getLogger(__name__)

LITERAL_PREFIX = "#"
SELF_KEYWORD = "me"
LOCATION_KEYWORD = "here"

# Whole remainder must be a base-10 integer; leading ASCII whitespace and
# a sign are accepted. Nothing at all after "#" names object 0.
_LITERAL_ID = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+")


class ReferenceResolver:
    """Resolves player references to object ids.

    Usage:
        resolver = ReferenceResolver(graph)
        outcome = resolver.resolve(player, "second coin")
        if outcome.is_resolved:
            target = outcome.object_id
        elif outcome.is_ambiguous:
            choices = outcome.candidates
    """

    def __init__(
        self,
        graph: ObjectGraph,
        privilege: PrivilegeCheck | None = None,
        naming_hook: NamingHook | None = None,
        hook: ResolutionHook | None = None,
    ) -> None:
        """Initialize ReferenceResolver.

        Args:
            graph: Object graph to read.
            privilege: Wizard check for "#N" literals. Defaults to the
                graph itself when it implements PrivilegeCheck; otherwise
                no actor is privileged.
            naming_hook: Optional (actor, id) -> (name, aliases) strategy
                that adds names to candidates.
            hook: Observability hook notified after every resolve().
        """
        self.graph = graph
        if privilege is None and isinstance(graph, PrivilegeCheck):
            privilege = graph
        self.privilege = privilege
        self.names = NameResolver(graph, naming_hook)
        self.hook: ResolutionHook = hook or NullHook()

    def is_privileged(self, actor: ObjectId) -> bool:
        return self.privilege is not None and self.privilege.is_privileged(actor)

    def candidates(self, actor: ObjectId) -> list[Candidate]:
        """Everything in the actor's scope with its names, in scan order."""
        return [
            Candidate(id=object_id, names=self.names.names_of(actor, object_id))
            for object_id in visible_candidates(self.graph, actor)
        ]

    def resolve(self, actor: ObjectId, text: str) -> ReferenceOutcome:
        """Resolve a reference typed by an actor.

        Args:
            actor: The player typing the reference.
            text: The reference phrase, e.g. "red ball" or "2nd coin".

        Returns:
            ReferenceOutcome; never raises for any text.
        """
        start = time.perf_counter()
        outcome, scope_size = self._resolve(actor, text)
        duration_ms = (time.perf_counter() - start) * 1000

        logger.debug(
            "Resolved %r for #%d: %s (%s)",
            text,
            actor,
            outcome.status.value,
            outcome.method.value,
        )
        self.hook.on_resolution(
            ResolutionEvent(
                actor=actor,
                text=text,
                status=outcome.status.value,
                method=outcome.method.value,
                duration_ms=duration_ms,
                object_id=outcome.object_id,
                candidate_count=scope_size,
                tied=list(outcome.candidates),
            )
        )
        return outcome

    def _resolve(self, actor: ObjectId, text: str) -> tuple[ReferenceOutcome, int]:
        if not text:
            return ReferenceOutcome.no_reference(), 0

        if text.startswith(LITERAL_PREFIX) and self.is_privileged(actor):
            return self._try_literal(text[len(LITERAL_PREFIX):]), 0

        if not self.graph.is_live(actor):
            return ReferenceOutcome.unresolved(), 0

        keyword = text.lower()
        if keyword == SELF_KEYWORD:
            return ReferenceOutcome.resolved(actor, ResolutionMethod.KEYWORD), 0
        if keyword == LOCATION_KEYWORD:
            return (
                ReferenceOutcome.resolved(self.graph.container_of(actor), ResolutionMethod.KEYWORD),
                0,
            )

        candidates = self.candidates(actor)
        return self._try_match(text, candidates), len(candidates)

    def _try_literal(self, remainder: str) -> ReferenceOutcome:
        """Resolve the text after "#" as an object number."""
        if remainder == "":
            object_id = 0
        elif _LITERAL_ID.fullmatch(remainder):
            object_id = int(remainder)
        else:
            return ReferenceOutcome.unresolved(ResolutionMethod.LITERAL)

        if not self.graph.is_live(object_id):
            return ReferenceOutcome.unresolved(ResolutionMethod.LITERAL)
        return ReferenceOutcome.resolved(object_id, ResolutionMethod.LITERAL)

    def _try_match(self, text: str, candidates: list[Candidate]) -> ReferenceOutcome:
        """Resolve by matching names of everything in scope."""
        match = complex_match(text, [candidate.names for candidate in candidates])

        if not match.matched:
            return ReferenceOutcome.unresolved(ResolutionMethod.MATCH)
        if match.unique:
            return ReferenceOutcome.resolved(
                candidates[match.indices[0]].id, ResolutionMethod.MATCH
            )
        return ReferenceOutcome.ambiguous([candidates[i].id for i in match.indices])


def resolve(
    graph: ObjectGraph,
    actor: ObjectId,
    text: str,
    privilege: PrivilegeCheck | None = None,
    naming_hook: NamingHook | None = None,
) -> ReferenceOutcome:
    """Resolve a reference with a one-off ReferenceResolver."""
    return ReferenceResolver(graph, privilege=privilege, naming_hook=naming_hook).resolve(
        actor, text
    )
