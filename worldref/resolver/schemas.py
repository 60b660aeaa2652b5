"""Pydantic schemas for reference resolution results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from worldref.world.graph import AMBIGUOUS, FAILED_MATCH, NOTHING


class ReferenceStatus(str, Enum):
    """Four-way outcome of resolving a reference."""

    NO_REFERENCE = "no_reference"  # Empty text
    UNRESOLVED = "unresolved"  # Nothing qualifies
    AMBIGUOUS = "ambiguous"  # Several candidates tie
    RESOLVED = "resolved"  # Exactly one object


class ResolutionMethod(str, Enum):
    """How a reference was resolved."""

    NONE = "none"
    LITERAL = "literal"  # "#123"
    KEYWORD = "keyword"  # "me" / "here"
    MATCH = "match"  # Name matching against scope


class Candidate(BaseModel):
    """An object in scope together with the names it answers to."""

    model_config = ConfigDict(frozen=True)

    id: int
    names: tuple[str, ...] = Field(min_length=1)

    @property
    def primary_name(self) -> str:
        return self.names[0]

    @property
    def aliases(self) -> tuple[str, ...]:
        return self.names[1:]


class ReferenceOutcome(BaseModel):
    """Result of resolving a player reference."""

    model_config = ConfigDict(frozen=True)

    status: ReferenceStatus
    object_id: int | None = Field(default=None)

    # If ambiguous, the tied object ids in scope order
    candidates: list[int] = Field(default_factory=list)

    method: ResolutionMethod = Field(default=ResolutionMethod.NONE)

    @classmethod
    def no_reference(cls) -> ReferenceOutcome:
        return cls(status=ReferenceStatus.NO_REFERENCE)

    @classmethod
    def unresolved(cls, method: ResolutionMethod = ResolutionMethod.NONE) -> ReferenceOutcome:
        return cls(status=ReferenceStatus.UNRESOLVED, method=method)

    @classmethod
    def ambiguous(cls, candidates: list[int]) -> ReferenceOutcome:
        return cls(
            status=ReferenceStatus.AMBIGUOUS,
            candidates=candidates,
            method=ResolutionMethod.MATCH,
        )

    @classmethod
    def resolved(cls, object_id: int, method: ResolutionMethod) -> ReferenceOutcome:
        return cls(status=ReferenceStatus.RESOLVED, object_id=object_id, method=method)

    @property
    def is_resolved(self) -> bool:
        return self.status is ReferenceStatus.RESOLVED

    @property
    def is_ambiguous(self) -> bool:
        return self.status is ReferenceStatus.AMBIGUOUS

    def as_object_id(self) -> int:
        """Collapse to the legacy integer form.

        Returns:
            The object id when resolved, otherwise NOTHING, AMBIGUOUS or
            FAILED_MATCH.
        """
        if self.status is ReferenceStatus.RESOLVED:
            return self.object_id  # type: ignore[return-value]
        if self.status is ReferenceStatus.AMBIGUOUS:
            return AMBIGUOUS
        if self.status is ReferenceStatus.NO_REFERENCE:
            return NOTHING
        return FAILED_MATCH
