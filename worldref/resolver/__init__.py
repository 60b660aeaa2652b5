"""Reference resolver module.

This module resolves player references to object ids:
- "#123" literals for privileged actors
- "me" and "here" keywords
- Name/alias matching over the actor's scope, with ordinals
"""

from worldref.resolver.names import NameResolver
from worldref.resolver.reference_resolver import ReferenceResolver, resolve
from worldref.resolver.schemas import (
    Candidate,
    ReferenceOutcome,
    ReferenceStatus,
    ResolutionMethod,
)
from worldref.resolver.scope import visible_candidates

__all__ = [
    "Candidate",
    "NameResolver",
    "ReferenceOutcome",
    "ReferenceResolver",
    "ReferenceStatus",
    "ResolutionMethod",
    "resolve",
    "visible_candidates",
]
