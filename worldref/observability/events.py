"""Event dataclasses for observability hooks.

Emitted by the ReferenceResolver once per resolve() call.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class ResolutionEvent:
    """Emitted when a reference has been resolved (or failed to)."""

    actor: int
    text: str
    status: str  # ReferenceStatus value
    method: str
    duration_ms: float
    object_id: int | None = None
    candidate_count: int = 0  # Objects in scope; 0 for literals and keywords
    tied: list[int] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now)
