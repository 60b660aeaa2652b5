"""Observability hook protocol and implementations.

The ResolutionHook protocol defines the interface for receiving events
from the ReferenceResolver. Implementations can render to console,
write to files, or aggregate metrics.
"""

from typing import Protocol, runtime_checkable

from worldref.observability.events import ResolutionEvent


@runtime_checkable
class ResolutionHook(Protocol):
    """Protocol for observability hooks."""

    def on_resolution(self, event: ResolutionEvent) -> None:
        """Called after each resolve() call."""
        ...


class NullHook:
    """No-op hook for when observability is disabled.

    This is the default hook - it does nothing but satisfies the protocol.
    """

    def on_resolution(self, event: ResolutionEvent) -> None:
        pass


class CompositeHook:
    """Combines multiple hooks into one.

    Events are dispatched to all hooks in order.
    """

    def __init__(self, hooks: list[ResolutionHook]) -> None:
        """Initialize with a list of hooks.

        Args:
            hooks: List of hooks to dispatch events to.
        """
        self.hooks = hooks

    def on_resolution(self, event: ResolutionEvent) -> None:
        for hook in self.hooks:
            hook.on_resolution(event)


class RecordingHook:
    """Keeps every event in memory, newest last."""

    def __init__(self) -> None:
        self.events: list[ResolutionEvent] = []

    def on_resolution(self, event: ResolutionEvent) -> None:
        self.events.append(event)
