"""Observability module for reference resolution.

Provides hooks and observers for visibility into resolve() calls.
"""

from worldref.observability.console_observer import RichConsoleObserver
from worldref.observability.events import ResolutionEvent
from worldref.observability.hooks import (
    CompositeHook,
    NullHook,
    RecordingHook,
    ResolutionHook,
)

__all__ = [
    # Events
    "ResolutionEvent",
    # Hooks
    "ResolutionHook",
    "NullHook",
    "CompositeHook",
    "RecordingHook",
    # Observers
    "RichConsoleObserver",
]
