"""Rich console observer for resolution visibility.

Uses the Rich library to print one colored line per resolve() call.
"""

from rich.console import Console
from rich.markup import escape

from worldref.observability.events import ResolutionEvent


class RichConsoleObserver:
    """Pretty console output using Rich."""

    STATUS_STYLES = {
        "resolved": "green",
        "ambiguous": "yellow",
        "unresolved": "red",
        "no_reference": "dim",
    }

    def __init__(self, console: Console | None = None, indent: str = "  ") -> None:
        """Initialize the console observer.

        Args:
            console: Rich Console instance. Creates new one if not provided.
            indent: Indentation string for output lines.
        """
        self.console = console or Console()
        self.indent = indent

    def on_resolution(self, event: ResolutionEvent) -> None:
        """Render one resolution."""
        style = self.STATUS_STYLES.get(event.status, "white")
        if event.object_id is not None:
            target = f" -> #{event.object_id}"
        elif event.tied:
            target = " -> " + ", ".join(f"#{t}" for t in event.tied)
        else:
            target = ""

        scope = f" [dim]{event.candidate_count} in scope[/]" if event.candidate_count else ""
        self.console.print(
            f"{self.indent}[cyan]#{event.actor}[/] {escape(repr(event.text))} "
            f"[{style}]{event.status}[/]{target} [dim]({event.method}, "
            f"{event.duration_ms:.2f}ms)[/]{scope}"
        )
