"""Rich display helpers for CLI output."""

from typing import Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from worldref.resolver.schemas import Candidate, ReferenceOutcome, ReferenceStatus


# Shared console instance
console = Console()

STATUS_STYLES = {
    ReferenceStatus.RESOLVED: "green",
    ReferenceStatus.AMBIGUOUS: "yellow",
    ReferenceStatus.UNRESOLVED: "red",
    ReferenceStatus.NO_REFERENCE: "dim",
}


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def display_success(message: str) -> None:
    """Display success message.

    Args:
        message: Success message.
    """
    console.print(f"[bold green]{escape(message)}[/bold green]")


def display_info(message: str) -> None:
    """Display info message.

    Args:
        message: Info message.
    """
    console.print(f"[dim]{escape(message)}[/dim]")


def _names_cell(names: Sequence[str]) -> str:
    primary, *aliases = names
    cell = f"[bold]{escape(primary)}[/bold]"
    if aliases:
        cell += " [dim](" + escape(", ".join(aliases)) + ")[/dim]"
    return cell


def display_candidates(
    candidates: Sequence[Candidate],
    title: str = "Scope",
    highlight: Sequence[int] = (),
) -> None:
    """Display candidates in scan order.

    Args:
        candidates: Candidates to list.
        title: Table title.
        highlight: Object ids to mark as selected.
    """
    if not candidates:
        console.print("[dim]Nothing in scope.[/dim]")
        return

    table = Table(title=title, box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Object", style="cyan")
    table.add_column("Names", style="white")
    table.add_column("", style="green")

    for index, candidate in enumerate(candidates):
        table.add_row(
            str(index),
            f"#{candidate.id}",
            _names_cell(candidate.names),
            "<" if candidate.id in highlight else "",
        )

    console.print(table)


def display_name_lists(name_lists: Sequence[Sequence[str]], selected: Sequence[int] = ()) -> None:
    """Display bare candidate name lists, marking selected indices."""
    table = Table(title="Candidates", box=box.ROUNDED)
    table.add_column("Index", justify="right", style="cyan")
    table.add_column("Names", style="white")
    table.add_column("", style="green")

    for index, names in enumerate(name_lists):
        table.add_row(str(index), _names_cell(names), "<" if index in selected else "")

    console.print(table)


def display_outcome(text: str, outcome: ReferenceOutcome) -> None:
    """Display the outcome of resolving one reference.

    Args:
        text: The reference as typed.
        outcome: Its resolution.
    """
    style = STATUS_STYLES[outcome.status]
    line = f"{escape(repr(text))}: [{style}]{outcome.status.value}[/{style}]"
    if outcome.object_id is not None:
        line += f" [cyan]#{outcome.object_id}[/cyan]"
    if outcome.candidates:
        line += " " + ", ".join(f"[cyan]#{c}[/cyan]" for c in outcome.candidates)
    line += f" [dim]({outcome.method.value})[/dim]"
    console.print(line)
