"""World commands: resolve references for an actor."""

from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

import typer

from worldref.cli.display import display_candidates, display_error, display_outcome
from worldref.config import settings
from worldref.database.connection import get_db_session
from worldref.database.graph import DatabaseObjectGraph
from worldref.exceptions import WorldRefError
from worldref.observability.console_observer import RichConsoleObserver
from worldref.resolver.reference_resolver import ReferenceResolver
from worldref.resolver.schemas import ReferenceStatus
from worldref.world.graph import ObjectGraph
from worldref.world.memory_graph import InMemoryObjectGraph

app = typer.Typer(help="Resolve references against a world file or database")

WORLD_OPTION = typer.Option(None, "--world", "-w", help="JSON world file")
DB_OPTION = typer.Option(None, "--db", help="Database URL with a world_objects table")


@contextmanager
def open_graph(
    world_file: Optional[Path], database_url: Optional[str]
) -> Generator[ObjectGraph, None, None]:
    """Open the object graph named on the command line.

    A world file wins over a database URL; with neither, the configured
    world file is used.
    """
    if world_file is None and database_url is None and settings.world_file:
        world_file = Path(settings.world_file)

    if world_file is not None:
        yield InMemoryObjectGraph.from_file(world_file)
    elif database_url is not None:
        with get_db_session(database_url) as db:
            yield DatabaseObjectGraph(db)
    else:
        raise WorldRefError("No world given; use --world or --db")


@app.command()
def resolve(
    actor: int = typer.Argument(..., help="Object id of the acting player"),
    text: str = typer.Argument(..., help="Reference to resolve, e.g. 'second coin'"),
    world_file: Optional[Path] = WORLD_OPTION,
    database_url: Optional[str] = DB_OPTION,
    trace: bool = typer.Option(False, "--trace", help="Print resolution events"),
    show_scope: bool = typer.Option(
        False, "--scope", "-s", help="List the actor's scope, marking the result"
    ),
) -> None:
    """Resolve a reference as typed by ACTOR.

    Exits 0 when the reference names exactly one object, 1 otherwise.
    """
    candidates = []
    try:
        with open_graph(world_file, database_url) as graph:
            hook = RichConsoleObserver() if trace else None
            resolver = ReferenceResolver(graph, hook=hook)
            outcome = resolver.resolve(actor, text)
            if show_scope and graph.is_live(actor):
                candidates = resolver.candidates(actor)
    except WorldRefError as e:
        display_error(str(e))
        raise typer.Exit(1)

    if show_scope:
        selected = [outcome.object_id] if outcome.is_resolved else outcome.candidates
        display_candidates(candidates, title=f"Scope of #{actor}", highlight=selected)
    display_outcome(text, outcome)
    if outcome.status is not ReferenceStatus.RESOLVED:
        raise typer.Exit(1)


@app.command()
def scope(
    actor: int = typer.Argument(..., help="Object id of the acting player"),
    world_file: Optional[Path] = WORLD_OPTION,
    database_url: Optional[str] = DB_OPTION,
) -> None:
    """List everything ACTOR can refer to, in matching order."""
    try:
        with open_graph(world_file, database_url) as graph:
            if not graph.is_live(actor):
                display_error(f"#{actor} is not a valid object")
                raise typer.Exit(1)
            candidates = ReferenceResolver(graph).candidates(actor)
    except WorldRefError as e:
        display_error(str(e))
        raise typer.Exit(1)

    display_candidates(candidates, title=f"Scope of #{actor}")
