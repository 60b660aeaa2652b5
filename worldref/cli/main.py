"""Main CLI application for worldref."""

import logging

import typer
from rich.logging import RichHandler

from worldref.cli.commands import match, world
from worldref.cli.display import console
from worldref.config import settings

# Create main app
app = typer.Typer(
    name="worldref",
    help="Resolve typed object references against a virtual world",
    add_completion=False,
)

# Add sub-commands
app.add_typer(match.app, name="match")
app.add_typer(world.app, name="world")


def configure_logging(level: str) -> None:
    """Route log records through Rich at the given level."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """worldref - object reference resolution.

    Use 'worldref world resolve' to resolve a phrase for a player, or
    'worldref match phrase' to try the matcher on bare name lists.
    """
    configure_logging("DEBUG" if verbose else settings.effective_log_level)


if __name__ == "__main__":
    app()
