"""Matcher commands that need no world."""

import typer

from worldref.cli.display import console, display_error, display_info, display_name_lists
from worldref.matching.ordinals import parse_ordinal
from worldref.matching.tiered_matcher import complex_match

app = typer.Typer(help="Try the ordinal parser and matcher directly")


@app.command()
def ordinal(
    word: str = typer.Argument(..., help="Word to parse, e.g. 'second' or '21st'"),
) -> None:
    """Show how a word parses as an ordinal."""
    value = parse_ordinal(word)
    if value is None:
        display_info(f"{word}: none")
        return
    console.print(f"{word}: [bold cyan]{value}[/bold cyan]")


@app.command()
def phrase(
    query: str = typer.Argument(..., help="Phrase to match, e.g. '2nd red'"),
    candidate: list[str] = typer.Option(
        ...,
        "--candidate",
        "-c",
        help="Comma-separated names for one candidate (repeatable)",
    ),
) -> None:
    """Match a phrase against candidate name lists."""
    name_lists = [[name.strip() for name in c.split(",")] for c in candidate]
    if any(not names[0] for names in name_lists):
        display_error("Every candidate needs a primary name")
        raise typer.Exit(1)

    outcome = complex_match(query, name_lists)
    display_name_lists(name_lists, selected=outcome.indices)

    if not outcome.matched:
        display_info("No matches")
        return

    indices = ", ".join(str(i) for i in outcome.indices)
    kind = "unique" if outcome.unique else "ambiguous"
    console.print(f"[bold]{outcome.tier.value}[/bold] match ({kind}): {indices}")
