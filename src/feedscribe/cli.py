"""CLI entry point."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from feedscribe.core.exceptions import FeedscribeError

app = typer.Typer(
    name="feedscribe",
    help="Render RSS 2.0, Atom 1.0 and JSON Feed documents",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    RSS2 = "rss2"
    ATOM1 = "atom1"
    JSON1 = "json1"


@app.command()
def version() -> None:
    """Show version."""
    from feedscribe import __version__

    console.print(f"feedscribe {__version__}")


@app.command()
def info() -> None:
    """Show system information."""
    import sys

    from feedscribe import FORMATS, __version__

    console.print(f"[bold]feedscribe[/bold] {__version__}")
    console.print(f"Python {sys.version}")
    console.print(f"Formats: {', '.join(FORMATS)}")


@app.command()
def render(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, help="Feed description (JSON)"),
    format: OutputFormat = typer.Option(OutputFormat.RSS2, "--format", "-f", help="Output format"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write to file instead of stdout"),
) -> None:
    """Render a feed description file."""
    from feedscribe.core.config import get_settings
    from feedscribe.feed import Feed

    try:
        settings = get_settings()
        logging.basicConfig(level=settings.log_level)
        feed = Feed.model_validate_json(source.read_text(encoding="utf-8"))
        text = feed.serialize(format.value, settings.render_options())
    except ValidationError as e:
        err_console.print(f"[red]Invalid feed description:[/red] {e}")
        raise typer.Exit(code=1) from e
    except FeedscribeError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1) from e

    if output is None:
        # Plain write: rich markup would eat [brackets] in feed content
        typer.echo(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        console.print(f"Wrote {format.value} feed with {len(feed.items)} items to {output}")


if __name__ == "__main__":
    app()
