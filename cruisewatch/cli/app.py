"""Main Typer application — imports and registers all CLI commands.

Entry point: ``cruisewatch`` (configured via pyproject.toml project.scripts).

Commands: status, watch.
"""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from cruisewatch.cli.commands.status_cmd import status_cmd
from cruisewatch.cli.commands.watch_cmd import watch_cmd
from cruisewatch.config import settings

app = typer.Typer(
    name="cruisewatch",
    help="cruisewatch: continuous-integration project monitor.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def configure(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log at DEBUG level."
    ),
) -> None:
    """Configure logging before any command runs."""
    level = "DEBUG" if verbose else settings.effective_log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


# Register subcommands
app.command(name="status", help="Poll a project once and show its state.")(status_cmd)
app.command(name="watch", help="Continuously monitor a project.")(watch_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
