"""``cruisewatch watch PROJECT`` — continuously monitor a project.

Polls on a fixed interval and redraws in Rich Live mode.  Completed
builds and new status messages are echoed to the console as they are
detected.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from cruisewatch.cli.commands import _wiring
from cruisewatch.config import settings
from cruisewatch.models.transitions import (
    BuildOccurredEvent,
    BuildTransition,
    MessageReceivedEvent,
)
from cruisewatch.monitor.renderer import MonitorRenderer

console = Console()

_TRANSITION_MARKUP: dict[BuildTransition, str] = {
    BuildTransition.BROKEN: "[bold red]broken[/bold red]",
    BuildTransition.FIXED: "[bold green]fixed[/bold green]",
    BuildTransition.STILL_FAILING: "[red]still failing[/red]",
    BuildTransition.STILL_SUCCESSFUL: "[green]still successful[/green]",
}


def _echo_build(event: BuildOccurredEvent) -> None:
    # Fires before the new snapshot is published; only the name is stable here
    console.print(
        f"[bold]{escape(event.monitor.project_name)}[/bold] build finished: "
        f"{_TRANSITION_MARKUP[event.transition]}"
    )


def _echo_message(event: MessageReceivedEvent) -> None:
    console.print(f"[cyan]{escape(event.project_name)}[/cyan]: {escape(event.message)}")


def watch_cmd(
    project: str = typer.Argument(
        ...,
        help="Name of the project as it appears in the feed.",
    ),
    feed_url: str = typer.Option(
        None,
        "--feed",
        "-f",
        help="cctray feed URL. Defaults to CRUISEWATCH_FEED_URL.",
    ),
    interval: float = typer.Option(
        None,
        "--interval",
        "-i",
        help="Seconds between polls. Defaults to CRUISEWATCH_POLL_INTERVAL_SECONDS.",
    ),
) -> None:
    """Continuously monitor a project (Ctrl+C to exit)."""
    poll_every = interval if interval is not None else settings.poll_interval_seconds
    with _wiring.open_fetcher(
        feed_url or settings.feed_url,
        timeout=settings.request_timeout_seconds,
    ) as fetcher:
        monitor = _wiring.build_monitor(project, fetcher)
        monitor.build_occurred.subscribe(_echo_build)
        monitor.message_received.subscribe(_echo_message)

        console.print(
            f"[dim]Watching {project} every {poll_every:g}s. Press Ctrl+C to exit.[/dim]"
        )
        MonitorRenderer(console=console).render_live(monitor, interval=poll_every)
