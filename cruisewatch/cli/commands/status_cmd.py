"""``cruisewatch status PROJECT`` — poll a project once and show its state.

Exits with code 1 when the project cannot be reached, printing the error
that caused the disconnect.
"""

from __future__ import annotations

import typer
from rich.console import Console

from cruisewatch.cli.commands import _wiring
from cruisewatch.config import settings
from cruisewatch.monitor.renderer import MonitorRenderer

console = Console()


def status_cmd(
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
    timeout: float = typer.Option(
        None,
        "--timeout",
        "-t",
        help="Request timeout in seconds.",
    ),
) -> None:
    """Poll a project once and print its current state."""
    with _wiring.open_fetcher(
        feed_url or settings.feed_url,
        timeout=timeout if timeout is not None else settings.request_timeout_seconds,
    ) as fetcher:
        monitor = _wiring.build_monitor(project, fetcher)
        monitor.poll()

    renderer = MonitorRenderer(console=console)
    renderer.print_monitor(monitor)

    if not monitor.is_connected:
        console.print(f"[bold red]Not connected:[/bold red] {monitor.last_error}")
        raise typer.Exit(code=1)
