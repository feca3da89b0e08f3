"""Rich terminal renderer for a ``ProjectMonitor``.

Turns the monitor's current reading into a Rich panel, with color-coded
project states and an optional continuous ``Rich.Live`` mode that drives
the poll loop itself.

Color scheme
------------
- green     : SUCCESS
- yellow    : BUILDING
- bold red  : BROKEN, BROKEN_AND_BUILDING
- dim       : NOT_CONNECTED
"""

from __future__ import annotations

import time
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from rich.console import Console, Group
from rich.live import Live
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cruisewatch.core.state_machine import derive_state
from cruisewatch.models.project import ProjectState

if TYPE_CHECKING:
    from cruisewatch.monitor.project_monitor import ProjectMonitor


# ---------------------------------------------------------------------------
# State -> Rich style mapping
# ---------------------------------------------------------------------------

_STATE_STYLES: dict[ProjectState, str] = {
    ProjectState.SUCCESS: "bold green",
    ProjectState.BUILDING: "bold yellow",
    ProjectState.BROKEN_AND_BUILDING: "bold red",
    ProjectState.BROKEN: "bold red",
    ProjectState.NOT_CONNECTED: "dim",
}

_STATE_LABELS: dict[ProjectState, str] = {
    ProjectState.SUCCESS: "[green]SUCCESS[/green]",
    ProjectState.BUILDING: "[yellow]BUILDING[/yellow]",
    ProjectState.BROKEN_AND_BUILDING: "[bold red]BROKEN (BUILDING)[/bold red]",
    ProjectState.BROKEN: "[bold red]BROKEN[/bold red]",
    ProjectState.NOT_CONNECTED: "[dim]NOT CONNECTED[/dim]",
}


def _format_time(value: datetime | None) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S") if value else "[dim]-[/dim]"


def _format_remaining(remaining: timedelta) -> str:
    seconds = int(remaining.total_seconds())
    if seconds <= 0:
        return "[dim]-[/dim]"
    minutes, seconds = divmod(seconds, 60)
    return f"{minutes}m {seconds:02d}s"


class MonitorRenderer:
    """Renders a ``ProjectMonitor`` as Rich terminal output.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    # ------------------------------------------------------------------
    # Single render
    # ------------------------------------------------------------------

    def render_monitor(self, monitor: ProjectMonitor) -> Panel:
        """Render the monitor's current reading as a Rich Panel."""
        # One load so every cell comes from the same snapshot
        reading = monitor.reading()
        status = reading.status
        state = derive_state(status)
        style = _STATE_STYLES.get(state, "")

        table = Table(
            show_header=True,
            header_style="bold cyan",
            expand=True,
            show_lines=False,
        )
        table.add_column("Project", min_width=20)
        table.add_column("State", min_width=14, justify="center")
        table.add_column("Activity", min_width=12)
        table.add_column("Label", justify="right")
        table.add_column("Last Build", min_width=19)
        table.add_column("Remaining", justify="right")
        table.add_column("Stage / Message", min_width=20)

        if status is None:
            table.add_row(
                f"[{style}]{escape(monitor.project_name)}[/{style}]",
                _STATE_LABELS[state],
                "[dim]-[/dim]",
                "[dim]-[/dim]",
                "[dim]-[/dim]",
                "[dim]-[/dim]",
                "[dim]-[/dim]",
            )
        else:
            details = " | ".join(
                part for part in (status.build_stage, status.current_message) if part
            )
            table.add_row(
                f"[{style}]{escape(status.name)}[/{style}]",
                _STATE_LABELS[state],
                status.activity.value,
                escape(status.last_build_label) or "[dim]-[/dim]",
                _format_time(status.last_build_date),
                (
                    _format_remaining(monitor.estimated_time_remaining)
                    if status.activity.is_building()
                    else "[dim]-[/dim]"
                ),
                escape(details) or "[dim]-[/dim]",
            )

        summary_parts: list[str] = []
        if status is not None and status.server_name:
            summary_parts.append(f"[bold]Server:[/bold] {escape(status.server_name)}")
        if status is not None and status.web_url:
            summary_parts.append(f"[bold]Web:[/bold] {escape(status.web_url)}")
        if reading.last_error is not None:
            summary_parts.append(
                f"[red][bold]Last error:[/bold] {escape(str(reading.last_error))}[/red]"
            )
        summary = "  |  ".join(summary_parts)

        subtitle = (
            "all good"
            if state == ProjectState.SUCCESS
            else f"{monitor.project_name}: {state.value}"
        )

        return Panel(
            Group(table, Text(""), Text.from_markup(summary)),
            title="[bold]cruisewatch[/bold]",
            subtitle=escape(subtitle),
            border_style="red" if state.is_broken() else "blue",
            padding=(1, 2),
        )

    # ------------------------------------------------------------------
    # Continuous live rendering
    # ------------------------------------------------------------------

    def render_live(
        self,
        monitor: ProjectMonitor,
        *,
        interval: float = 5.0,
    ) -> None:
        """Poll *monitor* every *interval* seconds and redraw until Ctrl+C."""
        interval = max(interval, 0.1)

        with Live(
            self.render_monitor(monitor),
            console=self.console,
            refresh_per_second=4,
            transient=False,
        ) as live:
            try:
                while True:
                    monitor.poll()
                    live.update(self.render_monitor(monitor))
                    time.sleep(interval)
            except KeyboardInterrupt:
                live.update(self.render_monitor(monitor))

    # ------------------------------------------------------------------
    # Standalone print
    # ------------------------------------------------------------------

    def print_monitor(self, monitor: ProjectMonitor) -> None:
        """Print the monitor's current reading to the console."""
        self.console.print(self.render_monitor(monitor))
