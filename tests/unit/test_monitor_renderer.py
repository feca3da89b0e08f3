"""Unit tests for the MonitorRenderer.

Tests Rich panel output, state color mapping, and rendering of connected
and disconnected monitors.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from rich.console import Console
from rich.panel import Panel

from cruisewatch.models.project import ProjectState
from cruisewatch.models.status import IntegrationStatus, ProjectActivity
from cruisewatch.monitor.renderer import (
    _STATE_LABELS,
    _STATE_STYLES,
    MonitorRenderer,
    _format_remaining,
)


def _render_text(renderer: MonitorRenderer, monitor) -> str:
    console = Console(record=True, width=160)
    console.print(renderer.render_monitor(monitor))
    return console.export_text()


class TestStateMappings:
    """Style and label mappings must cover all ProjectState values."""

    def test_all_states_have_styles(self):
        for state in ProjectState:
            assert state in _STATE_STYLES, f"Missing style for {state}"

    def test_all_states_have_labels(self):
        for state in ProjectState:
            assert state in _STATE_LABELS, f"Missing label for {state}"


class TestFormatting:
    def test_remaining_zero_is_dash(self):
        assert "-" in _format_remaining(timedelta(0))

    def test_remaining_minutes_seconds(self):
        assert _format_remaining(timedelta(minutes=3, seconds=7)) == "3m 07s"


class TestRenderMonitor:
    def test_returns_panel(self, monitor):
        assert isinstance(MonitorRenderer().render_monitor(monitor), Panel)

    def test_disconnected_monitor(self, monitor, fetcher):
        fetcher.push(ConnectionError("connection refused"))
        monitor.poll()

        text = _render_text(MonitorRenderer(), monitor)
        assert "cruise-app" in text
        assert "NOT CONNECTED" in text
        assert "connection refused" in text

    def test_connected_monitor(self, monitor, fetcher, make_status):
        fetcher.push(
            make_status(
                ProjectActivity.SLEEPING,
                IntegrationStatus.FAILURE,
                last_build_label="42",
                last_build_date=datetime(2026, 2, 27, 11, 30, 0),
                current_message="Build broken by bob",
            )
        )
        monitor.poll()

        text = _render_text(MonitorRenderer(), monitor)
        assert "BROKEN" in text
        assert "42" in text
        assert "2026-02-27 11:30:00" in text
        assert "Build broken by bob" in text
        assert "ci-01" in text

    def test_print_monitor(self, monitor, fetcher, make_status):
        fetcher.push(make_status())
        monitor.poll()

        console = Console(record=True, width=160)
        MonitorRenderer(console=console).print_monitor(monitor)
        assert "SUCCESS" in console.export_text()

    def test_remaining_shown_only_while_building(
        self, monitor, fetcher, make_status, clock
    ):
        A, S = ProjectActivity, IntegrationStatus
        for status in (
            make_status(A.SLEEPING),
            make_status(A.BUILDING),
            make_status(A.SLEEPING, S.SUCCESS),
            make_status(A.BUILDING),
            make_status(A.SLEEPING, S.FAILURE),
        ):
            fetcher.push(status)

        monitor.poll()
        monitor.poll()
        clock.advance(minutes=5)
        monitor.poll()  # 5 minute baseline
        monitor.poll()
        clock.advance(minutes=1)
        assert "4m 00s" in _render_text(MonitorRenderer(), monitor)

        monitor.poll()  # failed build keeps the estimator's start
        assert monitor.estimated_time_remaining == timedelta(minutes=4)
        assert "4m 00s" not in _render_text(MonitorRenderer(), monitor)
