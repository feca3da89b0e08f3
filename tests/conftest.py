"""Shared test fixtures for cruisewatch."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from cruisewatch.models.project import ProjectConfiguration
from cruisewatch.models.status import (
    IntegrationStatus,
    ProjectActivity,
    ProjectStatus,
)
from cruisewatch.monitor.project_monitor import ProjectMonitor

PROJECT_NAME = "cruise-app"


# ---------------------------------------------------------------------------
# Fakes for the monitor's collaborators
# ---------------------------------------------------------------------------


class FakeClock:
    """A clock that only moves when told to."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2026, 2, 27, 12, 0, 0, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs: float) -> datetime:
        self.current = self.current + timedelta(**kwargs)
        return self.current


class ScriptedFetcher:
    """Returns queued snapshots in order; queued exceptions are raised."""

    def __init__(self) -> None:
        self.script: list[ProjectStatus | Exception] = []
        self.requested: list[str] = []

    def push(self, outcome: ProjectStatus | Exception) -> None:
        self.script.append(outcome)

    def fetch_status(self, project_name: str) -> ProjectStatus:
        self.requested.append(project_name)
        outcome = self.script.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class RecordingController:
    """Records every command; raises ``fail_with`` when set."""

    def __init__(self, project_name: str = PROJECT_NAME) -> None:
        self._project_name = project_name
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.fail_with: Exception | None = None

    @property
    def project_name(self) -> str:
        return self._project_name

    def _record(self, command: str, *args: Any) -> None:
        self.calls.append((command, args))
        if self.fail_with is not None:
            raise self.fail_with

    def force_build(self) -> None:
        self._record("force_build")

    def abort_build(self) -> None:
        self._record("abort_build")

    def fix_build(self, fixing_user_name: str) -> None:
        self._record("fix_build", fixing_user_name)

    def stop_project(self) -> None:
        self._record("stop_project")

    def start_project(self) -> None:
        self._record("start_project")

    def cancel_pending_request(self) -> None:
        self._record("cancel_pending_request")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def clock() -> FakeClock:
    """Provide a controllable clock starting at a fixed instant."""
    return FakeClock()


@pytest.fixture
def fetcher() -> ScriptedFetcher:
    return ScriptedFetcher()


@pytest.fixture
def controller() -> RecordingController:
    return RecordingController()


@pytest.fixture
def configuration() -> ProjectConfiguration:
    return ProjectConfiguration(
        feed_url="http://ci.example.test/cctray.xml",
        project_name=PROJECT_NAME,
    )


@pytest.fixture
def monitor(
    configuration: ProjectConfiguration,
    controller: RecordingController,
    fetcher: ScriptedFetcher,
    clock: FakeClock,
) -> ProjectMonitor:
    """Provide a ProjectMonitor wired to scripted collaborators."""
    return ProjectMonitor(configuration, controller, fetcher, clock=clock)


@pytest.fixture
def make_status() -> Callable[..., ProjectStatus]:
    """Factory fixture: build a ProjectStatus with sensible defaults."""

    def _factory(
        activity: ProjectActivity = ProjectActivity.SLEEPING,
        build_status: IntegrationStatus = IntegrationStatus.SUCCESS,
        **overrides: Any,
    ) -> ProjectStatus:
        defaults: dict[str, Any] = {
            "name": PROJECT_NAME,
            "activity": activity,
            "build_status": build_status,
            "last_build_label": "1",
            "web_url": "http://ci.example.test/cruise-app",
            "server_name": "ci-01",
        }
        defaults.update(overrides)
        return ProjectStatus(**defaults)

    return _factory
