"""ProjectMonitor — polls one remote project and reconciles successive snapshots.

Each ``poll()`` fetches a fresh snapshot, classifies it against the
previous one, updates the build duration estimator, notifies listeners,
and publishes the new snapshot.  Everything a reader sees is derived from
a single immutable ``MonitorReading`` swapped in atomically, so readers on
other threads observe the state before or after a poll, never in between.

Concurrency contract
--------------------
- One poller per monitor.  ``poll()`` must not run concurrently with
  itself on the same instance.
- Any number of readers.  Every accessor performs exactly one load of the
  published reading.
- No lock is held while the fetcher, the controller, or a listener runs.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict

from cruisewatch.bridge.protocols import ProjectController, StatusFetcher
from cruisewatch.core.atomic import AtomicReference
from cruisewatch.core.clock import Clock, SystemClock
from cruisewatch.core.duration_estimator import BuildDurationEstimator
from cruisewatch.core.state_machine import derive_state
from cruisewatch.core.transition_classifier import classify_transition
from cruisewatch.models.project import ProjectConfiguration, ProjectState
from cruisewatch.models.status import (
    IntegrationStatus,
    ProjectActivity,
    ProjectIntegratorState,
    ProjectStatus,
)
from cruisewatch.models.transitions import (
    BuildOccurredEvent,
    MessageReceivedEvent,
    MonitorPolledEvent,
)
from cruisewatch.routing.dispatcher import EventStream

logger = logging.getLogger(__name__)


class MonitorReading(BaseModel):
    """Everything a poll cycle publishes, as one immutable value.

    ``status is None`` means the monitor is disconnected.  ``last_error``
    is only ever replaced by a failed poll; a successful poll carries the
    previous error forward unchanged.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: ProjectStatus | None = None
    last_error: Exception | None = None

    @property
    def is_connected(self) -> bool:
        return self.status is not None


class ProjectMonitor:
    """Monitors a single remote build project.

    Parameters
    ----------
    configuration:
        How to reach the project.  Exposed verbatim, never interpreted.
    controller:
        Forwards build-control commands; also names the project.
    fetcher:
        Retrieves one ``ProjectStatus`` per call.
    clock:
        Time source for the build duration estimator.  Defaults to
        ``SystemClock``.
    """

    def __init__(
        self,
        configuration: ProjectConfiguration,
        controller: ProjectController,
        fetcher: StatusFetcher,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._configuration = configuration
        self._controller = controller
        self._fetcher = fetcher
        self._clock = clock or SystemClock()
        self._estimator = BuildDurationEstimator(self._clock)
        self._reading: AtomicReference[MonitorReading] = AtomicReference(
            MonitorReading()
        )

        self.polled: EventStream[MonitorPolledEvent] = EventStream("polled")
        self.build_occurred: EventStream[BuildOccurredEvent] = EventStream(
            "build_occurred"
        )
        self.message_received: EventStream[MessageReceivedEvent] = EventStream(
            "message_received"
        )

    # ------------------------------------------------------------------
    # Poll cycle
    # ------------------------------------------------------------------

    def poll(self) -> None:
        """Run one fetch-classify-update-notify cycle.

        Fetch failures never escape: they disconnect the monitor and are
        kept in ``last_error``.  ``polled`` fires exactly once either way.
        """
        previous = self._reading.get()
        try:
            new_status = self._fetcher.fetch_status(self.project_name)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Poll failed for %s: %s", self.project_name, exc)
            self._reading.set(MonitorReading(status=None, last_error=exc))
        else:
            self._reconcile(previous, new_status)

        self.polled.emit(MonitorPolledEvent(monitor=self))

    def _reconcile(self, previous: MonitorReading, new_status: ProjectStatus) -> None:
        transition = classify_transition(previous.status, new_status)
        if transition is not None:
            if transition.build_completed and transition.build_succeeded:
                self._estimator.on_successful_build()

            if transition.build_completed and transition.build_transition is not None:
                logger.info(
                    "Build completed for %s: %s",
                    self.project_name,
                    transition.build_transition.value,
                )
                self.build_occurred.emit(
                    BuildOccurredEvent(
                        monitor=self, transition=transition.build_transition
                    )
                )

            if transition.build_started:
                logger.info("Build started for %s", self.project_name)
                self._estimator.on_build_start()

            if transition.new_message_received:
                self.message_received.emit(
                    MessageReceivedEvent(
                        project_name=new_status.name,
                        message=transition.latest_message,
                    )
                )

        self._reading.set(
            MonitorReading(status=new_status, last_error=previous.last_error)
        )

    # ------------------------------------------------------------------
    # Build control (pure forwarding, errors propagate)
    # ------------------------------------------------------------------

    def force_build(self) -> None:
        self._controller.force_build()

    def abort_build(self) -> None:
        self._controller.abort_build()

    def fix_build(self, fixing_user_name: str) -> None:
        self._controller.fix_build(fixing_user_name)

    def stop_project(self) -> None:
        self._controller.stop_project()

    def start_project(self) -> None:
        self._controller.start_project()

    def cancel_pending(self) -> None:
        self._controller.cancel_pending_request()

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def project_name(self) -> str:
        return self._controller.project_name

    @property
    def configuration(self) -> ProjectConfiguration:
        return self._configuration

    # ------------------------------------------------------------------
    # Read accessors — one atomic load each
    # ------------------------------------------------------------------

    def reading(self) -> MonitorReading:
        """Return the whole published reading.

        Use this when several fields must come from the same snapshot.
        """
        return self._reading.get()

    @property
    def project_status(self) -> ProjectStatus | None:
        return self._reading.get().status

    @property
    def last_error(self) -> Exception | None:
        """The error from the most recent failed poll, if any.

        Not cleared by later successful polls; use ``is_connected`` to
        decide connectivity.
        """
        return self._reading.get().last_error

    @property
    def is_connected(self) -> bool:
        return self._reading.get().is_connected

    @property
    def activity(self) -> ProjectActivity | None:
        """Current activity, or ``None`` when disconnected."""
        status = self.project_status
        return status.activity if status is not None else None

    @property
    def last_build_label(self) -> str:
        status = self.project_status
        return status.last_build_label if status is not None else ""

    @property
    def last_build_time(self) -> datetime | None:
        status = self.project_status
        return status.last_build_date if status is not None else None

    @property
    def next_build_time(self) -> datetime | None:
        status = self.project_status
        return status.next_build_time if status is not None else None

    @property
    def web_url(self) -> str:
        status = self.project_status
        return status.web_url if status is not None else ""

    @property
    def current_build_stage(self) -> str:
        status = self.project_status
        return status.build_stage if status is not None else ""

    @property
    def current_message(self) -> str:
        status = self.project_status
        return status.current_message if status is not None else ""

    @property
    def server_name(self) -> str:
        status = self.project_status
        return status.server_name if status is not None else ""

    @property
    def integration_status(self) -> IntegrationStatus:
        status = self.project_status
        return status.build_status if status is not None else IntegrationStatus.UNKNOWN

    @property
    def integrator_state(self) -> ProjectIntegratorState:
        status = self.project_status
        if status is None:
            return ProjectIntegratorState.UNKNOWN
        return status.integrator_state

    @property
    def is_pending(self) -> bool:
        status = self.project_status
        return status is not None and status.activity.is_pending()

    @property
    def project_state(self) -> ProjectState:
        return derive_state(self.project_status)

    @property
    def summary_status_string(self) -> str:
        """Empty when the project is healthy, else ``"<name>: <state>"``."""
        state = self.project_state
        if state == ProjectState.SUCCESS:
            return ""
        return f"{self.project_name}: {state.value}"

    @property
    def estimated_time_remaining(self) -> timedelta:
        return self._estimator.estimated_remaining()

    @property
    def last_build_duration(self) -> timedelta | None:
        """Duration of the last successful build seen by this monitor."""
        return self._estimator.last_duration
