"""Project status snapshot models — one immutable observation per poll.

A ``ProjectStatus`` is produced whole by a fetcher or not at all.  There is
no partially-built snapshot; an absent snapshot means "not connected".
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict


class ProjectActivity(str, Enum):
    """What the remote project is doing right now.  Mutually exclusive."""

    SLEEPING = "Sleeping"
    CHECKING_MODIFICATIONS = "CheckingModifications"
    BUILDING = "Building"
    PENDING = "Pending"

    def is_building(self) -> bool:
        """Building or queued to build — both count as an active build."""
        return self in (ProjectActivity.BUILDING, ProjectActivity.PENDING)

    def is_pending(self) -> bool:
        return self == ProjectActivity.PENDING

    def is_sleeping(self) -> bool:
        return self == ProjectActivity.SLEEPING


class IntegrationStatus(str, Enum):
    """Outcome of the most recent build."""

    UNKNOWN = "Unknown"
    SUCCESS = "Success"
    FAILURE = "Failure"
    EXCEPTION = "Exception"
    CANCELLED = "Cancelled"


class ProjectIntegratorState(str, Enum):
    """Lifecycle of the remote build scheduler for the project."""

    UNKNOWN = "Unknown"
    RUNNING = "Running"
    STOPPED = "Stopped"


class ProjectStatus(BaseModel):
    """A frozen snapshot of one project's remote status.

    Replaced wholesale on every poll, never edited field by field.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    activity: ProjectActivity
    build_status: IntegrationStatus = IntegrationStatus.UNKNOWN
    integrator_state: ProjectIntegratorState = ProjectIntegratorState.UNKNOWN
    last_build_label: str = ""
    last_build_date: datetime | None = None
    next_build_time: datetime | None = None
    web_url: str = ""
    build_stage: str = ""
    current_message: str = ""
    server_name: str = ""
