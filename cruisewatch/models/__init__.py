"""cruisewatch data models — all Pydantic v2, all frozen (immutable)."""

from cruisewatch.models.project import ProjectConfiguration, ProjectState
from cruisewatch.models.status import (
    IntegrationStatus,
    ProjectActivity,
    ProjectIntegratorState,
    ProjectStatus,
)
from cruisewatch.models.transitions import (
    BuildOccurredEvent,
    BuildTransition,
    MessageReceivedEvent,
    MonitorPolledEvent,
    PollTransition,
)

__all__ = [
    # status
    "ProjectActivity",
    "IntegrationStatus",
    "ProjectIntegratorState",
    "ProjectStatus",
    # project
    "ProjectState",
    "ProjectConfiguration",
    # transitions
    "BuildTransition",
    "PollTransition",
    "MonitorPolledEvent",
    "BuildOccurredEvent",
    "MessageReceivedEvent",
]
