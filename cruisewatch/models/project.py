"""Project-level models: the derived display state and per-project config."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ProjectState(str, Enum):
    """Display state derived from the current snapshot.  Never stored."""

    NOT_CONNECTED = "NotConnected"
    BUILDING = "Building"
    BROKEN_AND_BUILDING = "BrokenAndBuilding"
    SUCCESS = "Success"
    BROKEN = "Broken"

    def is_broken(self) -> bool:
        return self in (ProjectState.BROKEN, ProjectState.BROKEN_AND_BUILDING)


class ProjectConfiguration(BaseModel):
    """How to reach one monitored project.

    The monitor hands this back to callers verbatim and never interprets it.
    """

    model_config = ConfigDict(frozen=True)

    feed_url: str
    project_name: str
    show_project: bool = True
