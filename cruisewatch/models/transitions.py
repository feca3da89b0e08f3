"""Poll transition and event payload models.

``PollTransition`` is the classified difference between two consecutive
snapshots.  The event models are what listeners receive from a
``ProjectMonitor`` during a poll cycle.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class BuildTransition(str, Enum):
    """How a completed build changed the project's health."""

    BROKEN = "Broken"
    FIXED = "Fixed"
    STILL_FAILING = "StillFailing"
    STILL_SUCCESSFUL = "StillSuccessful"


class PollTransition(BaseModel):
    """What changed between the previous and current snapshot.

    Each fact is computed from the two endpoint snapshots only; no history
    beyond them is consulted.
    """

    model_config = ConfigDict(frozen=True)

    build_completed: bool = False
    build_succeeded: bool = False
    build_started: bool = False
    new_message_received: bool = False
    build_transition: BuildTransition | None = None  # only when build_completed
    latest_message: str = ""


class MonitorPolledEvent(BaseModel):
    """Fired exactly once at the end of every poll, success or failure."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    monitor: Any  # ProjectMonitor


class BuildOccurredEvent(BaseModel):
    """Fired when a poll observes a build leaving the active state."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    monitor: Any  # ProjectMonitor
    transition: BuildTransition


class MessageReceivedEvent(BaseModel):
    """Fired when the project publishes a new, non-empty status message."""

    model_config = ConfigDict(frozen=True)

    project_name: str
    message: str
