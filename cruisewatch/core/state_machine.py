"""Project state derivation — snapshot in, display state out.

Recomputed on every read and never stored, so it cannot go stale.
"""

from __future__ import annotations

from cruisewatch.models.project import ProjectState
from cruisewatch.models.status import IntegrationStatus, ProjectStatus


def derive_state(status: ProjectStatus | None) -> ProjectState:
    """Map the current snapshot (or its absence) onto a ``ProjectState``."""
    if status is None:
        return ProjectState.NOT_CONNECTED

    succeeded = status.build_status == IntegrationStatus.SUCCESS

    if status.activity.is_building():
        return ProjectState.BUILDING if succeeded else ProjectState.BROKEN_AND_BUILDING

    if succeeded:
        return ProjectState.SUCCESS

    return ProjectState.BROKEN
