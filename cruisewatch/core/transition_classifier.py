"""Transition classifier — diffs two consecutive project snapshots.

Pure and memoryless: the result depends only on the two snapshots passed
in, so any multi-poll history can be reconstructed by replaying them pair
by pair.  Only endpoint activities are compared; a ``Pending -> Sleeping``
pair counts as a completed build even if ``Building`` was never observed.
"""

from __future__ import annotations

from cruisewatch.models.status import IntegrationStatus, ProjectActivity, ProjectStatus
from cruisewatch.models.transitions import BuildTransition, PollTransition


def classify_transition(
    previous: ProjectStatus | None,
    current: ProjectStatus | None,
) -> PollTransition | None:
    """Classify what happened between *previous* and *current*.

    Returns ``None`` when either snapshot is missing: the first poll after
    startup and the first poll after a connection failure produce no
    transition facts.
    """
    if previous is None or current is None:
        return None

    build_completed = (
        previous.activity.is_building() and not current.activity.is_building()
    )
    build_succeeded = (
        build_completed and current.build_status == IntegrationStatus.SUCCESS
    )
    # A queued build (Pending) has not started yet; Pending -> Building is a start
    build_started = (
        previous.activity != ProjectActivity.BUILDING
        and current.activity == ProjectActivity.BUILDING
    )
    new_message_received = bool(current.current_message) and (
        current.current_message != previous.current_message
    )

    return PollTransition(
        build_completed=build_completed,
        build_succeeded=build_succeeded,
        build_started=build_started,
        new_message_received=new_message_received,
        build_transition=(
            classify_build_transition(previous, current) if build_completed else None
        ),
        latest_message=current.current_message if new_message_received else "",
    )


def classify_build_transition(
    previous: ProjectStatus, current: ProjectStatus
) -> BuildTransition:
    """Compare the health of the project before and after a build."""
    was_ok = previous.build_status == IntegrationStatus.SUCCESS
    is_ok = current.build_status == IntegrationStatus.SUCCESS

    if was_ok and is_ok:
        return BuildTransition.STILL_SUCCESSFUL
    if was_ok:
        return BuildTransition.BROKEN
    if is_ok:
        return BuildTransition.FIXED
    return BuildTransition.STILL_FAILING
