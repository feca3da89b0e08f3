"""Build duration estimator — predicts time left on the current build.

Tracks one build at a time: the start of the build in progress and the
duration of the last *successful* build.  Failed or cancelled builds are
never recorded, so the last successful duration stays the best guess.

State lives in a frozen ``DurationState`` behind an ``AtomicReference`` so
readers asking for the remaining time never see a half-updated pair.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict

from cruisewatch.core.atomic import AtomicReference
from cruisewatch.core.clock import Clock, SystemClock

logger = logging.getLogger(__name__)

_ZERO = timedelta(0)


class DurationState(BaseModel):
    """Estimator state at one point in time."""

    model_config = ConfigDict(frozen=True)

    build_started_at: datetime | None = None
    last_duration: timedelta | None = None


class BuildDurationEstimator:
    """Estimates the remaining time on an in-progress build.

    Parameters
    ----------
    clock:
        Time source used when a method is called without an explicit
        ``now``.  Defaults to ``SystemClock``.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()
        self._state: AtomicReference[DurationState] = AtomicReference(DurationState())

    @property
    def build_started_at(self) -> datetime | None:
        return self._state.get().build_started_at

    @property
    def last_duration(self) -> timedelta | None:
        return self._state.get().last_duration

    def on_build_start(self, now: datetime | None = None) -> None:
        """Record the start of a build, replacing any unfinished one."""
        now = now or self._clock.now()
        current = self._state.get()
        self._state.set(current.model_copy(update={"build_started_at": now}))
        logger.debug("Build started at %s", now.isoformat())

    def on_successful_build(self, now: datetime | None = None) -> None:
        """Close the tracked build and remember how long it took.

        Without a recorded start (e.g. monitoring began mid-build) nothing
        is recorded.
        """
        current = self._state.get()
        if current.build_started_at is None:
            logger.debug("Successful build with no recorded start; duration unknown")
            return

        now = now or self._clock.now()
        duration = now - current.build_started_at
        self._state.set(DurationState(build_started_at=None, last_duration=duration))
        logger.debug("Recorded build duration %s", duration)

    def estimated_remaining(self, now: datetime | None = None) -> timedelta:
        """Return the estimated time left, never negative.

        Zero when no build is in progress or no successful build has been
        timed yet.
        """
        state = self._state.get()
        if state.build_started_at is None or state.last_duration is None:
            return _ZERO

        now = now or self._clock.now()
        elapsed = now - state.build_started_at
        return max(_ZERO, state.last_duration - elapsed)
