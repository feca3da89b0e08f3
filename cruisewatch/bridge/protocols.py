"""Collaborator protocols the ``ProjectMonitor`` depends on.

``StatusFetcher`` retrieves one snapshot per call.  ``ProjectController``
forwards build-control commands to the remote server.  Both are treated as
blocking, possibly slow I/O, and both own their own timeout policy.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from cruisewatch.models.status import ProjectStatus

logger = logging.getLogger(__name__)


@runtime_checkable
class StatusFetcher(Protocol):
    """Fetches the current status of a named project."""

    def fetch_status(self, project_name: str) -> ProjectStatus:
        """Return a complete snapshot, or raise on any failure.

        Every failure (transport, protocol, parse, timeout) is reported by
        raising; the monitor treats them all as a disconnect.
        """
        ...


@runtime_checkable
class ProjectController(Protocol):
    """Build-control commands for one remote project.

    Failures propagate to whoever issued the command.
    """

    @property
    def project_name(self) -> str:
        """Name of the project these commands act on."""
        ...

    def force_build(self) -> None: ...

    def abort_build(self) -> None: ...

    def fix_build(self, fixing_user_name: str) -> None: ...

    def stop_project(self) -> None: ...

    def start_project(self) -> None: ...

    def cancel_pending_request(self) -> None: ...


class ControlNotSupportedError(RuntimeError):
    """Raised when the remote server cannot accept build-control commands."""


class ReadOnlyController:
    """``ProjectController`` for feeds that only publish status.

    Every command raises ``ControlNotSupportedError``.
    """

    def __init__(self, project_name: str) -> None:
        self._project_name = project_name

    @property
    def project_name(self) -> str:
        return self._project_name

    def _refuse(self, command: str) -> None:
        logger.info("Refusing %s for %s: feed is read-only", command, self._project_name)
        raise ControlNotSupportedError(
            f"{command} is not supported for {self._project_name!r}: "
            "the status feed is read-only"
        )

    def force_build(self) -> None:
        self._refuse("force build")

    def abort_build(self) -> None:
        self._refuse("abort build")

    def fix_build(self, fixing_user_name: str) -> None:
        self._refuse("fix build")

    def stop_project(self) -> None:
        self._refuse("stop project")

    def start_project(self) -> None:
        self._refuse("start project")

    def cancel_pending_request(self) -> None:
        self._refuse("cancel pending request")
