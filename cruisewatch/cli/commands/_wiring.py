"""Wires a ``ProjectMonitor`` to a cctray feed for the CLI commands.

The fetcher owns an HTTP client, so commands open it with ``with`` and
build the monitor inside that block::

    with _wiring.open_fetcher(url, timeout=5.0) as fetcher:
        monitor = _wiring.build_monitor("app", fetcher)
"""

from __future__ import annotations

from cruisewatch.bridge.cctray_feed import CCTrayFeedFetcher
from cruisewatch.bridge.protocols import ReadOnlyController
from cruisewatch.models.project import ProjectConfiguration
from cruisewatch.monitor.project_monitor import ProjectMonitor


def open_fetcher(feed_url: str, *, timeout: float = 10.0) -> CCTrayFeedFetcher:
    return CCTrayFeedFetcher(feed_url, timeout=timeout)


def build_monitor(project_name: str, fetcher: CCTrayFeedFetcher) -> ProjectMonitor:
    """Create a read-only monitor for *project_name* over *fetcher*."""
    configuration = ProjectConfiguration(
        feed_url=fetcher.feed_url,
        project_name=project_name,
    )
    return ProjectMonitor(configuration, ReadOnlyController(project_name), fetcher)
