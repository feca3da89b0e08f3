"""cruisewatch: status-reconciliation engine for a CI monitoring client.

Polls a remote build project, diffs each new status snapshot against the
previous one, and publishes a thread-safe view of the project's state:
  - Transition classification (build started / completed / fixed / broken)
  - Build duration estimation from the last successful build
  - Derived display state (NotConnected, Building, BrokenAndBuilding, ...)
  - Synchronous event streams with isolated listener failures
  - cctray XML feed fetcher and a Rich/Typer terminal client
"""

__version__ = "0.1.0"
__description__ = "Status-reconciliation engine for continuous-integration monitoring"

from cruisewatch.monitor.project_monitor import MonitorReading, ProjectMonitor
from cruisewatch.cli.app import app as cli

__all__ = ["ProjectMonitor", "MonitorReading", "cli", "__version__"]
