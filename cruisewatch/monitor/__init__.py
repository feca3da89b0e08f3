"""cruisewatch project monitor — reconciles successive status snapshots.

Modules
-------
project_monitor
    ``ProjectMonitor`` polls a project through a ``StatusFetcher``,
    classifies each new snapshot against the last one, fires events, and
    publishes an immutable ``MonitorReading`` for concurrent readers.
renderer
    ``MonitorRenderer`` turns a monitor into Rich renderables for terminal
    display, including continuous ``Rich.Live`` mode.
"""
