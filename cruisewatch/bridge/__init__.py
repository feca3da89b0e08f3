"""Bridge layer between cruisewatch and remote build servers.

Modules
-------
protocols
    ``StatusFetcher`` and ``ProjectController`` — the collaborator
    interfaces a ``ProjectMonitor`` is wired to — plus
    ``ReadOnlyController`` for servers that accept no commands.
cctray_feed
    ``CCTrayFeedFetcher`` reads project snapshots from a cctray XML feed
    over HTTP and raises ``FetchError`` on any failure.
"""
