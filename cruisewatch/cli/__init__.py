"""cruisewatch CLI — Typer-based command-line interface.

Provides the ``cruisewatch`` command with subcommands for a one-shot
status check and continuous watching of a project on a cctray feed.

All output uses Rich for formatted terminal display.
"""
