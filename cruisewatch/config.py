"""Runtime configuration — env-driven.

Centralized settings using pydantic-settings.  Reads from a .env file and
CRUISEWATCH_* environment variables.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class WatchSettings(BaseSettings):
    """Monitoring client settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export CRUISEWATCH_FEED_URL=http://ci.example.com/cctray.xml
        export CRUISEWATCH_POLL_INTERVAL_SECONDS=15
        export CRUISEWATCH_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CRUISEWATCH_",
        env_file_encoding="utf-8",
    )

    # Logging
    log_level: str = "WARNING"
    debug: bool = False

    # Remote feed
    feed_url: str = "http://localhost:8080/cctray.xml"
    request_timeout_seconds: float = 10.0

    # Polling
    poll_interval_seconds: float = 5.0

    @property
    def effective_log_level(self) -> str:
        """``DEBUG`` when debug is on, else the configured level."""
        return "DEBUG" if self.debug else self.log_level.upper()


# Module-level singleton — import as `from cruisewatch.config import settings`
settings = WatchSettings()
