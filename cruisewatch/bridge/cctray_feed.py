"""cctray feed fetcher — reads project status from a cctray XML feed over HTTP.

Feed format
-----------
The cctray format is a flat list of projects::

    <Projects>
      <Project name="app" activity="Sleeping" lastBuildStatus="Success"
               lastBuildLabel="42" lastBuildTime="2026-02-27T12:00:00"
               nextBuildTime="2026-02-27T12:05:00" webUrl="http://ci/app"
               serverName="ci-01" buildStage="" status="Running">
        <messages>
          <message text="Build fixed by alice" kind="Fixer"/>
        </messages>
      </Project>
    </Projects>

Only ``name`` and ``activity`` are required.  ``serverName``,
``buildStage``, ``status`` and ``<messages>`` are extensions some servers
add; missing ones fall back to the model defaults.  The text of the last
``<message>`` becomes ``current_message``.

Every problem (connection, HTTP status, malformed XML, unknown project,
unrecognised values) is raised as ``FetchError``.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Any

import httpx
from pydantic import ValidationError

from cruisewatch.models.status import ProjectStatus

logger = logging.getLogger(__name__)

# cctray attribute -> ProjectStatus field
_ATTRIBUTE_FIELDS: dict[str, str] = {
    "name": "name",
    "activity": "activity",
    "lastBuildStatus": "build_status",
    "lastBuildLabel": "last_build_label",
    "lastBuildTime": "last_build_date",
    "nextBuildTime": "next_build_time",
    "webUrl": "web_url",
    "serverName": "server_name",
    "buildStage": "build_stage",
    "status": "integrator_state",
}

# Date fields where an empty attribute means "not set"
_OPTIONAL_DATE_FIELDS = {"last_build_date", "next_build_time"}


class FetchError(RuntimeError):
    """Raised when a project status cannot be fetched or understood."""


def parse_project_status(document: bytes | str, project_name: str) -> ProjectStatus:
    """Extract *project_name* from a cctray XML document.

    Raises
    ------
    FetchError
        If the document is malformed, the project is absent, or one of its
        attributes fails validation.
    """
    try:
        root = ET.fromstring(document)
    except ET.ParseError as exc:
        raise FetchError(f"Malformed cctray feed: {exc}") from exc

    element = _find_project(root, project_name)
    if element is None:
        raise FetchError(f"Project {project_name!r} not found in feed")

    data: dict[str, Any] = {}
    for attribute, field in _ATTRIBUTE_FIELDS.items():
        value = element.get(attribute)
        if value is None:
            continue
        if field in _OPTIONAL_DATE_FIELDS and not value.strip():
            continue
        data[field] = value

    messages = element.findall("./messages/message")
    if messages:
        data["current_message"] = messages[-1].get("text", "")

    try:
        return ProjectStatus.model_validate(data)
    except ValidationError as exc:
        raise FetchError(
            f"Invalid status for project {project_name!r}: {exc}"
        ) from exc


def _find_project(root: ET.Element, project_name: str) -> ET.Element | None:
    candidates = [root] if root.tag == "Project" else root.iter("Project")
    for element in candidates:
        if element.get("name") == project_name:
            return element
    return None


class CCTrayFeedFetcher:
    """``StatusFetcher`` backed by a cctray XML feed.

    Parameters
    ----------
    feed_url:
        Full URL of the feed (e.g. ``http://ci.example.com/cctray.xml``).
    timeout:
        Request timeout in seconds.  Ignored when *client* is given.
    client:
        An existing ``httpx.Client`` to reuse.  The fetcher only closes
        clients it created itself.
    """

    def __init__(
        self,
        feed_url: str,
        *,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._feed_url = feed_url
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    @property
    def feed_url(self) -> str:
        return self._feed_url

    def fetch_status(self, project_name: str) -> ProjectStatus:
        """Download the feed and return the snapshot for *project_name*."""
        try:
            response = self._client.get(self._feed_url)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise FetchError(f"Timed out fetching {self._feed_url}") from exc
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"{self._feed_url} returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"Could not reach {self._feed_url}: {exc}") from exc

        logger.debug(
            "Fetched %d bytes from %s for %s",
            len(response.content),
            self._feed_url,
            project_name,
        )
        return parse_project_status(response.content, project_name)

    def close(self) -> None:
        """Close the underlying HTTP client if this fetcher created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> CCTrayFeedFetcher:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
