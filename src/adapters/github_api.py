"""GitHub REST API access.

Pure data access: no rendering, no printing.
- `fetch_github_user`: the primary record; any failure is fatal (`FetchFailed`).
- `fetch_starred_count`: best-effort; any failure counts as zero.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import FetchFailed
from core.domain.models import GitHubProfile

logger = logging.getLogger(__name__)

_API_HEADERS = {
    # Stable JSON media type.
    "Accept": "application/vnd.github+json",
}


def _user_url(settings: AppSettings, username: str) -> str:
    return f"{settings.api_base_url.rstrip('/')}/users/{quote(username, safe='')}"


async def fetch_github_user(*, username: str, settings: AppSettings | None = None) -> GitHubProfile:
    settings = settings or AppSettings()
    url = _user_url(settings, username)

    try:
        async with build_async_client(settings, extra_headers=_API_HEADERS) as client:
            resp = await client.get(url)
    except httpx.HTTPError as exc:
        raise FetchFailed(username, f"connection error: {exc}") from exc

    if resp.status_code == 404:
        raise FetchFailed(username, "user not found")
    if resp.status_code != 200:
        raise FetchFailed(username, f"HTTP {resp.status_code}")

    try:
        data: Any = resp.json()
    except ValueError as exc:
        raise FetchFailed(username, "response is not JSON") from exc

    # A null body is treated like any other failure.
    if not isinstance(data, dict):
        raise FetchFailed(username, "empty response")

    try:
        return GitHubProfile.model_validate(data)
    except ValidationError as exc:
        raise FetchFailed(username, f"malformed profile: {exc.error_count()} invalid field(s)") from exc


async def fetch_starred_count(*, username: str, settings: AppSettings | None = None) -> int:
    """Count the elements of the starred-repositories response.

    Note:
    - Only the first page is counted (`starred_page_size` items at most).
    - Degrades to 0 on any failure: the profile alone is enough to render.
    """

    settings = settings or AppSettings()
    url = f"{_user_url(settings, username)}/starred"
    params = {"per_page": settings.starred_page_size}

    try:
        async with build_async_client(settings, extra_headers=_API_HEADERS) as client:
            resp = await client.get(url, params=params)
        if resp.status_code != 200:
            logger.debug("Starred request for %s returned HTTP %s", username, resp.status_code)
            return 0
        data = resp.json()
    except (httpx.HTTPError, ValueError) as exc:
        logger.debug("Starred request for %s failed: %s", username, exc)
        return 0

    if not isinstance(data, list):
        return 0
    return len(data)
