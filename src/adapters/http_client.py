"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and auth for every request.
- Makes testing easy: tests swap `build_async_client` for one backed by
  `httpx.MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.domain.errors import NetworkError

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with safe defaults.

    Why a builder:
    - Centralizes timeouts/headers so every request behaves the same.
    - Single place to attach the optional GitHub token.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
    }
    if settings.github_token:
        headers["Authorization"] = f"Bearer {settings.github_token}"
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )


async def fetch_bytes(url: str, *, settings: AppSettings | None = None) -> bytes:
    """Download `url` and return the raw body.

    One attempt, no retries. Connection failures, timeouts and non-2xx
    statuses all raise `NetworkError`; callers decide how to degrade.
    """

    settings = settings or AppSettings()
    try:
        async with build_async_client(settings, extra_headers={"Accept": "image/*"}) as client:
            resp = await client.get(url)
    except httpx.HTTPError as exc:
        raise NetworkError(url, str(exc) or type(exc).__name__) from exc

    if not resp.is_success:
        raise NetworkError(url, f"HTTP {resp.status_code}")

    logger.debug("Downloaded %d bytes from %s", len(resp.content), url)
    return resp.content
