"""Domain errors.

Two tiers: `FetchFailed` aborts the command, `NetworkError` is always
absorbed by the renderers.
"""

from __future__ import annotations


class GitHubFetchError(Exception):
    """Base class for errors raised by githubfetch."""


class FetchFailed(GitHubFetchError):
    """The primary profile record could not be retrieved."""

    def __init__(self, username: str, reason: str) -> None:
        super().__init__(f"Failed to get data for user '{username}': {reason}")
        self.username = username
        self.reason = reason


class NetworkError(GitHubFetchError):
    """A remote resource could not be downloaded."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason
