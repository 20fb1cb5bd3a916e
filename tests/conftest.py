# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures: settings, sample API payloads, in-memory images and an
# httpx MockTransport installed in place of the real HTTP client.
# =============================================================================

from io import BytesIO
from typing import Callable

import httpx
import pytest
from PIL import Image

from adapters import github_api, http_client
from core.config import AppSettings
from core.domain.models import GitHubProfile, ProfileData

AVATAR_URL = "https://avatars.example.com/u/583231"


def make_png(width: int, height: int, color=(200, 40, 40), mode: str = "RGB") -> bytes:
    """Encode a solid-color image as PNG."""
    if mode == "RGBA" and len(color) == 3:
        color = (*color, 255)
    image = Image.new(mode, (width, height), color)
    buf = BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def settings():
    """Settings that ignore any .env file on the machine."""
    return AppSettings(_env_file=None)


@pytest.fixture
def user_payload():
    """Trimmed `GET /users/octocat` response."""
    return {
        "login": "octocat",
        "id": 583231,
        "avatar_url": AVATAR_URL,
        "html_url": "https://github.com/octocat",
        "name": "The Octocat",
        "bio": "A friendly cat",
        "location": "San Francisco",
        "public_repos": 8,
        "followers": 12345,
        "following": 9,
    }


@pytest.fixture
def sample_profile_data(user_payload):
    return ProfileData(profile=GitHubProfile.model_validate(user_payload), starred_count=3)


@pytest.fixture
def avatar_png():
    return make_png(32, 32)


@pytest.fixture
def github_handler(user_payload, avatar_png):
    """Default handler: profile, three starred repos, and the avatar."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "avatars.example.com":
            return httpx.Response(200, content=avatar_png, headers={"Content-Type": "image/png"})
        if request.url.path == "/users/octocat":
            return httpx.Response(200, json=user_payload)
        if request.url.path == "/users/octocat/starred":
            return httpx.Response(200, json=[{"id": 1}, {"id": 2}, {"id": 3}])
        return httpx.Response(404, json={"message": "Not Found"})

    return handler


@pytest.fixture
def mock_http(monkeypatch) -> Callable[[Callable[[httpx.Request], httpx.Response]], list[httpx.Request]]:
    """Route every HTTP request through `handler`; returns the request log."""

    def install(handler):
        requests: list[httpx.Request] = []

        def recording(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        def factory(settings=None, *, extra_headers=None):
            return httpx.AsyncClient(
                transport=httpx.MockTransport(recording),
                headers=extra_headers or {},
                follow_redirects=True,
            )

        monkeypatch.setattr(http_client, "build_async_client", factory)
        monkeypatch.setattr(github_api, "build_async_client", factory)
        return requests

    return install
