"""Whole pipeline without the CLI."""

import httpx
import pytest

from conftest import AVATAR_URL
from core.domain.errors import FetchFailed
from core.domain.terminal import TerminalMode
from core.domain.visuals import EmptyVisual, GlyphArt, InlineImagePlaceholder
from core.services.fetch_pipeline import PipelineHooks, run_fetch


@pytest.mark.asyncio
async def test_glyph_mode(mock_http, github_handler, settings):
    requests = mock_http(github_handler)

    result = await run_fetch("octocat", settings, environ={"TERM": "xterm-256color"})

    assert result.mode is TerminalMode.GLYPH_FALLBACK
    assert isinstance(result.visual, GlyphArt)
    assert result.data.starred_count == 3
    assert [str(r.url).split("?")[0] for r in requests] == [
        "https://api.github.com/users/octocat",
        "https://api.github.com/users/octocat/starred",
        AVATAR_URL,
    ]


@pytest.mark.asyncio
async def test_inline_mode(monkeypatch, mock_http, github_handler, settings):
    from adapters.renderers import inline_image

    async def helper(argv):
        return 0

    monkeypatch.setattr(inline_image, "run_helper", helper)
    mock_http(github_handler)

    result = await run_fetch("octocat", settings, environ={"TERM": "xterm-kitty"})

    assert result.mode is TerminalMode.INLINE_CAPABLE
    assert result.visual == InlineImagePlaceholder()


@pytest.mark.asyncio
async def test_avatar_failure_is_degraded(mock_http, github_handler, settings):
    def handler(request):
        if request.url.host == "avatars.example.com":
            raise httpx.ConnectError("cdn down", request=request)
        return github_handler(request)

    mock_http(handler)

    result = await run_fetch("octocat", settings, environ={})

    assert result.visual == EmptyVisual()
    assert result.data.profile.login == "octocat"


@pytest.mark.asyncio
async def test_profile_failure_is_fatal(mock_http, github_handler, settings):
    mock_http(github_handler)

    with pytest.raises(FetchFailed):
        await run_fetch("nobody", settings, environ={})


@pytest.mark.asyncio
async def test_hooks_bracket_only_the_profile_fetch(mock_http, github_handler, settings):
    events = []

    def handler(request):
        events.append(request.url.host)
        return github_handler(request)

    mock_http(handler)
    hooks = PipelineHooks(
        fetch_started=lambda: events.append("started"),
        fetch_finished=lambda: events.append("finished"),
    )

    await run_fetch("octocat", settings, environ={}, hooks=hooks)

    assert events == ["started", "api.github.com", "api.github.com", "finished", "avatars.example.com"]


@pytest.mark.asyncio
async def test_finished_hook_runs_on_fatal_failure(mock_http, github_handler, settings):
    events = []
    mock_http(github_handler)
    hooks = PipelineHooks(
        fetch_started=lambda: events.append("started"),
        fetch_finished=lambda: events.append("finished"),
    )

    with pytest.raises(FetchFailed):
        await run_fetch("nobody", settings, environ={}, hooks=hooks)

    assert events == ["started", "finished"]
