"""Profile fetch and avatar rendering orchestration.

The CLI delegates everything except printing to these helpers, which keeps
side-effects (spinner, layout) out of the pipeline and makes each stage
testable on its own:

1. `fetch_profile_data`: primary record (fatal) + starred count (degraded).
2. `select_renderer`: terminal mode -> renderer.
3. `render_avatar`: run the chosen renderer through `best_effort`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping

from adapters.github_api import fetch_github_user, fetch_starred_count
from adapters.renderers import GlyphArtRenderer, KittyInlineRenderer, best_effort
from core.config import AppSettings
from core.domain.models import ProfileData
from core.domain.terminal import TerminalMode
from core.domain.visuals import RenderableVisual
from core.interfaces.renderer import AvatarRenderer
from core.services.capability import detect_terminal_mode

RendererFactory = Callable[[AppSettings], AvatarRenderer]

_RENDERERS: dict[TerminalMode, RendererFactory] = {
    TerminalMode.INLINE_CAPABLE: KittyInlineRenderer,
    TerminalMode.GLYPH_FALLBACK: GlyphArtRenderer,
}


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (spinner around the profile fetch)."""

    fetch_started: Callable[[], None] | None = None
    fetch_finished: Callable[[], None] | None = None


@dataclass
class FetchResult:
    """Output of a full pipeline invocation."""

    data: ProfileData
    mode: TerminalMode
    visual: RenderableVisual


async def fetch_profile_data(username: str, settings: AppSettings | None = None) -> ProfileData:
    """Fetch the profile, then the starred count.

    Raises `FetchFailed` when the profile is unavailable. The starred count
    never raises.
    """

    settings = settings or AppSettings()
    profile = await fetch_github_user(username=username, settings=settings)
    starred = await fetch_starred_count(username=username, settings=settings)
    return ProfileData(profile=profile, starred_count=starred)


def current_terminal_mode(
    settings: AppSettings | None = None,
    environ: Mapping[str, str] | None = None,
) -> TerminalMode:
    settings = settings or AppSettings()
    return detect_terminal_mode(
        environ,
        variable=settings.terminal_env_var,
        marker=settings.inline_terminal_marker,
    )


def select_renderer(mode: TerminalMode, settings: AppSettings | None = None) -> AvatarRenderer:
    settings = settings or AppSettings()
    return _RENDERERS[mode](settings)


async def render_avatar(
    avatar_url: str,
    mode: TerminalMode,
    settings: AppSettings | None = None,
) -> RenderableVisual:
    """Render the avatar for `mode`; never raises (except on cancellation)."""

    renderer = select_renderer(mode, settings)
    return await best_effort(lambda: renderer.render(avatar_url))


async def run_fetch(
    username: str,
    settings: AppSettings | None = None,
    environ: Mapping[str, str] | None = None,
    hooks: PipelineHooks | None = None,
) -> FetchResult:
    """Whole pipeline without any printing.

    `hooks.fetch_started`/`fetch_finished` bracket the profile fetch only;
    `fetch_finished` runs even when the fetch raises `FetchFailed`.
    """

    settings = settings or AppSettings()
    hooks = hooks or PipelineHooks()
    if hooks.fetch_started:
        hooks.fetch_started()
    try:
        data = await fetch_profile_data(username, settings)
    finally:
        if hooks.fetch_finished:
            hooks.fetch_finished()
    mode = current_terminal_mode(settings, environ)
    visual = await render_avatar(data.profile.avatar_url, mode, settings)
    return FetchResult(data=data, mode=mode, visual=visual)
