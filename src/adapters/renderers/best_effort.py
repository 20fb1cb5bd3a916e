"""Best-effort wrapper shared by every avatar renderer.

A missing avatar must never abort the command, so failures inside a
renderer collapse into `EmptyVisual` here, in one place.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from core.domain.visuals import EmptyVisual, RenderableVisual

logger = logging.getLogger(__name__)


async def best_effort(render: Callable[[], Awaitable[RenderableVisual]]) -> RenderableVisual:
    """Await `render()`; on any failure return `EmptyVisual`.

    `asyncio.CancelledError` is a `BaseException` and is left to propagate.
    """

    try:
        return await render()
    except Exception as exc:
        logger.debug("Avatar rendering degraded to empty: %s", exc, exc_info=True)
        return EmptyVisual()
