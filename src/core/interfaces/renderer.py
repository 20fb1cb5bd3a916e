"""Avatar renderer contract.

Why Protocol:
- A structural contract (duck typing) without rigid inheritance.
- Renderers for each terminal mode stay interchangeable and testable
  without coupling the Core to Pillow or subprocesses.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.visuals import RenderableVisual


@runtime_checkable
class AvatarRenderer(Protocol):
    """Minimal contract for turning an avatar URL into the left-column visual.

    Design rules:
    - `render` is async because it does I/O (HTTP, subprocess).
    - It may raise; the pipeline wraps every call in `best_effort`.
    """

    async def render(self, url: str) -> RenderableVisual:
        """Download the image at `url` and return the visual for the layout."""

        ...
