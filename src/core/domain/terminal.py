"""Terminal rendering modes.

Kept in the domain layer so the capability detector, the pipeline and the
doctor command share one definition without importing renderers.
"""

from __future__ import annotations

from enum import Enum


class TerminalMode(str, Enum):
    """How the avatar can be shown in the current terminal."""

    INLINE_CAPABLE = "inline"
    GLYPH_FALLBACK = "glyph"

    def label(self) -> str:
        """Human readable label for diagnostics."""

        if self is TerminalMode.INLINE_CAPABLE:
            return "Inline image (kitty graphics)"
        return "Character art"
