"""Terminal capability detection."""

from __future__ import annotations

import os
from typing import Mapping

from core.domain.terminal import TerminalMode


def detect_terminal_mode(
    environ: Mapping[str, str] | None = None,
    *,
    variable: str = "TERM",
    marker: str = "kitty",
) -> TerminalMode:
    """Classify the terminal from one environment variable.

    Unset, empty or unrecognized values all fall back to glyph art.
    """

    env = os.environ if environ is None else environ
    value = env.get(variable) or ""
    if marker.casefold() in value.casefold():
        return TerminalMode.INLINE_CAPABLE
    return TerminalMode.GLYPH_FALLBACK
