"""Inline avatar for kitty-family terminals.

The image is drawn by the external `kitten icat` helper, which writes its
escape sequences straight to the terminal. Nothing goes through the Rich
console, so the visual handed to the layout is always a placeholder.
"""

from __future__ import annotations

import asyncio
import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from adapters.http_client import fetch_bytes
from core.config import AppSettings
from core.domain.visuals import InlineImagePlaceholder

logger = logging.getLogger(__name__)


@contextmanager
def temporary_image_file(data: bytes, *, suffix: str = ".img") -> Iterator[Path]:
    """Write `data` to a uniquely named temp file and remove it on exit.

    The file is removed on every exit path, including exceptions and task
    cancellation raised inside the `with` block.
    """

    fd, name = tempfile.mkstemp(prefix="githubfetch-", suffix=suffix)
    path = Path(name)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        yield path
    finally:
        path.unlink(missing_ok=True)


def build_icat_command(path: Path, settings: AppSettings) -> list[str]:
    return [
        settings.icat_executable,
        "icat",
        "--align",
        settings.icat_align,
        "--place",
        settings.icat_placement,
        str(path),
    ]


async def run_helper(argv: list[str]) -> int:
    """Run the display helper and wait for it to exit.

    If the awaiting task is cancelled the helper is killed before the
    cancellation propagates.
    """

    proc = await asyncio.create_subprocess_exec(*argv)
    try:
        return await proc.wait()
    except asyncio.CancelledError:
        if proc.returncode is None:
            proc.kill()
            await proc.wait()
        raise


class KittyInlineRenderer:
    """Draws the avatar through the terminal's own image protocol."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    async def render(self, url: str) -> InlineImagePlaceholder:
        data = await fetch_bytes(url, settings=self._settings)
        with temporary_image_file(data) as path:
            argv = build_icat_command(path, self._settings)
            returncode = await run_helper(argv)
        if returncode != 0:
            logger.debug("%s exited with status %s", argv[0], returncode)
        return InlineImagePlaceholder()
