"""Character-art avatar for terminals without an image protocol.

Process:
  1. Decode the image with Pillow (first frame, transparency on black).
  2. Downsample to at most `max_width` columns, keeping the aspect ratio.
  3. Pack two pixel rows into each text row with the upper half block:
     foreground = top pixel, background = bottom pixel.
"""

from __future__ import annotations

from io import BytesIO

from PIL import Image

from adapters.http_client import fetch_bytes
from core.config import AppSettings
from core.domain.visuals import GlyphArt, GlyphCell

UPPER_HALF_BLOCK = "▀"


def _flatten(image: Image.Image) -> Image.Image:
    """Return an RGB copy with any alpha composited onto black."""

    if image.mode in ("RGBA", "LA") or (image.mode == "P" and "transparency" in image.info):
        rgba = image.convert("RGBA")
        background = Image.new("RGBA", rgba.size, (0, 0, 0, 255))
        return Image.alpha_composite(background, rgba).convert("RGB")
    return image.convert("RGB")


def target_size(width: int, height: int, max_width: int) -> tuple[int, int]:
    """Pixel size after downsampling: width bounded, aspect ratio kept."""

    new_width = max(1, min(max_width, width))
    new_height = max(1, round(new_width * height / width))
    return new_width, new_height


def build_glyph_art(data: bytes, max_width: int = 10) -> GlyphArt:
    """Convert encoded image bytes into a `GlyphArt` no wider than `max_width`.

    Raises whatever Pillow raises for undecodable data.
    """

    if max_width < 1:
        raise ValueError("max_width must be >= 1")

    with Image.open(BytesIO(data)) as source:
        source.seek(0)
        image = _flatten(source)

    width, height = target_size(image.width, image.height, max_width)
    image = image.resize((width, height), Image.Resampling.BOX)
    pixels = image.load()

    rows: list[tuple[GlyphCell, ...]] = []
    for y in range(0, height, 2):
        row = []
        for x in range(width):
            top = pixels[x, y]
            bottom = pixels[x, y + 1] if y + 1 < height else None
            row.append(GlyphCell(UPPER_HALF_BLOCK, top, bottom))
        rows.append(tuple(row))

    return GlyphArt(width=width, height=len(rows), cells=tuple(rows))


class GlyphArtRenderer:
    """Renders the avatar as colored half-block characters."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    async def render(self, url: str) -> GlyphArt:
        data = await fetch_bytes(url, settings=self._settings)
        return build_glyph_art(data, max_width=self._settings.glyph_max_width)
