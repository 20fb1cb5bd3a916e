"""What occupies the avatar column.

A closed set of variants. Renderers produce exactly one per run and the
layout consumes it without knowing which renderer built it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class EmptyVisual:
    """Rendering failed; the column stays blank."""

    kind: Literal["empty"] = field(default="empty", init=False)


@dataclass(frozen=True)
class InlineImagePlaceholder:
    """The image was drawn out of band by the terminal itself.

    Nothing is printed for it, but the layout keeps the column width so the
    externally drawn image lands in the right slot.
    """

    kind: Literal["inline"] = field(default="inline", init=False)


@dataclass(frozen=True)
class GlyphCell:
    """One terminal cell: a glyph with a foreground and optional background."""

    glyph: str
    fg: RGB
    bg: RGB | None = None


@dataclass(frozen=True)
class GlyphArt:
    """Rectangular grid of cells approximating an image."""

    width: int
    height: int
    cells: tuple[tuple[GlyphCell, ...], ...]
    kind: Literal["glyph"] = field(default="glyph", init=False)

    def __post_init__(self) -> None:
        if len(self.cells) != self.height:
            raise ValueError(f"expected {self.height} rows, got {len(self.cells)}")
        for row in self.cells:
            if len(row) != self.width:
                raise ValueError(f"expected rows of {self.width} cells, got {len(row)}")


RenderableVisual = Union[EmptyVisual, InlineImagePlaceholder, GlyphArt]
