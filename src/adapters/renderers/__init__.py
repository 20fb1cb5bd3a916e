"""Avatar renderers (one per terminal mode).

Why a package:
- Groups the renderers by terminal capability.
- Each renderer implements `core.interfaces.renderer.AvatarRenderer`.
"""

from adapters.renderers.best_effort import best_effort
from adapters.renderers.glyph_art import GlyphArtRenderer, build_glyph_art
from adapters.renderers.inline_image import KittyInlineRenderer, temporary_image_file

__all__ = [
	"GlyphArtRenderer",
	"KittyInlineRenderer",
	"best_effort",
	"build_glyph_art",
	"temporary_image_file",
]
