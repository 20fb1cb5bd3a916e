"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- This module is the only place that writes the profile to stdout.
"""

from __future__ import annotations

from rich.color import Color
from rich.console import Console, Group, RenderableType
from rich.padding import Padding
from rich.style import Style
from rich.table import Table
from rich.text import Text

from core.domain.models import ProfileData
from core.domain.visuals import GlyphArt, RenderableVisual

BIO_PLACEHOLDER = "N/A"
LOCATION_PLACEHOLDER = "Not Provided"


def glyph_art_text(art: GlyphArt) -> Text:
    """Turn a glyph grid into styled Rich text, one line per row."""

    text = Text(no_wrap=True, overflow="crop")
    for index, row in enumerate(art.cells):
        if index:
            text.append("\n")
        for cell in row:
            style = Style(
                color=Color.from_rgb(*cell.fg),
                bgcolor=Color.from_rgb(*cell.bg) if cell.bg is not None else None,
            )
            text.append(cell.glyph, style=style)
    return text


def visual_renderable(visual: RenderableVisual) -> RenderableType:
    """Left-column content; empty for placeholders and failed renders."""

    if isinstance(visual, GlyphArt):
        return glyph_art_text(visual)
    return Text("")


def build_details_table(data: ProfileData) -> Table:
    """Label/value rows in their fixed order."""

    profile = data.profile
    table = Table.grid(padding=(0, 1))
    table.add_column(no_wrap=True)
    table.add_column()

    table.add_row("[blue]Username:[/]", Text(profile.login, style="bold"))
    table.add_row("[yellow]Repos:[/]", Text(str(profile.public_repos)))
    table.add_row("[green]Bio:[/]", Text(profile.bio if profile.bio is not None else BIO_PLACEHOLDER))
    table.add_row(
        "[red]From:[/]",
        Text(profile.location if profile.location is not None else LOCATION_PLACEHOLDER),
    )
    table.add_row("[red]Followers:[/]", Text(str(profile.followers)))
    table.add_row("[blue]Following:[/]", Text(str(profile.following)))
    table.add_row("[yellow]Starred repos:[/]", Text(str(data.starred_count)))
    return table


def build_profile_layout(
    data: ProfileData,
    visual: RenderableVisual,
    *,
    left_width: int = 30,
    service_domain: str = "github.com",
) -> Table:
    """Two-column grid: avatar on the left, header and details on the right."""

    header = f"{data.profile.login}@{service_domain}"
    content = Group(
        Text(header),
        Text("-" * len(header)),
        build_details_table(data),
    )

    layout = Table.grid(expand=True)
    layout.add_column(width=left_width, no_wrap=True)
    # Only the right column absorbs the extra width.
    layout.add_column(ratio=1)
    layout.add_row(visual_renderable(visual), Padding(content, (0, 0, 0, 1)))
    return layout


def render_profile(
    console: Console,
    data: ProfileData,
    visual: RenderableVisual,
    *,
    left_width: int = 30,
    service_domain: str = "github.com",
    blank_lines_after: int = 3,
) -> None:
    console.line()
    console.print(
        build_profile_layout(data, visual, left_width=left_width, service_domain=service_domain)
    )
    console.line(blank_lines_after)


def print_fetch_error(console: Console, username: str, *, reason: str | None = None) -> None:
    """Fatal message shown when the profile could not be retrieved."""

    message = Text(f"Failed to get data for user '{username}'.", style="red")
    if reason:
        message.append(f" ({reason})", style="dim")
    console.print(message)
