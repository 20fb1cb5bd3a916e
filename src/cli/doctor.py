"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
import shutil

import typer
from PIL import features
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, write_user_env_vars
from core.domain.terminal import TerminalMode
from core.services.fetch_pipeline import current_terminal_mode

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or type(exc).__name__


def _check_decoders() -> tuple[bool, str]:
    """Avatars are PNG or JPEG; report whether Pillow can decode them."""

    missing = [name for name in ("jpg", "zlib") if not features.check(name)]
    if missing:
        return False, "missing: " + ", ".join(missing)
    return True, "JPEG/PNG"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="githubfetch Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if settings.github_token:
        table.add_row("GitHub token", "OK", "Authenticated requests")
    else:
        table.add_row("GitHub token", "OPTIONAL", "No token set -> 60 requests/hour limit")
    table.add_row("API base_url", "OK", settings.api_base_url)

    # Terminal
    mode = current_terminal_mode(settings)
    table.add_row("Terminal mode", "OK", mode.label())

    helper = shutil.which(settings.icat_executable)
    if mode is TerminalMode.INLINE_CAPABLE:
        table.add_row("Image helper", "OK" if helper else "FAIL", helper or f"{settings.icat_executable} not on PATH")
    else:
        table.add_row("Image helper", "SKIPPED", "Not needed for character art")

    ok_img, detail_img = _check_decoders()
    table.add_row("Pillow decoders", "OK" if ok_img else "FAIL", detail_img)

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings.api_base_url, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if mode is TerminalMode.INLINE_CAPABLE and not helper:
        _console.print(
            "\n[yellow]Note:[/yellow] Without the image helper the avatar column stays empty."
        )


@app.command(name="set-token")
def set_token() -> None:
    """Store a GitHub token in the user config .env."""

    token = typer.prompt("GitHub token", hide_input=True, confirmation_prompt=False).strip()
    if not token:
        raise typer.BadParameter("token is required")

    env_path = write_user_env_vars({"GITHUBFETCH_GITHUB_TOKEN": token})

    _console.print(f"[green]Saved token to:[/green] {env_path}")
