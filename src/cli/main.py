"""githubfetch CLI (Typer).

Commands:
- `fetch USERNAME`: show a GitHub profile next to its avatar.
- `doctor ...`: environment diagnostics and configuration.
"""

from __future__ import annotations

import asyncio
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from cli import doctor
from cli.ui_components import print_fetch_error, render_profile
from core.config import AppSettings
from core.domain.errors import FetchFailed
from core.services.fetch_pipeline import PipelineHooks, run_fetch

app = typer.Typer(
    name="githubfetch",
    no_args_is_help=True,
    help="Fetch a GitHub profile and render it in the terminal.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


def configure_logging(verbose: bool) -> None:
    """Quiet by default; `--verbose` shows degraded failures on stderr."""

    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)


async def _fetch(username: str, settings: AppSettings, console: Console) -> int:
    # The spinner must be gone before the image helper draws.
    status = console.status("Fetching data from the GitHub API...")
    hooks = PipelineHooks(fetch_started=status.start, fetch_finished=status.stop)
    try:
        result = await run_fetch(username, settings, hooks=hooks)
    except FetchFailed as exc:
        print_fetch_error(console, username, reason=exc.reason)
        return 1

    render_profile(
        console,
        result.data,
        result.visual,
        left_width=settings.layout_left_width,
        service_domain=settings.service_domain,
    )
    return 0


@app.command()
def fetch(
    username: str = typer.Argument(..., metavar="USERNAME", help="Name of the GitHub user."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log degraded steps to stderr."),
) -> None:
    """Show a GitHub user's profile with their avatar."""

    configure_logging(verbose)
    settings = AppSettings()
    code = asyncio.run(_fetch(username, settings, _console))
    if code:
        raise typer.Exit(code=code)


def run() -> None:
    app()
