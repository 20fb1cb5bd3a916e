"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets adapters (HTTP, renderers) read config consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "githubfetch"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "githubfetch"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "githubfetch"
    return Path.home() / ".config" / "githubfetch"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Write/update variables in the user's global .env."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        try:
            existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError):
            existing = {}

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# githubfetch user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application configuration.

    Why pydantic-settings:
    - Typed + validated at the edge (env vars) without leaking into the Core.
    - One configuration contract shared by CLI, adapters and renderers.
    """

    model_config = SettingsConfigDict(
        env_prefix="GITHUBFETCH_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="githubfetch/0.1 (+https://github.com)",
        min_length=1,
        description="User-Agent sent to GitHub (the API rejects requests without one).",
    )
    api_base_url: str = Field(
        default="https://api.github.com",
        min_length=8,
        description="Base URL of the GitHub REST API.",
    )
    service_domain: str = Field(
        default="github.com",
        min_length=1,
        description="Domain shown in the `<login>@<domain>` header.",
    )
    github_token: str | None = Field(
        default=None,
        description="Optional token; raises the unauthenticated rate limit.",
    )
    starred_page_size: int = Field(
        default=30,
        ge=1,
        le=100,
        description="`per_page` for the starred-repositories request.",
    )

    # Terminal capability / rendering
    terminal_env_var: str = Field(
        default="TERM",
        min_length=1,
        description="Environment variable inspected to detect the terminal family.",
    )
    inline_terminal_marker: str = Field(
        default="kitty",
        min_length=1,
        description="Case-insensitive substring marking inline-image capable terminals.",
    )
    icat_executable: str = Field(
        default="kitten",
        min_length=1,
        description="External helper that draws images inline.",
    )
    icat_placement: str = Field(
        default="24x12@2x1",
        pattern=r"^\d+x\d+@\d+x\d+$",
        description="Cell region `<cols>x<rows>@<left>x<top>` for the inline image.",
    )
    icat_align: str = Field(
        default="left",
        description="Horizontal alignment passed to the helper.",
    )
    glyph_max_width: int = Field(
        default=10,
        ge=1,
        le=30,
        description="Maximum width (cells) of the character-art avatar.",
    )
    layout_left_width: int = Field(
        default=30,
        ge=1,
        description="Fixed width (cells) of the avatar column.",
    )
