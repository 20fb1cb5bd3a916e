"""Settings and user .env persistence."""

import sys

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir, write_user_env_vars
from core.domain.models import GitHubProfile

linux_only = pytest.mark.skipif(
    sys.platform.startswith("win") or sys.platform == "darwin",
    reason="XDG config dir",
)


def test_defaults(settings):
    assert settings.api_base_url == "https://api.github.com"
    assert settings.service_domain == "github.com"
    assert settings.terminal_env_var == "TERM"
    assert settings.inline_terminal_marker == "kitty"
    assert settings.icat_executable == "kitten"
    assert settings.icat_placement == "24x12@2x1"
    assert settings.glyph_max_width == 10
    assert settings.layout_left_width == 30
    assert settings.github_token is None


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("GITHUBFETCH_GLYPH_MAX_WIDTH", "6")
    monkeypatch.setenv("GITHUBFETCH_GITHUB_TOKEN", "abc")

    settings = AppSettings(_env_file=None)

    assert settings.glyph_max_width == 6
    assert settings.github_token == "abc"


def test_invalid_placement_is_rejected():
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, icat_placement="big")


@linux_only
def test_write_user_env_vars_merges(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "githubfetch"

    write_user_env_vars({"GITHUBFETCH_GITHUB_TOKEN": "one", "GITHUBFETCH_HTTP_TIMEOUT_SECONDS": "5"})
    path = write_user_env_vars({"GITHUBFETCH_GITHUB_TOKEN": "two"})

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert "GITHUBFETCH_GITHUB_TOKEN=two" in lines
    assert "GITHUBFETCH_HTTP_TIMEOUT_SECONDS=5" in lines


def test_profile_is_immutable(user_payload):
    profile = GitHubProfile.model_validate(user_payload)

    with pytest.raises(ValidationError):
        profile.login = "someone-else"


def test_profile_ignores_unknown_fields(user_payload):
    profile = GitHubProfile.model_validate({**user_payload, "site_admin": False})

    assert not hasattr(profile, "site_admin")
