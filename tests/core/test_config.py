"""Tests for configuration loading."""

from pathlib import Path

import pytest

from openpr.core.config import (
    ConfigError,
    OpenPrConfig,
    default_config_path,
    load_config,
    read_config_file,
)
from openpr.core.linear.real import LINEAR_API_URL


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    config = load_config({}, tmp_path / "absent.toml")

    assert config == OpenPrConfig()
    assert config.remote == "origin"
    assert config.linear_api_url == LINEAR_API_URL


def test_file_values_and_environment(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text(
        'remote = "upstream"\n'
        'github_org = "acme"\n'
        'ticket_prefix = "DIT"\n'
        'default_target = "develop"\n'
        "unrelated = 3\n",
        encoding="utf-8",
    )

    config = load_config({"LINEAR_API_KEY": "lin_api_x", "EDITOR": "nano"}, path)

    assert config == OpenPrConfig(
        linear_api_key="lin_api_x",
        editor="nano",
        remote="upstream",
        github_org="acme",
        ticket_prefix="DIT",
        default_target="develop",
    )


@pytest.mark.parametrize(
    ("file_editor", "environ", "expected"),
    [
        ("code --wait", {"VISUAL": "vim", "EDITOR": "nano"}, "code --wait"),
        (None, {"VISUAL": "vim", "EDITOR": "nano"}, "vim"),
        (None, {"EDITOR": "nano"}, "nano"),
        (None, {}, None),
    ],
)
def test_editor_precedence(
    tmp_path: Path, file_editor: str | None, environ: dict[str, str], expected: str | None
) -> None:
    path = tmp_path / "config.toml"
    path.write_text(f'editor = "{file_editor}"\n' if file_editor else "", encoding="utf-8")

    assert load_config(environ, path).editor == expected


def test_empty_api_key_is_unset(tmp_path: Path) -> None:
    assert load_config({"LINEAR_API_KEY": ""}, tmp_path / "absent.toml").linear_api_key is None


def test_invalid_toml(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("remote = \n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid config file"):
        read_config_file(path)


def test_non_string_value(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("remote = 1\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="'remote'"):
        read_config_file(path)


def test_config_path_override() -> None:
    assert default_config_path({"OPENPR_CONFIG": "/etc/openpr.toml"}) == Path("/etc/openpr.toml")
    assert default_config_path({}) == Path.home() / ".openpr" / "config.toml"


def test_directory_path(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.mkdir()

    with pytest.raises(ConfigError, match="Could not read config file"):
        read_config_file(path)


def test_non_utf8_file(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_bytes(b'remote = "caf\xe9"\n')

    with pytest.raises(ConfigError, match="Could not read config file"):
        read_config_file(path)
