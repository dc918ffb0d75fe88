"""Configuration loading.

Provides immutable configuration resolved once at CLI entry from, in
increasing precedence:

1. built-in defaults
2. the TOML config file (~/.openpr/config.toml, or $OPENPR_CONFIG)
3. environment variables (LINEAR_API_KEY; VISUAL/EDITOR when no editor is configured)

Example config.toml:

    remote = "origin"
    github_org = "acme"
    ticket_prefix = "DIT"
    default_target = "develop"
    editor = "code --wait"
"""

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from openpr.core.linear.real import LINEAR_API_URL

CONFIG_PATH_ENV = "OPENPR_CONFIG"
LINEAR_API_KEY_ENV = "LINEAR_API_KEY"

_STRING_KEYS = (
    "linear_api_url",
    "editor",
    "remote",
    "github_org",
    "ticket_prefix",
    "default_target",
)


class ConfigError(ValueError):
    """Raised when the config file cannot be read or has invalid values."""


@dataclass(frozen=True)
class OpenPrConfig:
    """Immutable openpr configuration.

    Loaded once at CLI entry point and stored in OpenPrContext.
    """

    linear_api_key: str | None = None
    linear_api_url: str = LINEAR_API_URL
    editor: str | None = None
    remote: str = "origin"
    github_org: str | None = None
    ticket_prefix: str | None = None
    default_target: str | None = None


def default_config_path(environ: Mapping[str, str]) -> Path:
    """Config file location, honouring $OPENPR_CONFIG."""
    override = environ.get(CONFIG_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".openpr" / "config.toml"


def read_config_file(config_path: Path) -> dict[str, str]:
    """Read string settings from a TOML config file; a missing file yields {}.

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML, or a known key is not a string
    """
    if not config_path.exists():
        return {}

    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read config file {config_path}: {e}") from e

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}") from e

    settings: dict[str, str] = {}
    for key in _STRING_KEYS:
        if key not in data:
            continue
        value = data[key]
        if not isinstance(value, str):
            raise ConfigError(f"'{key}' in {config_path} must be a string")
        settings[key] = value
    return settings


def load_config(environ: Mapping[str, str], config_path: Path | None = None) -> OpenPrConfig:
    """Resolve configuration from the config file and environment.

    Args:
        environ: Environment mapping (os.environ at the entry point)
        config_path: Config file to read; defaults to default_config_path(environ)

    Raises:
        ConfigError: If the config file is malformed
    """
    path = config_path if config_path is not None else default_config_path(environ)
    settings = read_config_file(path)

    editor = settings.get("editor") or environ.get("VISUAL") or environ.get("EDITOR") or None

    return OpenPrConfig(
        linear_api_key=environ.get(LINEAR_API_KEY_ENV) or None,
        linear_api_url=settings.get("linear_api_url", LINEAR_API_URL),
        editor=editor,
        remote=settings.get("remote", "origin"),
        github_org=settings.get("github_org"),
        ticket_prefix=settings.get("ticket_prefix"),
        default_target=settings.get("default_target"),
    )
