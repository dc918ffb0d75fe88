"""Preflight checks for the external tools openpr drives."""

import shutil

import click

from openpr.cli.output import user_output

REQUIRED_TOOLS = {
    "git": "Install git: https://git-scm.com/downloads",
    "gh": "Install GitHub CLI: https://cli.github.com/\n\nThen authenticate with: gh auth login",
}


def missing_tools() -> list[str]:
    """Names of required tools not found on PATH."""
    return [tool for tool in REQUIRED_TOOLS if shutil.which(tool) is None]


def ensure_tools_installed() -> None:
    """Exit with a styled error if git or gh is not on PATH.

    Raises:
        SystemExit: If a required tool is missing (with exit code 1)
    """
    missing = missing_tools()
    if not missing:
        return
    for tool in missing:
        user_output(
            click.style("Error: ", fg="red")
            + f"'{tool}' is not installed or not on PATH\n\n"
            + REQUIRED_TOOLS[tool]
        )
    raise SystemExit(1)
