"""Output utilities for CLI commands with clear intent.

user_output() is for diagnostics and prompts (stderr); machine_output() is
for results other programs may consume (stdout).
"""

import click


def user_output(message: str = "") -> None:
    """Write a message intended for the person at the terminal to stderr."""
    click.echo(message, err=True)


def machine_output(message: str) -> None:
    """Write a result to stdout."""
    click.echo(message)
