"""Subprocess execution for the git and gh command-line tools.

Every external command openpr runs goes through run_command(), which applies
a single stderr policy:

- error_on_stderr=True: any stderr output is a failure (CommandError)
- error_on_stderr=False: stderr is logged as a warning and stdout is returned

Output is decoded as UTF-8; undecodable bytes become U+FFFD.

Some commands (e.g. pushing a branch that is already up to date) write
informational text to stderr, so callers choose the policy per command.
"""

import logging
import subprocess
from collections.abc import Sequence
from typing import NamedTuple

logger = logging.getLogger(__name__)


class CommandResult(NamedTuple):
    """Result from running a subprocess command.

    Attributes:
        success: True if command exited with code 0, False otherwise
        stdout: Standard output from the command
        stderr: Standard error from the command
    """

    success: bool
    stdout: str
    stderr: str


class CommandError(RuntimeError):
    """Raised when an external command fails or writes to stderr under a strict policy."""

    def __init__(self, message: str, *, cmd: Sequence[str], stderr: str) -> None:
        super().__init__(message)
        self.cmd = list(cmd)
        self.stderr = stderr


def run_command(
    cmd: Sequence[str],
    *,
    operation_context: str,
    error_on_stderr: bool,
) -> CommandResult:
    """Execute a command and return its captured output.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation (e.g. "push branch")
        error_on_stderr: If True, non-empty stderr raises CommandError.
            If False, stderr is logged as a warning and the result is returned.

    Returns:
        CommandResult with captured stdout and stderr

    Raises:
        CommandError: If the binary is missing or cannot be run, the command exits non-zero,
            or stderr is non-empty while error_on_stderr is True
    """
    cmd_str = " ".join(cmd)
    logger.debug("$ %s", cmd_str)

    try:
        result = subprocess.run(
            list(cmd),
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except FileNotFoundError as e:
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        raise CommandError(error_msg, cmd=cmd, stderr="") from e
    except OSError as e:
        error_msg = f"Could not run {cmd[0]} while trying to {operation_context}: {e}"
        raise CommandError(error_msg, cmd=cmd, stderr="") from e

    stderr = result.stderr or ""
    stdout = result.stdout or ""

    if result.returncode != 0:
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {cmd_str}"
        error_msg += f"\nExit code: {result.returncode}"
        if stderr.strip():
            error_msg += f"\nstderr: {stderr.strip()}"
        raise CommandError(error_msg, cmd=cmd, stderr=stderr)

    if stderr:
        if error_on_stderr:
            raise CommandError(f"Failed to {operation_context}", cmd=cmd, stderr=stderr)
        logger.warning("%s", stderr.rstrip())

    return CommandResult(success=True, stdout=stdout, stderr=stderr)
