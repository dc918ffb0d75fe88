"""Tests for run_command() stderr policy with mocked subprocess."""

import logging
from unittest.mock import Mock, patch

import pytest

from openpr.core.subprocess import CommandError, run_command


def _completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> Mock:
    result = Mock()
    result.returncode = returncode
    result.stdout = stdout
    result.stderr = stderr
    return result


@patch("openpr.core.subprocess.subprocess.run")
def test_returns_stdout_when_stderr_empty(mock_run: Mock) -> None:
    mock_run.return_value = _completed(stdout="main\n")

    result = run_command(
        ["git", "rev-parse", "--abbrev-ref", "HEAD"],
        operation_context="resolve current branch",
        error_on_stderr=True,
    )

    assert result.success is True
    assert result.stdout == "main\n"
    assert mock_run.call_args[0][0] == ["git", "rev-parse", "--abbrev-ref", "HEAD"]
    assert mock_run.call_args.kwargs["capture_output"] is True
    assert mock_run.call_args.kwargs["text"] is True


@patch("openpr.core.subprocess.subprocess.run")
def test_stderr_is_fatal_when_strict(mock_run: Mock) -> None:
    mock_run.return_value = _completed(stdout="", stderr="pull request create failed\n")

    with pytest.raises(CommandError) as exc_info:
        run_command(["gh", "pr", "create"], operation_context="create PR", error_on_stderr=True)

    assert exc_info.value.stderr == "pull request create failed\n"
    assert "Failed to create PR" in str(exc_info.value)


@patch("openpr.core.subprocess.subprocess.run")
def test_stderr_is_logged_when_lenient(mock_run: Mock, caplog: pytest.LogCaptureFixture) -> None:
    mock_run.return_value = _completed(stdout="", stderr="Everything up-to-date\n")

    with caplog.at_level(logging.WARNING, logger="openpr.core.subprocess"):
        result = run_command(
            ["git", "push", "-u", "origin", "feature"],
            operation_context="push branch",
            error_on_stderr=False,
        )

    assert result.success is True
    assert result.stderr == "Everything up-to-date\n"
    assert "Everything up-to-date" in caplog.text


@patch("openpr.core.subprocess.subprocess.run")
def test_nonzero_exit_fails_even_when_lenient(mock_run: Mock) -> None:
    mock_run.return_value = _completed(returncode=1, stderr="! [rejected] feature -> feature\n")

    with pytest.raises(CommandError) as exc_info:
        run_command(
            ["git", "push", "-u", "origin", "feature"],
            operation_context="push branch",
            error_on_stderr=False,
        )

    message = str(exc_info.value)
    assert "Exit code: 1" in message
    assert "[rejected]" in message


@patch("openpr.core.subprocess.subprocess.run")
def test_missing_binary_is_command_error(mock_run: Mock) -> None:
    mock_run.side_effect = FileNotFoundError("gh")

    with pytest.raises(CommandError) as exc_info:
        run_command(["gh", "pr", "create"], operation_context="create PR", error_on_stderr=True)

    assert "Command not found while trying to create PR: gh" in str(exc_info.value)


@patch("openpr.core.subprocess.subprocess.run")
def test_unrunnable_binary_is_command_error(mock_run: Mock) -> None:
    mock_run.side_effect = PermissionError(13, "Permission denied")

    with pytest.raises(CommandError) as exc_info:
        run_command(
            ["git", "branch"], operation_context="list local branches", error_on_stderr=True
        )

    assert "Could not run git while trying to list local branches" in str(exc_info.value)


@patch("openpr.core.subprocess.subprocess.run")
def test_undecodable_output_is_replaced(mock_run: Mock) -> None:
    mock_run.return_value = _completed(stdout="abc1 Caf� fix\n")

    result = run_command(
        ["git", "log", "--oneline", "main..feature"],
        operation_context="list commits",
        error_on_stderr=True,
    )

    assert result.stdout == "abc1 Caf� fix\n"
    assert mock_run.call_args.kwargs["encoding"] == "utf-8"
    assert mock_run.call_args.kwargs["errors"] == "replace"
