"""Fake Git operations for testing.

FakeGit is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from openpr.core.git.abc import Git
from openpr.core.subprocess import CommandError, CommandResult


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.
    """

    def __init__(
        self,
        *,
        current_branch: str | None = "feature",
        branch_listing: str = "* feature\n  main\n",
        commit_log: str = "",
        push_stderr: str = "",
        push_error: str | None = None,
        log_error: str | None = None,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            current_branch: Branch returned by get_current_branch (None = detached HEAD)
            branch_listing: Literal `git branch` output
            commit_log: Literal `git log --oneline` output (newest first)
            push_stderr: Informational stderr returned by a successful push
            push_error: If set, push_upstream raises CommandError with this stderr
            log_error: If set, get_commit_log raises CommandError with this stderr
        """
        self._current_branch = current_branch
        self._branch_listing = branch_listing
        self._commit_log = commit_log
        self._push_stderr = push_stderr
        self._push_error = push_error
        self._log_error = log_error
        self._log_calls: list[tuple[str, str]] = []
        self._pushed_branches: list[tuple[str, str]] = []

    @property
    def log_calls(self) -> list[tuple[str, str]]:
        """Read-only access to (target, current) pairs passed to get_commit_log()."""
        return self._log_calls

    @property
    def pushed_branches(self) -> list[tuple[str, str]]:
        """Read-only access to (remote, branch) pairs pushed."""
        return self._pushed_branches

    def get_current_branch(self) -> str | None:
        return self._current_branch

    def list_local_branches(self) -> str:
        return self._branch_listing

    def get_commit_log(self, target_branch: str, current_branch: str) -> str:
        self._log_calls.append((target_branch, current_branch))
        if self._log_error is not None:
            raise CommandError(
                f"Failed to list commits between {target_branch} and {current_branch}",
                cmd=["git", "log", "--oneline", f"{target_branch}..{current_branch}"],
                stderr=self._log_error,
            )
        return self._commit_log

    def push_upstream(self, remote: str, branch: str) -> CommandResult:
        if self._push_error is not None:
            raise CommandError(
                f"Failed to push branch '{branch}' to '{remote}'",
                cmd=["git", "push", "-u", remote, branch],
                stderr=self._push_error,
            )
        self._pushed_branches.append((remote, branch))
        return CommandResult(success=True, stdout="", stderr=self._push_stderr)
