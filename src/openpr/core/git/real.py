"""Production Git implementation using subprocess."""

from openpr.core.git.abc import Git
from openpr.core.subprocess import CommandResult, run_command


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via run_command().
    """

    def get_current_branch(self) -> str | None:
        """Get the currently checked-out branch."""
        result = run_command(
            ["git", "rev-parse", "--abbrev-ref", "HEAD"],
            operation_context="resolve current branch",
            error_on_stderr=True,
        )
        branch = result.stdout.strip()
        if branch == "HEAD" or not branch:
            return None
        return branch

    def list_local_branches(self) -> str:
        """List local branches."""
        result = run_command(
            ["git", "branch"],
            operation_context="list local branches",
            error_on_stderr=True,
        )
        return result.stdout

    def get_commit_log(self, target_branch: str, current_branch: str) -> str:
        """Get the one-line log of commits unique to current_branch."""
        result = run_command(
            ["git", "log", "--oneline", f"{target_branch.strip()}..{current_branch.strip()}"],
            operation_context=f"list commits between {target_branch} and {current_branch}",
            error_on_stderr=True,
        )
        return result.stdout

    def push_upstream(self, remote: str, branch: str) -> CommandResult:
        """Push branch with `git push -u`."""
        return run_command(
            ["git", "push", "-u", remote, branch],
            operation_context=f"push branch '{branch}' to '{remote}'",
            error_on_stderr=False,
        )
