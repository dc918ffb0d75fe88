"""Production implementation of GitHub operations."""

from openpr.core.github.abc import GitHub
from openpr.core.subprocess import run_command


class RealGitHub(GitHub):
    """Production implementation using gh CLI.

    All GitHub operations execute actual gh commands via run_command().
    """

    def create_pr(self, title: str, body: str, base: str, reviewers: str | None) -> str:
        """Create a pull request with `gh pr create`."""
        cmd = ["gh", "pr", "create", "--title", title, "--body", body, "--base", base]
        if reviewers:
            cmd.extend(["--reviewer", reviewers])

        result = run_command(cmd, operation_context="create PR", error_on_stderr=True)
        return result.stdout.strip()

    def list_org_members(self, org: str | None) -> str:
        """List member logins with `gh api`.

        gh substitutes the `{owner}` placeholder with the current repository's owner.
        """
        org_path = org if org else "{owner}"
        result = run_command(
            ["gh", "api", f"orgs/{org_path}/members", "--paginate", "--jq", ".[].login"],
            operation_context="list organization members",
            error_on_stderr=True,
        )
        return result.stdout
