"""Fake GitHub operations for testing.

FakeGitHub is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from openpr.core.github.abc import GitHub
from openpr.core.subprocess import CommandError


class FakeGitHub(GitHub):
    """In-memory fake implementation of GitHub operations."""

    def __init__(
        self,
        *,
        pr_url: str = "https://github.com/owner/repo/pull/1",
        create_pr_stderr: str | None = None,
        org_members: str = "",
        org_members_error: str | None = None,
    ) -> None:
        """Create FakeGitHub with pre-configured state.

        Args:
            pr_url: URL returned from create_pr
            create_pr_stderr: If set, create_pr raises CommandError with this stderr
            org_members: Literal member listing output (one login per line)
            org_members_error: If set, list_org_members raises CommandError with this stderr
        """
        self._pr_url = pr_url
        self._create_pr_stderr = create_pr_stderr
        self._org_members = org_members
        self._org_members_error = org_members_error
        self._created_prs: list[tuple[str, str, str, str | None]] = []
        self._list_org_members_calls: list[str | None] = []

    @property
    def created_prs(self) -> list[tuple[str, str, str, str | None]]:
        """Read-only access to (title, body, base, reviewers) tuples passed to create_pr()."""
        return self._created_prs

    @property
    def list_org_members_calls(self) -> list[str | None]:
        """Read-only access to org arguments passed to list_org_members()."""
        return self._list_org_members_calls

    def create_pr(self, title: str, body: str, base: str, reviewers: str | None) -> str:
        self._created_prs.append((title, body, base, reviewers))
        if self._create_pr_stderr is not None:
            raise CommandError(
                "Failed to create PR",
                cmd=["gh", "pr", "create"],
                stderr=self._create_pr_stderr,
            )
        return self._pr_url

    def list_org_members(self, org: str | None) -> str:
        self._list_org_members_calls.append(org)
        if self._org_members_error is not None:
            raise CommandError(
                "Failed to list organization members",
                cmd=["gh", "api", "orgs/{owner}/members"],
                stderr=self._org_members_error,
            )
        return self._org_members
