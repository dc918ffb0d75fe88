"""Abstract base class for GitHub operations."""

from abc import ABC, abstractmethod


class GitHub(ABC):
    """Abstract interface for GitHub operations.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def create_pr(self, title: str, body: str, base: str, reviewers: str | None) -> str:
        """Create a pull request for the current branch.

        Args:
            title: PR title
            body: PR body (Markdown)
            base: Base branch to merge into
            reviewers: Comma-separated reviewer logins, or None for no reviewers

        Returns:
            URL of the created PR, trimmed

        Raises:
            CommandError: If gh fails or writes anything to stderr
        """

    @abstractmethod
    def list_org_members(self, org: str | None) -> str:
        """List organization member logins, whitespace separated.

        Args:
            org: Organization name, or None for the owner of the current repository

        Raises:
            CommandError: If gh fails
        """
