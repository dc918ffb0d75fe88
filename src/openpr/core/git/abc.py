"""Abstract interface for the git operations openpr needs.

Architecture:
- Git: Abstract base class, one method per git command used
- RealGit: Production implementation using subprocess
- FakeGit: In-memory implementation returning canned command output

Methods return raw command output where the caller owns the parsing
(branch listing, commit log), so fakes can be seeded with literal git output.
"""

from abc import ABC, abstractmethod

from openpr.core.subprocess import CommandResult


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def get_current_branch(self) -> str | None:
        """Get the currently checked-out branch.

        Returns:
            Branch name, or None when HEAD is detached

        Raises:
            CommandError: If git fails
        """

    @abstractmethod
    def list_local_branches(self) -> str:
        """List local branches, one per line, as printed by `git branch`.

        Raises:
            CommandError: If git fails
        """

    @abstractmethod
    def get_commit_log(self, target_branch: str, current_branch: str) -> str:
        """Get the one-line log of commits in `target_branch..current_branch`.

        Output is git's native order (newest first), one `<hash> <message>` per line.

        Raises:
            CommandError: If git fails
        """

    @abstractmethod
    def push_upstream(self, remote: str, branch: str) -> CommandResult:
        """Push a branch and set its upstream.

        Informational stderr output does not fail the push.

        Raises:
            CommandError: If the push fails
        """
