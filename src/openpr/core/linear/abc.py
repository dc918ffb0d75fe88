"""Abstract base class for Linear issue tracker operations."""

from abc import ABC, abstractmethod
from typing import Literal

from openpr.core.linear.types import LinearIssue

LinearErrorReason = Literal["missing_credentials", "request_failed", "bad_response"]


class LinearError(RuntimeError):
    """Raised when a ticket cannot be fetched from Linear."""

    def __init__(self, message: str, *, reason: LinearErrorReason) -> None:
        super().__init__(message)
        self.reason = reason


class Linear(ABC):
    """Abstract interface for Linear operations.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def get_issue(self, issue_id: str) -> LinearIssue:
        """Fetch title, description and URL for one issue.

        Args:
            issue_id: Issue identifier (e.g. "DIT-123")

        Returns:
            LinearIssue with description normalized to a string

        Raises:
            LinearError: If the credential is missing, the request fails,
                or the response cannot be parsed
        """
