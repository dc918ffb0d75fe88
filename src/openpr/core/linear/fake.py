"""Fake Linear operations for testing."""

from openpr.core.linear.abc import Linear, LinearError, LinearErrorReason
from openpr.core.linear.types import LinearIssue


class FakeLinear(Linear):
    """In-memory fake implementation of Linear operations."""

    def __init__(
        self,
        *,
        issues: dict[str, LinearIssue] | None = None,
        error_reason: LinearErrorReason | None = None,
    ) -> None:
        """Create FakeLinear with pre-configured issues.

        Args:
            issues: Mapping of issue id -> LinearIssue
            error_reason: If set, every get_issue call raises LinearError with this reason
        """
        self._issues = issues or {}
        self._error_reason = error_reason
        self._requested_ids: list[str] = []

    @property
    def requested_ids(self) -> list[str]:
        """Read-only access to issue ids passed to get_issue()."""
        return self._requested_ids

    def get_issue(self, issue_id: str) -> LinearIssue:
        self._requested_ids.append(issue_id)
        if self._error_reason is not None:
            raise LinearError(
                f"Linear lookup failed ({self._error_reason})", reason=self._error_reason
            )
        if issue_id not in self._issues:
            raise LinearError(
                f"Failed to parse issue tracker response: no issue {issue_id}",
                reason="bad_response",
            )
        return self._issues[issue_id]
