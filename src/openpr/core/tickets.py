"""Ticket reference resolution from branch names."""

import re

from openpr.core.linear.abc import Linear
from openpr.core.linear.types import LinearIssue

ANY_PREFIX = r"[a-z]+"


def ticket_pattern(prefix: str | None = None) -> re.Pattern[str]:
    """Build the ticket id pattern: `<prefix>-<3 to 5 digits>`, case-insensitive."""
    prefix_pattern = re.escape(prefix) if prefix else ANY_PREFIX
    return re.compile(rf"(?P<ticket_id>{prefix_pattern}-\d{{3,5}})", re.IGNORECASE)


def extract_ticket_id(branch_name: str, prefix: str | None = None) -> str | None:
    """Find the first ticket id in a branch name.

    Examples:
        "feature/dit-123-login" -> "DIT-123"
        "fix-typo" -> None

    Args:
        branch_name: Branch to search
        prefix: Project prefix to require (e.g. "DIT"); any letters when None

    Returns:
        The uppercased ticket id, or None if the branch has none
    """
    match = ticket_pattern(prefix).search(branch_name)
    if match is None:
        return None
    return match.group("ticket_id").upper()


def fetch_ticket(linear: Linear, ticket_id: str | None) -> LinearIssue | None:
    """Fetch ticket metadata, or return None without a request when there is no id.

    Raises:
        LinearError: If the lookup fails
    """
    if ticket_id is None:
        return None
    return linear.get_issue(ticket_id)
