"""Reviewer candidate listing and selection."""

import logging
from dataclasses import dataclass
from typing import Literal

from openpr.core.github.abc import GitHub
from openpr.core.prompt.abc import Prompter
from openpr.core.subprocess import CommandError

logger = logging.getLogger(__name__)

SelectionOutcome = Literal["selected", "skipped", "none_available", "cancelled", "unavailable"]


@dataclass(frozen=True)
class ReviewerSelection:
    """Reviewers picked for the PR and how the picker ended."""

    reviewers: tuple[str, ...]
    outcome: SelectionOutcome

    @property
    def reviewer_argument(self) -> str | None:
        """Comma-separated logins for `gh pr create --reviewer`, or None if empty."""
        if not self.reviewers:
            return None
        return ",".join(self.reviewers)


def parse_candidates(members_output: str) -> list[str]:
    """Split the member listing on whitespace into logins."""
    return members_output.split()


def select_reviewers(github: GitHub, prompter: Prompter, org: str | None) -> ReviewerSelection:
    """Fetch candidates once and let the user pick from them.

    An empty candidate list skips the picker. A failed member listing is
    reported as "unavailable" rather than aborting the run.
    """
    try:
        candidates = parse_candidates(github.list_org_members(org))
    except CommandError as e:
        logger.debug("Member listing failed: %s", e.stderr.strip())
        return ReviewerSelection(reviewers=(), outcome="unavailable")

    if not candidates:
        return ReviewerSelection(reviewers=(), outcome="none_available")

    chosen = prompter.select_many("Select reviewers:", candidates)
    if chosen is None:
        return ReviewerSelection(reviewers=(), outcome="cancelled")
    return ReviewerSelection(reviewers=tuple(chosen), outcome="selected")
