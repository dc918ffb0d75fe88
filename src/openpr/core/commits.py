"""Branch and commit resolution.

Parses the raw output of `git branch` and `git log --oneline` into the
branch pair and commit list the rest of the pipeline works from.
"""

import re
from dataclasses import dataclass

COMMIT_LINE_PATTERN = re.compile(r"^(?P<hash>\w+) (?P<message>.+)$")

DEFAULT_BRANCH_CANDIDATES = ("main", "master")


class CommitParseError(ValueError):
    """Raised when a commit log line does not have the `<hash> <message>` shape."""


class TargetBranchError(ValueError):
    """Raised when no target branch was given and none could be inferred."""


@dataclass(frozen=True)
class Commit:
    """A single commit from the one-line log."""

    hash: str
    message: str


@dataclass(frozen=True)
class BranchPair:
    """The branch being proposed and the branch it merges into."""

    current: str
    target: str


def parse_commit_line(line: str) -> Commit:
    """Parse one `git log --oneline` line.

    Raises:
        CommitParseError: If the line is not `<hash> <message>`
    """
    match = COMMIT_LINE_PATTERN.match(line)
    if match is None:
        raise CommitParseError(f"Unexpected commit log line: {line!r}")
    return Commit(hash=match.group("hash"), message=match.group("message"))


def parse_commit_log(log_output: str) -> list[Commit]:
    """Parse one-line log output into commits, oldest first.

    git prints newest first, so the lines are reversed. Blank lines are skipped.
    """
    lines = [line for line in log_output.splitlines() if line.strip()]
    return [parse_commit_line(line) for line in reversed(lines)]


def parse_branch_listing(listing: str) -> list[str]:
    """Parse `git branch` output into branch names.

    The `*` (current) and `+` (checked out in another worktree) markers are dropped.
    """
    branches: list[str] = []
    for line in listing.splitlines():
        name = line.strip()
        if name[:2] in ("* ", "+ "):
            name = name[2:].strip()
        if name:
            branches.append(name)
    return branches


def infer_default_branch(listing: str) -> str | None:
    """Return `main` if it exists locally, else `master`, else None."""
    branches = parse_branch_listing(listing)
    for candidate in DEFAULT_BRANCH_CANDIDATES:
        if candidate in branches:
            return candidate
    return None


def resolve_target_branch(
    argument: str | None,
    configured: str | None,
    listing: str | None,
) -> str:
    """Pick the branch the PR merges into.

    Precedence: command-line argument, configured default, then inference
    from the local branch listing.

    Raises:
        TargetBranchError: If nothing was given and neither main nor master exists
    """
    if argument:
        return argument.strip()
    if configured:
        return configured.strip()

    inferred = infer_default_branch(listing or "")
    if inferred is None:
        raise TargetBranchError(
            "Failed to determine default branch: no 'main' or 'master' branch found. "
            "Pass the target branch as an argument."
        )
    return inferred
