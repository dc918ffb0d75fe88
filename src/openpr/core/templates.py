"""PR title and body templates.

Every template starts with an HTML comment line telling the user what the
file is for. The edit round-trip removes that first line again with
strip_instruction_line().
"""

from collections.abc import Sequence

from openpr.core.commits import Commit
from openpr.core.linear.types import LinearIssue

TITLE_INSTRUCTION = (
    "<!--- The title of your pull request. Save and close this file to continue. --->"
)
BODY_INSTRUCTION = (
    "<!--- The body of your pull request. Save and close this file to continue. --->"
)


def render_overview(commits: Sequence[Commit]) -> str:
    """One `- <message>` bullet per commit, in order, without a trailing newline."""
    return "\n".join(f"- {commit.message}" for commit in commits)


def render_context(ticket: LinearIssue | None) -> str:
    """Ticket URL and description separated by a blank line; "" without a ticket."""
    if ticket is None:
        return ""
    return f"{ticket.url}\n\n{ticket.description}"


def render_title(ticket: LinearIssue | None, ticket_id: str | None) -> str:
    """Title draft: `[<id>] <ticket title>`, or an empty title line without a ticket."""
    if ticket is None or ticket_id is None:
        return f"{TITLE_INSTRUCTION}\n"
    return f"{TITLE_INSTRUCTION}\n[{ticket_id}] {ticket.title}"


def render_body(overview: str, context: str) -> str:
    """Body draft with Overview, Context, Screenshots and Test Plan sections."""
    return (
        f"{BODY_INSTRUCTION}\n"
        f"## Overview\n"
        f"{overview}\n"
        f"\n"
        f"## Context\n"
        f"{context}\n"
        f"\n"
        f"## Screenshots\n"
        f"\n"
        f"## Test Plan\n"
        f"\n"
    )


def strip_instruction_line(text: str) -> str:
    """Drop the first line of an edited draft and return the rest unchanged."""
    _, _, rest = text.partition("\n")
    return rest
