"""Rich rendering of the finalized PR draft shown before publishing."""

from rich.console import Group
from rich.markdown import Markdown
from rich.panel import Panel
from rich.text import Text


def render_draft_summary(
    *,
    title: str,
    body: str,
    current_branch: str,
    target_branch: str,
    reviewers: tuple[str, ...],
) -> Panel:
    """Build a panel summarizing the PR about to be opened."""
    header_lines = [
        Text(f"{current_branch} → {target_branch}", style="bold"),
        Text(f"Reviewers: {', '.join(reviewers) if reviewers else 'none'}", style="dim"),
        Text(""),
    ]
    content = Group(*header_lines, Markdown(body))
    return Panel(content, title=Text(title), border_style="blue", padding=(1, 2))
