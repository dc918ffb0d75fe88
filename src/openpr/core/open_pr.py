"""Draft and publish a pull request for the current branch.

Pipeline (each stage blocks until complete):

1. Resolve current and target branch
2. Collect commits in target..current (stop here with nothing to do if none)
3. Resolve the Linear ticket named in the branch
4. Compose title and body drafts from templates
5. Round-trip each draft through the editor
6. Pick reviewers (skippable)
7. Confirm (skippable)
8. Push the branch upstream
9. Create the PR with gh

execute_open_pr() never exits the process. It returns OpenPrResult,
OpenPrSkipped or OpenPrError and leaves exit status to the caller.

Error Types:
    - no_branch: HEAD is detached or git could not resolve it
    - no_target_branch: No target given and neither main nor master exists
    - git_failed: A git query failed
    - malformed_commit_log: A log line was not `<hash> <message>`
    - missing_credentials: LINEAR_API_KEY is not set but the branch names a ticket
    - tracker_request_failed: The Linear request failed or returned non-2xx
    - tracker_bad_response: The Linear response could not be parsed
    - editor_failed: The editor could not be launched or read back
    - empty_title: The edited title is empty
    - push_failed: git push failed
    - pr_create_failed: gh pr create failed after the branch was pushed
"""

from dataclasses import dataclass, field
from typing import Literal

from openpr.cli.rendering import render_draft_summary
from openpr.core.commits import (
    BranchPair,
    Commit,
    CommitParseError,
    TargetBranchError,
    parse_commit_log,
    resolve_target_branch,
)
from openpr.core.context import OpenPrContext
from openpr.core.editor.abc import Editor, EditorError
from openpr.core.linear.abc import LinearError
from openpr.core.linear.types import LinearIssue
from openpr.core.reviewers import ReviewerSelection, select_reviewers
from openpr.core.subprocess import CommandError
from openpr.core.templates import (
    render_body,
    render_context,
    render_overview,
    render_title,
    strip_instruction_line,
)
from openpr.core.tickets import extract_ticket_id, fetch_ticket

OpenPrErrorType = Literal[
    "no_branch",
    "no_target_branch",
    "git_failed",
    "malformed_commit_log",
    "missing_credentials",
    "tracker_request_failed",
    "tracker_bad_response",
    "editor_failed",
    "empty_title",
    "push_failed",
    "pr_create_failed",
]

_LINEAR_ERROR_TYPES: dict[str, OpenPrErrorType] = {
    "missing_credentials": "missing_credentials",
    "request_failed": "tracker_request_failed",
    "bad_response": "tracker_bad_response",
}


@dataclass(frozen=True)
class OpenPrOptions:
    """Command-line choices for one run."""

    target_branch: str | None = None
    skip_confirmation: bool = False
    skip_reviewers: bool = False


@dataclass
class PrDraft:
    """Title and body, replaced field by field by the edit round-trip."""

    title: str
    body: str


@dataclass
class OpenPrResult:
    """Success result: the PR was created."""

    success: bool
    pr_url: str
    branch_name: str
    target_branch: str
    ticket_id: str | None
    reviewers: list[str]
    message: str


@dataclass
class OpenPrSkipped:
    """Clean exit without publishing (nothing to do, or the user declined)."""

    success: bool
    reason: Literal["no_commits", "declined"]
    message: str


@dataclass
class OpenPrError:
    """Error result from any stage."""

    success: bool
    error_type: OpenPrErrorType
    message: str
    details: dict[str, str] = field(default_factory=dict)


class _StageFailed(Exception):
    """Carries an OpenPrError out of a stage helper."""

    def __init__(self, error: OpenPrError) -> None:
        super().__init__(error.message)
        self.error = error


def _fail(error_type: OpenPrErrorType, message: str, **details: str) -> _StageFailed:
    return _StageFailed(
        OpenPrError(success=False, error_type=error_type, message=message, details=details)
    )


def resolve_branches(ctx: OpenPrContext, target_argument: str | None) -> BranchPair:
    """Resolve the current branch and the branch the PR targets."""
    try:
        current = ctx.git.get_current_branch()
    except CommandError as e:
        raise _fail("git_failed", str(e), stderr=e.stderr) from e
    if current is None:
        raise _fail("no_branch", "Could not determine current branch (is HEAD detached?)")

    listing: str | None = None
    if not target_argument and not ctx.config.default_target:
        try:
            listing = ctx.git.list_local_branches()
        except CommandError as e:
            raise _fail("git_failed", str(e), stderr=e.stderr) from e

    try:
        target = resolve_target_branch(target_argument, ctx.config.default_target, listing)
    except TargetBranchError as e:
        raise _fail("no_target_branch", str(e), branch_name=current) from e

    return BranchPair(current=current, target=target)


def collect_commits(ctx: OpenPrContext, branches: BranchPair) -> list[Commit]:
    """Commits in target..current, oldest first."""
    try:
        log_output = ctx.git.get_commit_log(branches.target, branches.current)
    except CommandError as e:
        raise _fail("git_failed", str(e), stderr=e.stderr) from e

    try:
        return parse_commit_log(log_output)
    except CommitParseError as e:
        raise _fail("malformed_commit_log", str(e)) from e


def resolve_ticket(ctx: OpenPrContext, branch_name: str) -> tuple[str | None, LinearIssue | None]:
    """Extract the ticket id from the branch and fetch its metadata."""
    ticket_id = extract_ticket_id(branch_name, ctx.config.ticket_prefix)
    try:
        ticket = fetch_ticket(ctx.linear, ticket_id)
    except LinearError as e:
        raise _fail(
            _LINEAR_ERROR_TYPES[e.reason], str(e), ticket_id=ticket_id or ""
        ) from e
    return ticket_id, ticket


def compose_drafts(
    commits: list[Commit], ticket: LinearIssue | None, ticket_id: str | None
) -> PrDraft:
    """Fill the title and body templates."""
    overview = render_overview(commits)
    context = render_context(ticket)
    return PrDraft(title=render_title(ticket, ticket_id), body=render_body(overview, context))


def edit_draft(editor: Editor, template: str) -> str:
    """Open a draft in the editor and return it without the instruction line.

    Raises:
        EditorError: If the editor fails
    """
    return strip_instruction_line(editor.edit(template))


def edit_drafts(ctx: OpenPrContext, draft: PrDraft) -> PrDraft:
    """Let the user edit the title, then the body."""
    try:
        draft.title = edit_draft(ctx.editor, draft.title).strip()
        draft.body = edit_draft(ctx.editor, draft.body)
    except EditorError as e:
        raise _fail("editor_failed", str(e)) from e

    if not draft.title:
        raise _fail("empty_title", "PR title is empty; nothing was pushed")
    return draft


def choose_reviewers(ctx: OpenPrContext) -> ReviewerSelection:
    """Pick reviewers and report how the picker ended."""
    ctx.feedback.info("Fetching reviewers..")
    selection = select_reviewers(ctx.github, ctx.prompter, ctx.config.github_org)
    if selection.outcome == "none_available":
        ctx.feedback.warning("No reviewers available.")
    elif selection.outcome == "unavailable":
        ctx.feedback.warning("Could not list organization members; continuing without reviewers.")
    elif selection.outcome == "cancelled":
        ctx.feedback.warning("Reviewer selection cancelled.")
    return selection


def publish(
    ctx: OpenPrContext, branches: BranchPair, draft: PrDraft, reviewers: str | None
) -> str:
    """Push the branch and create the PR. Returns the PR URL."""
    remote = ctx.config.remote

    ctx.feedback.info("Pushing branch upstream..")
    try:
        ctx.git.push_upstream(remote, branches.current)
    except CommandError as e:
        raise _fail("push_failed", str(e), branch_name=branches.current, stderr=e.stderr) from e

    ctx.feedback.info("Opening pull request..")
    try:
        return ctx.github.create_pr(draft.title, draft.body, branches.target, reviewers)
    except CommandError as e:
        raise _fail(
            "pr_create_failed",
            f"Failed to create PR! Branch '{branches.current}' was already pushed to "
            f"'{remote}'; no PR was opened.",
            branch_name=branches.current,
            stderr=e.stderr,
        ) from e


def execute_open_pr(
    ctx: OpenPrContext, options: OpenPrOptions
) -> OpenPrResult | OpenPrSkipped | OpenPrError:
    """Run the whole pipeline. Returns success, skip or error result."""
    try:
        return _run_pipeline(ctx, options)
    except _StageFailed as e:
        return e.error


def _run_pipeline(ctx: OpenPrContext, options: OpenPrOptions) -> OpenPrResult | OpenPrSkipped:
    ctx.feedback.info("Collecting branch information..")
    branches = resolve_branches(ctx, options.target_branch)

    ctx.feedback.info("Checking commits..")
    commits = collect_commits(ctx, branches)
    if not commits:
        message = (
            f"No difference in commits found between current branch and {branches.target}."
        )
        ctx.feedback.warning(message)
        return OpenPrSkipped(success=True, reason="no_commits", message=message)

    ctx.feedback.info("Checking for associated Linear ticket..")
    ticket_id, ticket = resolve_ticket(ctx, branches.current)
    if ticket is None:
        ctx.feedback.warning("No associated Linear ticket found.")
    else:
        ctx.feedback.success(f"Linear ticket: {ticket.url}")

    ctx.feedback.info("Generating PR information..")
    draft = compose_drafts(commits, ticket, ticket_id)
    ctx.feedback.success("Looks like we have everything we need!")

    draft = edit_drafts(ctx, draft)

    if options.skip_reviewers:
        selection = ReviewerSelection(reviewers=(), outcome="skipped")
    else:
        selection = choose_reviewers(ctx)

    if not options.skip_confirmation:
        ctx.feedback.show(
            render_draft_summary(
                title=draft.title,
                body=draft.body,
                current_branch=branches.current,
                target_branch=branches.target,
                reviewers=selection.reviewers,
            )
        )
        question = (
            f"Push '{branches.current}' to '{ctx.config.remote}' "
            f"and open a PR into '{branches.target}'?"
        )
        if not ctx.prompter.confirm(question):
            message = "Aborted; nothing was pushed."
            ctx.feedback.warning(message)
            return OpenPrSkipped(success=True, reason="declined", message=message)

    pr_url = publish(ctx, branches, draft, selection.reviewer_argument)

    return OpenPrResult(
        success=True,
        pr_url=pr_url,
        branch_name=branches.current,
        target_branch=branches.target,
        ticket_id=ticket_id,
        reviewers=list(selection.reviewers),
        message=f"PR opened successfully: {pr_url}",
    )
