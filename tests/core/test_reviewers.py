"""Tests for reviewer candidate listing and selection."""

from openpr.core.github.fake import FakeGitHub
from openpr.core.prompt.fake import FakePrompter
from openpr.core.reviewers import ReviewerSelection, parse_candidates, select_reviewers


def test_parse_candidates_splits_on_whitespace() -> None:
    assert parse_candidates("alice\nbob\n\ncarol  \n") == ["alice", "bob", "carol"]
    assert parse_candidates("") == []


def test_selected_reviewers_keep_picker_order() -> None:
    github = FakeGitHub(org_members="alice\nbob\ncarol\n")
    prompter = FakePrompter(selection=["carol", "alice"])

    selection = select_reviewers(github, prompter, "acme")

    assert selection == ReviewerSelection(reviewers=("carol", "alice"), outcome="selected")
    assert selection.reviewer_argument == "carol,alice"
    assert github.list_org_members_calls == ["acme"]
    assert prompter.select_calls == [("Select reviewers:", ["alice", "bob", "carol"])]


def test_selecting_nobody_is_not_cancel() -> None:
    selection = select_reviewers(
        FakeGitHub(org_members="alice\n"), FakePrompter(selection=[]), None
    )

    assert selection.outcome == "selected"
    assert selection.reviewer_argument is None


def test_no_candidates_skips_picker() -> None:
    prompter = FakePrompter(selection=["alice"])

    selection = select_reviewers(FakeGitHub(org_members=""), prompter, None)

    assert selection.outcome == "none_available"
    assert prompter.select_calls == []


def test_cancelled_picker() -> None:
    selection = select_reviewers(
        FakeGitHub(org_members="alice\n"), FakePrompter(cancel_selection=True), None
    )

    assert selection == ReviewerSelection(reviewers=(), outcome="cancelled")


def test_listing_failure_is_unavailable() -> None:
    prompter = FakePrompter()

    selection = select_reviewers(FakeGitHub(org_members_error="HTTP 404"), prompter, None)

    assert selection.outcome == "unavailable"
    assert prompter.select_calls == []
