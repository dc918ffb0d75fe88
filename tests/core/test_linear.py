"""Tests for the Linear client using httpx.MockTransport."""

import json

import httpx
import pytest

from openpr.core.linear.abc import LinearError
from openpr.core.linear.parsing import parse_issue_response
from openpr.core.linear.real import LINEAR_API_URL, RealLinear
from openpr.core.linear.types import LinearIssue


def _issue_payload(description: object = "Users need to sign in.") -> dict[str, object]:
    issue: dict[str, object] = {
        "title": "Add login page",
        "url": "https://linear.app/acme/issue/DIT-123",
    }
    if description is not ...:
        issue["description"] = description
    return {"data": {"issue": issue}}


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


class TestParseIssueResponse:
    def test_parses_issue(self) -> None:
        assert parse_issue_response(_issue_payload()) == LinearIssue(
            url="https://linear.app/acme/issue/DIT-123",
            title="Add login page",
            description="Users need to sign in.",
        )

    def test_null_description_becomes_empty(self) -> None:
        assert parse_issue_response(_issue_payload(None)).description == ""

    def test_missing_description_becomes_empty(self) -> None:
        assert parse_issue_response(_issue_payload(...)).description == ""

    def test_cleared_description_stays_empty(self) -> None:
        assert parse_issue_response(_issue_payload("")).description == ""

    def test_graphql_error_response(self) -> None:
        payload = {"errors": [{"message": "Entity not found"}], "data": {"issue": None}}

        with pytest.raises(ValueError):
            parse_issue_response(payload)


class TestRealLinear:
    def test_posts_query_with_credential(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=_issue_payload(None))

        linear = RealLinear("lin_api_secret", http_client=_client(handler))

        issue = linear.get_issue("DIT-123")

        assert issue.description == ""
        assert len(seen) == 1
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == LINEAR_API_URL
        assert request.headers["Authorization"] == "lin_api_secret"
        body = json.loads(request.content)
        assert body["variables"] == {"id": "DIT-123"}
        assert "title description url" in body["query"]

    def test_missing_credential_makes_no_request(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        linear = RealLinear(None, http_client=_client(handler))

        with pytest.raises(LinearError) as exc_info:
            linear.get_issue("DIT-123")

        assert exc_info.value.reason == "missing_credentials"

    def test_non_2xx_is_contact_failure(self) -> None:
        linear = RealLinear(
            "key", http_client=_client(lambda request: httpx.Response(401, json={}))
        )

        with pytest.raises(LinearError, match="Failed to contact issue tracker") as exc_info:
            linear.get_issue("DIT-123")

        assert exc_info.value.reason == "request_failed"

    def test_transport_error_is_contact_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        linear = RealLinear("key", http_client=_client(handler))

        with pytest.raises(LinearError) as exc_info:
            linear.get_issue("DIT-123")

        assert exc_info.value.reason == "request_failed"

    def test_unparsable_body_is_parse_failure(self) -> None:
        linear = RealLinear(
            "key", http_client=_client(lambda request: httpx.Response(200, text="<html>"))
        )

        with pytest.raises(LinearError, match="Failed to parse issue tracker response") as exc_info:
            linear.get_issue("DIT-123")

        assert exc_info.value.reason == "bad_response"

    def test_unexpected_shape_is_parse_failure(self) -> None:
        linear = RealLinear(
            "key", http_client=_client(lambda request: httpx.Response(200, json={"data": {}}))
        )

        with pytest.raises(LinearError) as exc_info:
            linear.get_issue("DIT-123")

        assert exc_info.value.reason == "bad_response"
