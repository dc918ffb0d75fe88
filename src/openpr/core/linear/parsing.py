"""Parsing of Linear GraphQL responses.

The description field arrives as null when a ticket was created without
one, and as "" when a description was typed and later cleared. Both
(and a missing field) are flattened to "" here.
"""

from pydantic import BaseModel, ValidationError

from openpr.core.linear.types import LinearIssue


class _IssuePayload(BaseModel):
    url: str
    title: str
    description: str | None = None


class _IssueData(BaseModel):
    issue: _IssuePayload


class _IssueResponse(BaseModel):
    data: _IssueData


ISSUE_QUERY = "query Issue($id: String!) { issue(id: $id) { title description url } }"


def build_issue_query(issue_id: str) -> dict[str, object]:
    """Build the GraphQL request body for one issue."""
    return {"query": ISSUE_QUERY, "variables": {"id": issue_id}}


def parse_issue_response(payload: object) -> LinearIssue:
    """Parse a decoded GraphQL response into a LinearIssue.

    Raises:
        ValueError: If the payload does not have the expected shape
            (including GraphQL error responses where `issue` is null)
    """
    try:
        response = _IssueResponse.model_validate(payload)
    except ValidationError as e:
        raise ValueError(f"Unexpected issue response: {e}") from e

    issue = response.data.issue
    return LinearIssue(
        url=issue.url,
        title=issue.title,
        description=issue.description if issue.description is not None else "",
    )
