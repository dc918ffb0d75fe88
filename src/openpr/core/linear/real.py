"""Production implementation of Linear operations over HTTPS."""

import logging

import httpx

from openpr.core.linear.abc import Linear, LinearError
from openpr.core.linear.parsing import build_issue_query, parse_issue_response
from openpr.core.linear.types import LinearIssue

logger = logging.getLogger(__name__)

LINEAR_API_URL = "https://api.linear.app/graphql"


class RealLinear(Linear):
    """Production implementation using the Linear GraphQL API via httpx."""

    def __init__(
        self,
        api_key: str | None,
        *,
        api_url: str = LINEAR_API_URL,
        http_client: httpx.Client | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize RealLinear.

        Args:
            api_key: Linear API key, sent verbatim in the Authorization header
            api_url: GraphQL endpoint
            http_client: Optional preconfigured client (tests pass one with a mock transport)
            timeout: Request timeout in seconds
        """
        self._api_key = api_key
        self._api_url = api_url
        self._http_client = http_client
        self._timeout = timeout

    def get_issue(self, issue_id: str) -> LinearIssue:
        if not self._api_key:
            raise LinearError(
                "LINEAR_API_KEY is not set; cannot look up the Linear ticket",
                reason="missing_credentials",
            )

        headers = {"Authorization": self._api_key, "Content-Type": "application/json"}
        body = build_issue_query(issue_id)
        logger.debug("POST %s issue=%s", self._api_url, issue_id)

        client = self._http_client or httpx.Client(timeout=self._timeout)
        try:
            response = client.post(self._api_url, json=body, headers=headers)
        except httpx.HTTPError as e:
            raise LinearError(
                f"Failed to contact issue tracker: {e}", reason="request_failed"
            ) from e
        finally:
            if self._http_client is None:
                client.close()

        if not response.is_success:
            raise LinearError(
                f"Failed to contact issue tracker: HTTP {response.status_code}",
                reason="request_failed",
            )

        try:
            return parse_issue_response(response.json())
        except ValueError as e:
            raise LinearError(
                f"Failed to parse issue tracker response: {e}", reason="bad_response"
            ) from e
