"""Type definitions for Linear issue data."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinearIssue:
    """Ticket metadata fetched from Linear.

    `description` is always a string: a null or missing value on the wire
    is normalized to "" when the response is parsed.
    """

    url: str
    title: str
    description: str
