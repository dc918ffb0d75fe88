"""User-facing progress and diagnostic output."""

from abc import ABC, abstractmethod

import click
from rich.console import Console, RenderableType

from openpr.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing progress output for the PR pipeline.

    Usage:
        ctx.feedback.info("Checking commits..")
        ctx.feedback.warning("No associated Linear ticket found.")
        ctx.feedback.show(render_draft_summary(...))
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show progress message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show non-fatal notice."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message."""

    @abstractmethod
    def show(self, renderable: RenderableType) -> None:
        """Show a rich renderable (e.g. the draft summary panel)."""


class InteractiveFeedback(UserFeedback):
    """Feedback written to stderr with click styling."""

    def __init__(self) -> None:
        self._console = Console(stderr=True)

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        """Show success message in green."""
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        """Show notice in yellow."""
        user_output(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        """Show error message in red."""
        user_output(click.style(message, fg="red"))

    def show(self, renderable: RenderableType) -> None:
        self._console.print(renderable)


class FakeUserFeedback(UserFeedback):
    """Records messages for test assertions instead of printing them."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []
        self.renderables: list[RenderableType] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def show(self, renderable: RenderableType) -> None:
        self.renderables.append(renderable)

    def texts(self, level: str) -> list[str]:
        """Messages recorded at one level."""
        return [message for recorded_level, message in self.messages if recorded_level == level]
