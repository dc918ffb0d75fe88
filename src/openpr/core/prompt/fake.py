"""Fake prompts for testing."""

from openpr.core.prompt.abc import Prompter


class FakePrompter(Prompter):
    """Prompter returning canned answers."""

    def __init__(
        self,
        *,
        selection: list[str] | None = None,
        cancel_selection: bool = False,
        confirm_response: bool = True,
    ) -> None:
        """Create FakePrompter.

        Args:
            selection: Choices returned from select_many (filtered to the offered choices)
            cancel_selection: If True, select_many behaves as if the user cancelled
            confirm_response: Answer returned from confirm
        """
        self._selection = selection or []
        self._cancel_selection = cancel_selection
        self._confirm_response = confirm_response
        self._select_calls: list[tuple[str, list[str]]] = []
        self._confirm_calls: list[str] = []

    @property
    def select_calls(self) -> list[tuple[str, list[str]]]:
        """Read-only access to (message, choices) passed to select_many()."""
        return self._select_calls

    @property
    def confirm_calls(self) -> list[str]:
        """Read-only access to messages passed to confirm()."""
        return self._confirm_calls

    def select_many(self, message: str, choices: list[str]) -> list[str] | None:
        self._select_calls.append((message, list(choices)))
        if self._cancel_selection:
            return None
        return [choice for choice in self._selection if choice in choices]

    def confirm(self, message: str) -> bool:
        self._confirm_calls.append(message)
        return self._confirm_response
