"""Abstract interface for interactive prompts."""

from abc import ABC, abstractmethod


class Prompter(ABC):
    """Abstract interface for prompts shown to the user."""

    @abstractmethod
    def select_many(self, message: str, choices: list[str]) -> list[str] | None:
        """Let the user pick any number of choices.

        Nothing is selected by default.

        Returns:
            Selected choices in the order they were picked, or None if the
            user cancelled the picker
        """

    @abstractmethod
    def confirm(self, message: str) -> bool:
        """Ask a yes/no question. Returns False if the user declines or cancels."""
