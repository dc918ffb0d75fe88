"""Abstract interface for handing a draft to an external editor."""

from abc import ABC, abstractmethod


class EditorError(RuntimeError):
    """Raised when the editor cannot be launched or its result cannot be read back."""


class Editor(ABC):
    """Abstract interface for an editor round-trip."""

    @abstractmethod
    def edit(self, text: str) -> str:
        """Open `text` in an editor and return the saved contents.

        Raises:
            EditorError: If the editor fails to launch or exits with an error
        """
