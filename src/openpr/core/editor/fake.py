"""Fake editor for testing."""

from collections.abc import Callable

from openpr.core.editor.abc import Editor, EditorError


class FakeEditor(Editor):
    """In-memory editor that applies a canned transformation.

    By default the text is returned unchanged, like a user who saves
    without editing.
    """

    def __init__(
        self,
        *,
        transform: Callable[[str], str] | None = None,
        fail: bool = False,
    ) -> None:
        """Create FakeEditor.

        Args:
            transform: Function applied to each text opened in the editor
            fail: If True, every edit raises EditorError
        """
        self._transform = transform
        self._fail = fail
        self._opened_texts: list[str] = []

    @property
    def opened_texts(self) -> list[str]:
        """Read-only access to texts handed to the editor, in order."""
        return self._opened_texts

    def edit(self, text: str) -> str:
        self._opened_texts.append(text)
        if self._fail:
            raise EditorError("Failed to edit draft: editor exited with status 1")
        if self._transform is None:
            return text
        return self._transform(text)
