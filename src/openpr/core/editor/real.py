"""Production editor round-trip using click.edit.

click.edit writes the text to a temporary file, runs the editor on it and
removes the file afterwards, whether or not the editor succeeded.
"""

import logging

import click

from openpr.core.editor.abc import Editor, EditorError

logger = logging.getLogger(__name__)


class RealEditor(Editor):
    """Launches the configured editor (or click's $VISUAL/$EDITOR fallback)."""

    def __init__(self, editor: str | None) -> None:
        """Initialize RealEditor.

        Args:
            editor: Editor command line, or None to let click pick one
        """
        self._editor = editor

    def edit(self, text: str) -> str:
        logger.debug("Opening editor %s", self._editor or "<default>")
        try:
            edited = click.edit(text, editor=self._editor, require_save=False, extension=".md")
        except click.ClickException as e:
            raise EditorError(f"Failed to edit draft: {e.format_message()}") from e

        if edited is None:
            raise EditorError("Failed to edit draft: editor returned no content")
        return edited
