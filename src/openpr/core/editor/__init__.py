"""Editor integration for the interactive draft round-trip."""

from openpr.core.editor.abc import Editor, EditorError
from openpr.core.editor.fake import FakeEditor
from openpr.core.editor.real import RealEditor

__all__ = ["Editor", "EditorError", "RealEditor", "FakeEditor"]
