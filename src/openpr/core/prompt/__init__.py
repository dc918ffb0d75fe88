"""Interactive prompts: reviewer picker and confirmation."""

from openpr.core.prompt.abc import Prompter
from openpr.core.prompt.fake import FakePrompter
from openpr.core.prompt.real import ClickPrompter, parse_selection

__all__ = ["Prompter", "ClickPrompter", "FakePrompter", "parse_selection"]
