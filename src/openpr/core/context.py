"""Application context with dependency injection."""

from dataclasses import dataclass

from openpr.core.config import OpenPrConfig
from openpr.core.editor.abc import Editor
from openpr.core.editor.fake import FakeEditor
from openpr.core.editor.real import RealEditor
from openpr.core.git.abc import Git
from openpr.core.git.fake import FakeGit
from openpr.core.git.real import RealGit
from openpr.core.github.abc import GitHub
from openpr.core.github.fake import FakeGitHub
from openpr.core.github.real import RealGitHub
from openpr.core.linear.abc import Linear
from openpr.core.linear.fake import FakeLinear
from openpr.core.linear.real import RealLinear
from openpr.core.prompt.abc import Prompter
from openpr.core.prompt.fake import FakePrompter
from openpr.core.prompt.real import ClickPrompter
from openpr.core.user_feedback import FakeUserFeedback, InteractiveFeedback, UserFeedback


@dataclass(frozen=True)
class OpenPrContext:
    """Immutable context holding all dependencies for openpr operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    github: GitHub
    linear: Linear
    editor: Editor
    prompter: Prompter
    feedback: UserFeedback
    config: OpenPrConfig

    @staticmethod
    def for_test(
        git: Git | None = None,
        github: GitHub | None = None,
        linear: Linear | None = None,
        editor: Editor | None = None,
        prompter: Prompter | None = None,
        feedback: UserFeedback | None = None,
        config: OpenPrConfig | None = None,
    ) -> "OpenPrContext":
        """Create test context with fakes for every dependency not given."""
        return OpenPrContext(
            git=git if git is not None else FakeGit(),
            github=github if github is not None else FakeGitHub(),
            linear=linear if linear is not None else FakeLinear(),
            editor=editor if editor is not None else FakeEditor(),
            prompter=prompter if prompter is not None else FakePrompter(),
            feedback=feedback if feedback is not None else FakeUserFeedback(),
            config=config if config is not None else OpenPrConfig(),
        )


def create_context(config: OpenPrConfig) -> OpenPrContext:
    """Create production context with real implementations."""
    return OpenPrContext(
        git=RealGit(),
        github=RealGitHub(),
        linear=RealLinear(config.linear_api_key, api_url=config.linear_api_url),
        editor=RealEditor(config.editor),
        prompter=ClickPrompter(),
        feedback=InteractiveFeedback(),
        config=config,
    )
