"""GitHub (gh) integration: abstract interface, subprocess implementation and fake."""

from openpr.core.github.abc import GitHub
from openpr.core.github.fake import FakeGitHub
from openpr.core.github.real import RealGitHub

__all__ = ["GitHub", "RealGitHub", "FakeGitHub"]
