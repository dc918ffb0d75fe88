"""Git integration: abstract interface, subprocess implementation and in-memory fake."""

from openpr.core.git.abc import Git
from openpr.core.git.fake import FakeGit
from openpr.core.git.real import RealGit

__all__ = ["Git", "RealGit", "FakeGit"]
