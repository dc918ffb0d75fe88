"""Linear issue tracker integration."""

from openpr.core.linear.abc import Linear, LinearError
from openpr.core.linear.fake import FakeLinear
from openpr.core.linear.real import RealLinear
from openpr.core.linear.types import LinearIssue

__all__ = ["Linear", "LinearError", "LinearIssue", "RealLinear", "FakeLinear"]
