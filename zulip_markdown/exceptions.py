"""Package-specific exception types."""

from __future__ import annotations


class FenceError(ValueError):
    """Base class for fence-structure errors.

    Represents errors encountered while scanning Markdown code fences.
    """


class UnbalancedFenceError(FenceError):
    """Raised when code fences are opened and closed inconsistently.

    Args:
        line_number: One-based index of the line where the problem was found.
        reason: Short description of the imbalance.
    """

    def __init__(self, line_number: int, reason: str):
        self.line_number = line_number
        self.reason = reason
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return f"Line {self.line_number}: {self.reason}"
