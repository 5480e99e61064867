"""Domain errors raised by task rules."""
from __future__ import annotations


class TaskListError(Exception):
    """Base for all tasklist errors."""


class ValidationError(TaskListError):
    """User input was rejected by a domain rule."""


class MalformedDeadlineError(ValidationError):
    """Deadline string could not be normalized."""

    def __init__(self, raw: str, reason: str = "date is incomplete") -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(
            f"Invalid deadline format ({reason}): {raw!r}. Expected dd/MM/yyyy [HHmm]."
        )
