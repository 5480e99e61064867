# -*- coding: utf-8 -*-
"""Task entity for a personal to-do list. Public API: Task, normalize_deadline."""

from tasklist.deadline import normalize_deadline
from tasklist.errors import MalformedDeadlineError, TaskListError, ValidationError
from tasklist.models import Task, TaskKind

__all__ = [
    "Task",
    "TaskKind",
    "normalize_deadline",
    "TaskListError",
    "ValidationError",
    "MalformedDeadlineError",
]
