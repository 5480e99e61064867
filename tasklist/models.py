# -*- coding: utf-8 -*-
"""Task entity of the to-do list."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Literal, Optional

from tasklist.constants import (
    DONE_MARKER,
    NOT_DONE_MARKER,
    WORD_SEPARATORS,
    TASK_KIND_DEADLINE,
    TASK_KIND_TODO,
)
from tasklist.deadline import normalize_deadline

logger = logging.getLogger(__name__)

TaskKind = Literal["todo", "deadline"]

_WORD_SPLIT_RE = re.compile(WORD_SEPARATORS)


@dataclass(eq=False)
class Task:
    """
    A description plus a done/not-done flag.

    Equality and hashing use the description only: the same text with a
    different status (or kind) is the same task. The owning list is
    responsible for any locking around done.
    """

    description: str
    done: bool = False
    kind: TaskKind = TASK_KIND_TODO
    deadline: Optional[str] = field(default=None)

    def __setattr__(self, name: str, value: object) -> None:
        # description is fixed once set; hashing depends on it
        if name == "description" and "description" in self.__dict__:
            raise AttributeError("Task description cannot be changed")
        object.__setattr__(self, name, value)

    @classmethod
    def with_deadline(cls, description: str, raw_deadline: str, strict: Optional[bool] = None) -> Task:
        """Build a deadline task. Raises MalformedDeadlineError on bad input."""
        return cls(
            description,
            kind=TASK_KIND_DEADLINE,
            deadline=normalize_deadline(raw_deadline, strict=strict),
        )

    def is_done(self) -> bool:
        return self.done

    def mark_done(self) -> None:
        if not self.done:
            logger.debug("Task done: %s", self.description)
        self.done = True

    def mark_undone(self) -> None:
        if self.done:
            logger.debug("Task undone: %s", self.description)
        self.done = False

    def get_description(self) -> str:
        return self.description

    def render(self) -> str:
        """Render as "[X] text" when done, "[ ] text" otherwise."""
        marker = DONE_MARKER if self.done else NOT_DONE_MARKER
        return marker + self.description

    def __str__(self) -> str:
        return self.render()

    @staticmethod
    def normalize_deadline(text: str, strict: Optional[bool] = None) -> str:
        return normalize_deadline(text, strict=strict)

    def data_description(self) -> str:
        """
        Kind-specific payload for persistence.

        Returns:
            "" for plain tasks, the normalized deadline for deadline tasks.
        """
        if self.kind == TASK_KIND_TODO:
            return ""
        if self.kind == TASK_KIND_DEADLINE:
            return self.deadline or ""
        raise ValueError(f"Unknown task kind: {self.kind!r}")

    def matches(self, keyword: str) -> bool:
        """Whole-word, case-sensitive match against the description."""
        return keyword in [w for w in _WORD_SPLIT_RE.split(self.description) if w]

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Task):
            return False
        return self.description == other.description

    def __hash__(self) -> int:
        return hash(self.description)
