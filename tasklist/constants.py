"""
Constants for task kinds, rendering and deadline parsing.
"""
from __future__ import annotations

# Render markers
DONE_MARKER = "[X] "
NOT_DONE_MARKER = "[ ] "

# Task kinds (stored in Task.kind)
TASK_KIND_TODO = "todo"
TASK_KIND_DEADLINE = "deadline"

# Word separators: ASCII whitespace only, so e.g. a no-break space stays inside a word
ASCII_WHITESPACE = " \t\n\x0b\f\r"
WORD_SEPARATORS = r"[ \t\n\x0b\f\r]+"

# Deadline parsing
DEADLINE_SEPARATORS = r"[ \t\n\x0b\f\r/-]+"
DEADLINE_MIN_TOKENS = 3
DEFAULT_DEADLINE_TIME = "00:00:00"
DEADLINE_SECONDS = "00"
DEADLINE_INPUT_FORMAT = "dd/MM/yyyy [HHmm]"
