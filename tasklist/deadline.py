"""
Deadline string normalization.

Turns user input like "2/12/2019 1800" into an ISO-8601-shaped string
("2019-12-2T18:00:00"). Date fields are copied as typed, never padded.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from tasklist.config import load_strict_deadline_time
from tasklist.constants import (
    ASCII_WHITESPACE,
    DEADLINE_MIN_TOKENS,
    DEADLINE_SECONDS,
    DEADLINE_SEPARATORS,
    DEFAULT_DEADLINE_TIME,
)
from tasklist.errors import MalformedDeadlineError

logger = logging.getLogger(__name__)

_SPLIT_RE = re.compile(DEADLINE_SEPARATORS)


def split_deadline(text: str) -> list[str]:
    """Split on runs of ASCII whitespace, '/' or '-'. Empty tokens are dropped."""
    return [tok for tok in _SPLIT_RE.split(text.strip(ASCII_WHITESPACE)) if tok]


def _check_time_token(raw: str, token: str) -> None:
    """Strict mode: time must be HHmm with a real hour and minute."""
    if len(token) == 4 and token.isascii() and token.isdigit():
        hours, minutes = int(token[:2]), int(token[2:])
        if 0 <= hours <= 23 and 0 <= minutes <= 59:
            return
    logger.debug("Rejecting deadline %r: bad time token %r", raw, token)
    raise MalformedDeadlineError(raw, reason=f"time {token!r} is not HHmm")


def normalize_deadline(text: str, strict: Optional[bool] = None) -> str:
    """
    Normalize a "dd/MM/yyyy [HHmm]" deadline to "yyyy-MM-ddTHH:mm:ss".

    Args:
        text: Raw deadline input. '/', '-' and whitespace separate fields.
        strict: Validate the time token. None reads TASKLIST_STRICT_DEADLINE_TIME.

    Returns:
        ISO-shaped string without timezone offset.

    Raises:
        MalformedDeadlineError: fewer than three date fields, or (strict only)
            a time token that is not a valid HHmm.

    Examples:
        >>> normalize_deadline("2/12/2019 1800")
        '2019-12-2T18:00:00'
        >>> normalize_deadline("2-12-2019")
        '2019-12-2T00:00:00'
    """
    tokens = split_deadline(text)
    if len(tokens) < DEADLINE_MIN_TOKENS:
        logger.debug("Rejecting deadline %r: only %d field(s)", text, len(tokens))
        raise MalformedDeadlineError(text)

    day, month, year = tokens[0], tokens[1], tokens[2]
    date_part = f"{year}-{month}-{day}"

    if len(tokens) == DEADLINE_MIN_TOKENS:
        return f"{date_part}T{DEFAULT_DEADLINE_TIME}"

    time_token = tokens[3]
    if strict is None:
        strict = load_strict_deadline_time()
    if strict:
        _check_time_token(text, time_token)

    # Lenient mode copies whatever is there, even a short or non-numeric token.
    hour, minute = time_token[:2], time_token[2:4]
    return f"{date_part}T{hour}:{minute}:{DEADLINE_SECONDS}"
