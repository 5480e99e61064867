from __future__ import annotations

import logging
from typing import Optional

from tasklist.config import load_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [PID:%(process)d] - %(message)s'


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for a program embedding tasklist.

    Call once at startup. Without an explicit level, TASKLIST_LOG_LEVEL is used.
    """
    if level is None:
        level = load_settings().log_level
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)
    logging.getLogger(__name__).debug("Logging configured at %s", level.upper())
