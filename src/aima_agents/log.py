"""Package logger for agent decision cycles.

DEBUG=1 turns on per-percept decision logging. AIMA_AGENTS_LOG_LEVEL takes a level name
(e.g. WARNING) and wins over DEBUG when both are set.
"""

import logging
import os
import sys

logger = logging.getLogger("aima_agents")
_handler = logging.StreamHandler(stream=sys.stdout)
_formatter = logging.Formatter(fmt="%(levelname)s: %(message)s")
_handler.setFormatter(_formatter)
logger.addHandler(_handler)


def _level_from_environment() -> int:
    level_name = os.environ.get("AIMA_AGENTS_LOG_LEVEL", "").strip().upper()
    level = logging.getLevelName(level_name) if level_name else None
    if isinstance(level, int):
        return level
    return logging.DEBUG if os.environ.get("DEBUG") else logging.INFO


logger.setLevel(_level_from_environment())
