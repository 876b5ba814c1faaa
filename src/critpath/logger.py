"""Logging for critpath.

The engine never prints. Progress narration ("Determining early stage
times...") and per-stage values are emitted on the ``critpath`` logger
at one of four verbosity levels and rendered only when a caller asks
for them (the CLI maps ``--verbose`` onto these levels).
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

# Extra levels slotted between the standard ones
CHANGES_LEVEL = 25  # INFO < CHANGES < WARNING: verdicts and results
CHECKS_LEVEL = 15  # DEBUG < CHECKS < INFO: pass-by-pass progress

logging.addLevelName(CHANGES_LEVEL, "CHANGES")
logging.addLevelName(CHECKS_LEVEL, "CHECKS")

VERBOSITY_SILENT = 0
VERBOSITY_CHANGES = 1
VERBOSITY_CHECKS = 2
VERBOSITY_DEBUG = 3

_LEVEL_BY_VERBOSITY = {
    VERBOSITY_SILENT: logging.ERROR,
    VERBOSITY_CHANGES: CHANGES_LEVEL,
    VERBOSITY_CHECKS: CHECKS_LEVEL,
    VERBOSITY_DEBUG: logging.DEBUG,
}


class CritpathLogger(logging.Logger):
    """Logger with one method per critpath verbosity level.

    - changes(): level 1, feasibility verdicts and headline numbers
    - checks(): level 2, which pass of the computation is running
    - debug(): level 3, every stage and activity value as it is computed
    """

    def changes(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log at CHANGES level (verbosity 1)."""
        if self.isEnabledFor(CHANGES_LEVEL):
            self._log(CHANGES_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log at CHECKS level (verbosity 2)."""
        if self.isEnabledFor(CHECKS_LEVEL):
            self._log(CHECKS_LEVEL, msg, args, **kwargs)


def get_logger() -> CritpathLogger:
    """Return the shared ``critpath`` logger.

    The logger class is installed before lookup so the first call creates
    a CritpathLogger. Configure it with setup_logger().
    """
    logging.setLoggerClass(CritpathLogger)
    logger = logging.getLogger("critpath")
    assert isinstance(logger, CritpathLogger)
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Attach a single plain-message handler at the requested verbosity.

    Safe to call repeatedly; earlier handlers are dropped.

    Args:
        verbosity: 0=errors only, 1=changes, 2=checks, 3=debug. Unknown
            values fall back to errors only.
        stream: Output stream, sys.stderr when omitted
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(_LEVEL_BY_VERBOSITY.get(verbosity, logging.ERROR))

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Drop all handlers and return to errors-only (used between tests)."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)


def checks_enabled() -> bool:
    """True when verbosity >= 2."""
    return get_logger().isEnabledFor(CHECKS_LEVEL)


def debug_enabled() -> bool:
    """True when verbosity >= 3."""
    return get_logger().isEnabledFor(logging.DEBUG)
