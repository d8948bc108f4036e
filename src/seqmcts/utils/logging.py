"""Logging setup."""

import logging
import sys
from typing import Optional

# Search verbosity (0/1/2) -> level for the seqmcts loggers
_VERBOSITY_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}


def level_for_verbosity(verbosity: int) -> int:
    """Map a search verbosity to a logging level.

    Levels above 2 are treated as 2; negative levels as 0.
    """
    return _VERBOSITY_LEVELS[min(max(verbosity, 0), 2)]


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    verbosity: Optional[int] = None
):
    """Setup logging configuration.

    Args:
        level: Root logging level
        log_file: Optional log file path
        verbosity: Search verbosity; when given, sets the level of the
            seqmcts loggers so progress reports and search summaries show
            up without making third-party loggers chatty
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )

    if verbosity is not None:
        logging.getLogger("seqmcts").setLevel(level_for_verbosity(verbosity))
