"""
Logging setup for the digitcalc command line.
Result tables go to stdout; log records go to stderr and, on request, a file.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Attach handlers to the 'digitcalc' logger.

    Args:
        level: threshold for both handlers, e.g. logging.DEBUG to see digit counters
        log_file: optional path; the file is truncated and receives the same records
    """
    logger = logging.getLogger("digitcalc")
    logger.setLevel(level)

    # main() may run more than once in a process
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("logging at level %s%s", logging.getLevelName(level), f", copy in {log_file}" if log_file else "")
