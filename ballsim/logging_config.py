"""Console (and optional file) logging for the arena app."""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route every ``ballsim.*`` logger to stdout, and to `log_file` when given.

    Safe to call again: the previous handlers are replaced, not stacked.
    """
    logger = logging.getLogger("ballsim")
    logger.setLevel(level)
    for old in list(logger.handlers):
        old.close()
        logger.removeHandler(old)

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to stdout%s", f" and {log_file}" if log_file else "")
    return logger
