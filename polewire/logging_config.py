"""
Logging setup for applications that use polewire.

The library itself only creates module loggers under the 'polewire'
namespace; nothing is printed until setup_logging() attaches handlers.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Send 'polewire' log records to stdout and, optionally, to a file.

    Existing handlers on the namespace logger are replaced, so calling this
    again changes the level instead of duplicating output.

    Args:
        level: Threshold for the logger and its handlers.
        log_file: Path of a log file, overwritten on each call.

    Returns:
        logging.Logger: The 'polewire' logger.
    """
    logger = logging.getLogger("polewire")
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

    logger.debug(f"Logging to {len(handlers)} handler(s) at level {logging.getLevelName(level)}")
    return logger
