"""
Opt-in log output for fixedvec.

The package only logs at DEBUG level (zero-norm cosine operands, linear
combination summaries) and stays silent by default. setup_logging() attaches
one handler to the 'fixedvec' logger; calling it again replaces that handler
and leaves any handlers the application installed itself alone.
"""
import logging
import sys
from typing import Optional, TextIO

from fixedvec.config import LOG_DATEFMT, LOG_FORMAT

_HANDLER_NAME = "fixedvec"


def setup_logging(
    level: int = logging.DEBUG,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """
    Route fixedvec log records to a file or a stream.

    Args:
        level: Level for both the logger and the handler.
        log_file: Write to this path (overwritten). Takes precedence over `stream`.
        stream: Stream to write to when no file is given (default: stderr).

    Returns:
        The installed handler, so callers can detach it again.
    """
    logger = logging.getLogger("fixedvec")
    for h in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(h)
        h.close()

    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    else:
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))

    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
