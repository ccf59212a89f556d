# core/logger.py
import logging
import sys
import traceback

from core.config import LOG_FORMAT
from core.settings import load_setting


def get_logger(name):
    return logging.getLogger(name)


def _excepthook(exc_type, exc_value, exc_tb):
    logging.error("Unhandled exception:", exc_info=(exc_type, exc_value, exc_tb))
    traceback.print_exception(exc_type, exc_value, exc_tb)


def setup_logging(log_file=None, level=None):
    """
    Configure the root logger once for the process.

    The level comes from the ``log_level`` setting unless passed explicitly.
    With ``log_file`` the log is rewritten on every start (filemode 'w').
    Returns the effective level.
    """
    if level is None:
        level = load_setting('log_level', 'INFO')
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if not isinstance(level, int) or isinstance(level, bool):
        level = logging.INFO

    if log_file:
        logging.basicConfig(filename=log_file, level=level, format=LOG_FORMAT, filemode='w', force=True)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    sys.excepthook = _excepthook
    return level
