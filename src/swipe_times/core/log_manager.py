# core/log_manager.py
import logging
import sys

LOGGER_NAME = 'swipe_times'
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s.%(module)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _build_logger() -> logging.Logger:
    """
    Creates the application logger with a single stream handler.
    Safe to call repeatedly (e.g. under NiceGUI's reload): handlers are not duplicated.
    """
    _logger = logging.getLogger(LOGGER_NAME)
    if not _logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        _logger.addHandler(handler)
    _logger.setLevel(logging.INFO)
    _logger.propagate = False
    return _logger


def set_log_level(level_name: str) -> None:
    """Applies a level name such as 'DEBUG' or 'warning'. Unknown names keep the current level."""
    level = logging.getLevelName(level_name.strip().upper())
    if isinstance(level, int):
        logger.setLevel(level)
    else:
        logger.warning(f"Unknown log level '{level_name}'; keeping {logging.getLevelName(logger.level)}.")


# Globally shared logger instance
logger = _build_logger()
