"""
Logging Configuration
=====================
One place that decides where the 'volcanomap' loggers write to.

Every module logs through `logging.getLogger(__name__)`; this module attaches
the handlers to the package namespace once, at start-up.
"""
import logging
import sys
from typing import Optional, Union

# Names accepted by --log-level, most verbose first
LEVEL_NAMES: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def parse_level(level: Union[int, str]) -> int:
    """Numeric level for a level name (case-insensitive) or an int."""
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name not in LEVEL_NAMES:
        raise ValueError(f"Unknown log level '{level}', expected one of {', '.join(LEVEL_NAMES)}.")
    return getattr(logging, name)


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach a stdout handler (and optionally a file handler) to the package logger.

    Calling it again replaces the handlers instead of stacking them.

    Args:
        level: Level name from LEVEL_NAMES or a numeric logging level.
        log_file: Optional path; the file is overwritten on each start.
    """
    numeric_level = parse_level(level)
    logger = logging.getLogger("volcanomap")
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging at {logging.getLevelName(numeric_level)}"
                 + (f", also to {log_file}" if log_file else ""))
    return logger
