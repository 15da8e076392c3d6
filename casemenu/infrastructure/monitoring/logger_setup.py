"""Logging configuration for casemenu.

Command output goes to stdout through the console display, so log records
are written to stderr (and optionally to a file) to keep the two apart.
"""

import logging
import sys
from typing import Optional

from casemenu.infrastructure.config.settings import DEFAULT_LOG_FORMAT, get_config, get_log_level

logger = logging.getLogger(__name__)


def _configured(handler: logging.Handler, log_level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    log_level: int = logging.INFO,
    log_format: str = DEFAULT_LOG_FORMAT,
    log_file: Optional[str] = None
) -> None:
    """Replaces the root logger's handlers with casemenu's.

    A log file that cannot be opened is reported and skipped; stderr
    logging stays in place.

    Args:
        log_level: The minimum logging level (e.g., logging.DEBUG, logging.INFO).
        log_format: The format string for log messages.
        log_file: Optional path to a file that receives the same records.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(log_format)
    root_logger.addHandler(_configured(logging.StreamHandler(sys.stderr), log_level, formatter))

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
        except OSError as e:
            logger.error(f"Failed to set up file logging to {log_file}: {e}")
        else:
            root_logger.addHandler(_configured(file_handler, log_level, formatter))

    logger.debug(f"Logging configured. Level={logging.getLevelName(log_level)}, file={log_file}")


def setup_logging_from_config() -> None:
    """Configures logging from the 'logging.level', 'logging.format' and 'logging.file' settings."""
    setup_logging(
        log_level=get_log_level(),
        log_format=get_config('logging.format', DEFAULT_LOG_FORMAT),
        log_file=get_config('logging.file'),
    )
