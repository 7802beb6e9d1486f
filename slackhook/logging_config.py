"""
Centralized logging configuration for Slackhook.

Library code only asks for loggers; setup_logging is meant for the
command line interface and standalone use, where no host owns logging.
"""

import logging
import logging.handlers
import sys

LOGGER_NAME = "slackhook"

# Loggers of the HTTP stack under requests. Their connection-level debug
# lines only show when Slackhook itself runs at DEBUG.
TRANSPORT_LOGGERS = ("urllib3",)


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB default
    backup_count: int = 5
) -> None:
    """
    Configure logging for Slackhook.

    The configured level also decides how chatty the HTTP transport is:
    at DEBUG its records go to the same handlers as Slackhook's own,
    at any other level it is held at WARNING.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file (logs to console if not provided)
        max_bytes: Maximum bytes per log file before rotation (default: 10MB)
        backup_count: Number of backup files to keep (default: 5)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(log_level)
    package_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    package_logger.propagate = False

    for name in TRANSPORT_LOGGERS:
        transport_logger = logging.getLogger(name)
        transport_logger.handlers.clear()
        if log_level <= logging.DEBUG:
            transport_logger.setLevel(logging.DEBUG)
            for handler in package_logger.handlers:
                transport_logger.addHandler(handler)
            transport_logger.propagate = False
        else:
            transport_logger.setLevel(logging.WARNING)
            transport_logger.propagate = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    if name.startswith(f"{LOGGER_NAME}."):
        name = name[len(LOGGER_NAME) + 1:]

    return logging.getLogger(f"{LOGGER_NAME}.{name}")
