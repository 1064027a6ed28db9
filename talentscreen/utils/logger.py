"""
Logging for the candidate screening engine.

Every module gets a child of the "talentscreen" logger; handlers live on the
package logger only, so records are written once however many modules log.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import LOG_FILE, LOG_LEVEL

PACKAGE_LOGGER = "talentscreen"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


def _configure_package_logger(log_file: Optional[Path] = None) -> logging.Logger:
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_logger.handlers:
        return package_logger

    package_logger.setLevel(_level(LOG_LEVEL))
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    log_file = log_file or LOG_FILE
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    return package_logger


def setup_logger(
    name: str = PACKAGE_LOGGER,
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Get a logger for one component of the engine.

    Args:
        name: Component name, e.g. "skill_matcher"; nested under "talentscreen"
        log_level: Level for this component only (DEBUG, INFO, ...).
            If None, the component inherits LOG_LEVEL.
        log_file: File to append to in addition to stdout. Only honoured by
            the first call, which configures the package handlers; defaults
            to LOG_FILE from config.

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logger("skill_matcher", "DEBUG")
        >>> logger.debug("Matched (phrase): python")
    """
    package_logger = _configure_package_logger(log_file)
    if name == PACKAGE_LOGGER:
        return package_logger

    logger = package_logger.getChild(name)
    if log_level is not None:
        logger.setLevel(_level(log_level))
    return logger
