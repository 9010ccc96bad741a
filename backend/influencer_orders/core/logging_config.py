"""
Logging configuration for the order export system.

Handlers live on the package logger ("influencer_orders"). Component loggers
are its children and propagate to it, so a level change made once (for
example by the CLI) applies to every component.
"""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

from influencer_orders.core.config import settings

PACKAGE_LOGGER = "influencer_orders"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Optional[Union[str, int]] = None) -> int:
    if level is None:
        level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    # Export runs are batch jobs: stdout carries the CSV path, logs go to stderr
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.LOG_DIR:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / f"{PACKAGE_LOGGER}.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.setLevel(_resolve_level())
    logger.propagate = False
    return logger


def setup_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Get a component logger under the package logger.

    Args:
        name: Component name; prefixed with "influencer_orders." if needed
        level: Optional level for this component only (defaults to inheriting)

    Returns:
        Logger whose records reach the package handlers
    """
    _package_logger()
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(_resolve_level(level))
    return logger


def set_level(level: Union[str, int]) -> None:
    """Change the level of the package logger and therefore every component."""
    _package_logger().setLevel(_resolve_level(level))


orders_logger = setup_logger("orders")
validation_logger = setup_logger("validation")
export_logger = setup_logger("export")
