"""Logging setup for recipebox, built on loguru."""

import sys
from typing import Optional

from loguru import logger as _logger

from .config import APP_NAME, Settings
from .profile import Profile

_logger_configured: bool = False


def get_logger(component: Optional[str] = None):
    """Get a logger bound to ``component`` (defaults to the app name)."""
    # Configure logger on first use
    if not _logger_configured:
        configure_logging()

    return _logger.bind(component=component or APP_NAME)


def configure_logging(profile: Optional[Profile] = None) -> None:
    """(Re)install the stderr and file sinks for ``profile``."""
    global _logger_configured

    _logger.remove()
    profile = profile or Profile.current()
    settings = Settings.from_env()

    # Stderr handler - only ERROR and above, user-facing output goes through rich
    _logger.add(
        sys.stderr,
        level="ERROR",
        format="<red>{time:HH:mm:ss}</red> | <level>{level: <8}</level> | <cyan>{extra[component]}</cyan> | <level>{message}</level>",
        colorize=True,
    )

    _logger.add(
        profile.log_file,
        level=settings.log_level,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[component]} | {message}",
        rotation="10 MB",
        retention="30 days",
        compression="zip",
    )

    _logger.configure(patcher=_add_context)
    _logger_configured = True


def _add_context(record):
    """Fill in the component for records logged through an unbound logger."""
    record["extra"].setdefault("component", APP_NAME)


logger = get_logger()

__all__ = [
    "logger",
    "get_logger",
    "configure_logging",
]
