"""Logging utilities for the hook helpers."""

from __future__ import annotations

import sys

from loguru import logger

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level:<8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)


class Logger:
    """Send Loguru records at ``log_level`` and above to stdout.

    Replaces every existing sink and enables the records emitted by
    :mod:`dispatch_hooks`, which are silenced on import.
    """

    def __init__(self, log_level: str = "INFO", resource: str = "") -> None:
        self.log_level = log_level.upper()
        self.resource = resource.upper()
        prefix = f"{self.resource}| " if self.resource else ""

        logger.remove()
        self.handler_id = logger.add(
            sys.stdout,
            level=self.log_level,
            format=prefix + _FORMAT,
            backtrace=False,
            diagnose=False,
        )
        logger.enable("dispatch_hooks")
