"""Settings and logging helpers shared by the hook modules."""

from typing import Optional

from pydantic import ValidationError
from loguru import logger

from .config import HookSettings
from .logger import Logger


try:
    settings = HookSettings()
except ValidationError as exc:  # pragma: no cover - configuration errors abort startup
    logger.error(
        "Configuration error: {}\n"
        "Please ensure that all DISPATCH_HOOKS_* environment variables are set correctly.",
        exc,
    )
    raise SystemExit(1) from exc


def configure_logging(hook_settings: Optional[HookSettings] = None) -> Logger:
    """Apply the logging options of ``hook_settings`` and enable hook logging.

    Falls back to the settings read from the environment on import.
    """

    if hook_settings is None:
        hook_settings = settings
    return Logger(log_level=hook_settings.LOG_LEVEL, resource=hook_settings.LOG_RESOURCE)


__all__ = [
    "HookSettings",
    "Logger",
    "configure_logging",
    "settings",
]
