"""Public interface for the :mod:`dispatch_hooks` package.

Log records are disabled until :func:`configure_logging` is called.
"""

from loguru import logger

from .errors import DispatchHooksError, HookRegistrationError, HookResolutionError
from .middleware import AsyncHookMiddleware, HookMiddleware, action_type, apply_middleware
from .models import HookId, HookPosition, HookRecord
from .registry import (
    HookRegistry,
    clear_hooks,
    default_registry,
    hook_middleware,
    register_hook,
    register_hooks,
    register_posthook,
    register_posthooks,
    register_prehook,
    register_prehooks,
    unregister_hook,
)
from .utils import HookSettings, configure_logging

logger.disable("dispatch_hooks")

__all__ = [
    "HookRegistry",
    "HookMiddleware",
    "AsyncHookMiddleware",
    "HookId",
    "HookPosition",
    "HookRecord",
    "action_type",
    "apply_middleware",
    "default_registry",
    "hook_middleware",
    "register_hook",
    "register_prehook",
    "register_posthook",
    "register_hooks",
    "register_prehooks",
    "register_posthooks",
    "unregister_hook",
    "clear_hooks",
    "DispatchHooksError",
    "HookRegistrationError",
    "HookResolutionError",
    "HookSettings",
    "configure_logging",
]
