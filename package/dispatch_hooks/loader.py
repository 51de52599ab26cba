"""Register hooks named in settings.

References use the ``"package.module:function"`` form; a plain dotted path
(``"package.module.function"``) is split on its last dot.
"""

from __future__ import annotations

import importlib
from typing import Any, Dict, List, Mapping, Optional

from loguru import logger

from .errors import HookResolutionError
from .registry import HookRegistry, default_registry
from .utils import HookSettings, settings as default_settings


def resolve_reference(reference: str) -> Any:
    """Import and return the callable named by ``reference``."""

    if ":" in reference:
        module_name, _, attr_path = reference.partition(":")
    else:
        module_name, _, attr_path = reference.rpartition(".")
    if not module_name or not attr_path:
        raise HookResolutionError(reference, "expected 'module:function'")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise HookResolutionError(reference, f"cannot import {module_name!r}: {exc}") from exc

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as exc:
            raise HookResolutionError(reference, f"{module_name!r} has no attribute {attr_path!r}") from exc

    if not callable(obj):
        raise HookResolutionError(reference, "target is not callable")
    return obj


def _resolve_all(references: Mapping[str, List[str]]) -> Dict[str, List[Any]]:
    return {
        type: [resolve_reference(reference) for reference in refs]
        for type, refs in references.items()
    }


def load_hooks(
    settings: Optional[HookSettings] = None,
    registry: Optional[HookRegistry] = None,
) -> Dict[str, Any]:
    """Register the ``PREHOOKS`` and ``POSTHOOKS`` found in ``settings``.

    Every reference is resolved before anything is registered, so a bad
    reference leaves ``registry`` untouched.

    Returns:
        ``{"pre": ..., "post": ...}`` holding the id mappings returned by
        bulk registration.
    """

    if settings is None:
        settings = default_settings
    if registry is None:
        registry = default_registry

    prehooks = _resolve_all(settings.PREHOOKS)
    posthooks = _resolve_all(settings.POSTHOOKS)

    loaded = {
        "pre": registry.register_prehooks(prehooks),
        "post": registry.register_posthooks(posthooks),
    }
    logger.info(
        "Loaded hooks from settings: {} pre, {} post",
        sum(len(hooks) for hooks in prehooks.values()),
        sum(len(hooks) for hooks in posthooks.values()),
    )
    return loaded


__all__ = ["load_hooks", "resolve_reference"]
