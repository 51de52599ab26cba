"""Registry of pre/post hooks keyed by action type."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Union

from loguru import logger

from .errors import HookRegistrationError
from .middleware import AsyncHookMiddleware, HookMiddleware
from .models import HookCallback, HookId, HookPosition, HookRecord

__all__ = [
    "HookRegistry",
    "default_registry",
    "register_hook",
    "register_prehook",
    "register_posthook",
    "register_hooks",
    "register_prehooks",
    "register_posthooks",
    "unregister_hook",
    "clear_hooks",
    "hook_middleware",
]

RegisterResult = Union[HookId, bool]
BulkResult = Dict[Any, Optional[List[Union[HookId, bool, None]]]]


def _parse_position(position: Any) -> Optional[HookPosition]:
    if not isinstance(position, str):
        return None
    try:
        return HookPosition(position)
    except ValueError:
        return None


class HookRegistry:
    """Mapping from action type to the ordered hooks registered for it.

    Registration never raises: invalid arguments make :meth:`register_hook`
    return ``False`` and bulk registration report ``None`` per entry, leaving
    the registry untouched. Hooks for a type run in registration order.
    """

    def __init__(self) -> None:
        self._hooks: Dict[str, List[HookRecord]] = {}
        self.middleware = HookMiddleware(self)
        self.async_middleware = AsyncHookMiddleware(self)

    def __len__(self) -> int:
        return sum(len(records) for records in self._hooks.values())

    def __contains__(self, type: object) -> bool:
        return type in self._hooks

    def __iter__(self) -> Iterator[HookRecord]:
        for records in list(self._hooks.values()):
            yield from list(records)

    def register_hook(self, position: Any, type: Any, callback: Any) -> RegisterResult:
        parsed = _parse_position(position)
        if parsed is None:
            logger.warning("Rejected hook for {!r}: invalid position {!r}", type, position)
            return False
        if not isinstance(type, str):
            logger.warning("Rejected {} hook: action type {!r} is not a string", parsed.value, type)
            return False
        if not callable(callback):
            logger.warning("Rejected {} hook for {}: {!r} is not callable", parsed.value, type, callback)
            return False

        hook_id = HookId.next(type)
        self._hooks.setdefault(type, []).append(
            HookRecord(position=parsed, id=hook_id, callback=callback)
        )
        logger.debug("Registered {} hook {}", parsed.value, hook_id)
        return hook_id

    def register_prehook(self, type: Any, callback: Any) -> RegisterResult:
        return self.register_hook(HookPosition.PRE, type, callback)

    def register_posthook(self, type: Any, callback: Any) -> RegisterResult:
        return self.register_hook(HookPosition.POST, type, callback)

    def register_hooks(self, position: Any, hooks: Any) -> Union[BulkResult, bool]:
        """Register several hooks at once.

        Args:
            position: ``"pre"`` or ``"post"``.
            hooks: Mapping of action type to a callable or a list of callables.

        Returns:
            A mapping parallel to ``hooks``: a single callable yields ``[id]``,
            a list yields one id per callable element and ``None`` for every
            other element, and any other value yields ``None``. ``False`` when
            ``position`` or ``hooks`` has the wrong shape.
        """

        if _parse_position(position) is None:
            logger.warning("Rejected bulk registration: invalid position {!r}", position)
            return False
        if not isinstance(hooks, Mapping):
            logger.warning("Rejected bulk registration: {!r} is not a mapping", hooks)
            return False

        result: BulkResult = {}
        for type, value in hooks.items():
            if callable(value):
                result[type] = [self.register_hook(position, type, value)]
            elif isinstance(value, (list, tuple)):
                result[type] = [
                    self.register_hook(position, type, item) if callable(item) else None
                    for item in value
                ]
            else:
                result[type] = None
        return result

    def register_prehooks(self, hooks: Any) -> Union[BulkResult, bool]:
        return self.register_hooks(HookPosition.PRE, hooks)

    def register_posthooks(self, hooks: Any) -> Union[BulkResult, bool]:
        return self.register_hooks(HookPosition.POST, hooks)

    def unregister_hook(self, hook_id: Any) -> None:
        """Remove the hook with ``hook_id``. Unknown ids are ignored."""

        removed = 0
        for type, records in self._hooks.items():
            kept = [record for record in records if record.id != hook_id]
            removed += len(records) - len(kept)
            self._hooks[type] = kept
        if removed:
            logger.debug("Unregistered hook {}", hook_id)

    def clear_hooks(self) -> None:
        self._hooks.clear()
        logger.debug("Cleared all hooks")

    def hooks_for(self, type: Any, position: HookPosition) -> List[HookCallback]:
        """Return the callbacks registered for ``type`` at ``position``, in order."""

        records = self._hooks.get(type, []) if isinstance(type, str) else []
        return [record.callback for record in records if record.position == position]

    def hook(self, position: Any, type: Any) -> Callable[[HookCallback], HookCallback]:
        """Decorator form of :meth:`register_hook`.

        The decorated function is returned unchanged. Invalid arguments raise
        :class:`HookRegistrationError` instead of returning ``False``.
        """

        if _parse_position(position) is None:
            raise HookRegistrationError(position, type, "position must be 'pre' or 'post'")
        if not isinstance(type, str):
            raise HookRegistrationError(position, type, "action type must be a string")

        def decorator(func: HookCallback) -> HookCallback:
            if self.register_hook(position, type, func) is False:
                raise HookRegistrationError(position, type, f"{func!r} is not callable")
            return func

        return decorator

    def prehook(self, type: Any) -> Callable[[HookCallback], HookCallback]:
        return self.hook(HookPosition.PRE, type)

    def posthook(self, type: Any) -> Callable[[HookCallback], HookCallback]:
        return self.hook(HookPosition.POST, type)


default_registry = HookRegistry()

register_hook = default_registry.register_hook
register_prehook = default_registry.register_prehook
register_posthook = default_registry.register_posthook
register_hooks = default_registry.register_hooks
register_prehooks = default_registry.register_prehooks
register_posthooks = default_registry.register_posthooks
unregister_hook = default_registry.unregister_hook
clear_hooks = default_registry.clear_hooks
hook_middleware = default_registry.middleware
