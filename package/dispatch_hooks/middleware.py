"""Dispatch middlewares that run registered hooks around the next stage."""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Awaitable, Callable, List, Mapping, Optional, Tuple

from loguru import logger

from .models import HookCallback, HookPosition

if TYPE_CHECKING:  # pragma: no cover
    from .registry import HookRegistry

__all__ = [
    "AsyncHookMiddleware",
    "HookMiddleware",
    "Middleware",
    "action_type",
    "apply_middleware",
]

Dispatch = Callable[[Any], Any]
AsyncDispatch = Callable[[Any], Awaitable[Any]]
Middleware = Callable[[Any], Callable[[Dispatch], Dispatch]]


def action_type(action: Any) -> Optional[str]:
    """Return the ``type`` of ``action``, or ``None`` when it has none.

    Mappings are read by key and any other object by attribute.
    """

    if action is None:
        return None
    if isinstance(action, Mapping):
        return action.get("type")
    return getattr(action, "type", None)


class _RegistryMiddleware:
    """Hook lookup shared by the sync and async middlewares."""

    def __init__(self, registry: "HookRegistry") -> None:
        self.registry = registry

    def _hooks(self, action: Any) -> Tuple[List[HookCallback], List[HookCallback]]:
        # Both lists are taken before any hook runs.
        type = action_type(action)
        prehooks = self.registry.hooks_for(type, HookPosition.PRE)
        posthooks = self.registry.hooks_for(type, HookPosition.POST)
        logger.debug(
            "Dispatching {!r} with {} pre-hooks and {} post-hooks",
            type,
            len(prehooks),
            len(posthooks),
        )
        return prehooks, posthooks


class HookMiddleware(_RegistryMiddleware):
    """Run the registry's pre-hooks, forward the action, then run its post-hooks.

    Usable as a curried middleware, ``middleware(context)(call_next)(action)``,
    or directly through :meth:`handle`. Exceptions raised by a hook or by
    ``call_next`` are not caught: a failing pre-hook stops the dispatch before
    the action is forwarded.
    """

    def __call__(self, context: Any) -> Callable[[Dispatch], Dispatch]:
        def wrap(call_next: Dispatch) -> Dispatch:
            def dispatch(action: Any) -> Any:
                return self.handle(context, call_next, action)

            return dispatch

        return wrap

    def handle(self, context: Any, call_next: Dispatch, action: Any) -> Any:
        prehooks, posthooks = self._hooks(action)

        for hook in prehooks:
            hook(context, action)
        result = call_next(action)
        for hook in posthooks:
            hook(context, action)

        return result


class AsyncHookMiddleware(_RegistryMiddleware):
    """Coroutine counterpart of :class:`HookMiddleware`.

    ``call_next`` is awaited. Hooks may be plain functions or coroutine
    functions; an awaitable returned by a hook is awaited before the next
    hook runs.
    """

    def __call__(self, context: Any) -> Callable[[AsyncDispatch], AsyncDispatch]:
        def wrap(call_next: AsyncDispatch) -> AsyncDispatch:
            async def dispatch(action: Any) -> Any:
                return await self.handle(context, call_next, action)

            return dispatch

        return wrap

    async def handle(self, context: Any, call_next: AsyncDispatch, action: Any) -> Any:
        prehooks, posthooks = self._hooks(action)

        for hook in prehooks:
            outcome = hook(context, action)
            if inspect.isawaitable(outcome):
                await outcome
        result = await call_next(action)
        for hook in posthooks:
            outcome = hook(context, action)
            if inspect.isawaitable(outcome):
                await outcome

        return result


def apply_middleware(context: Any, handler: Dispatch, *middlewares: Middleware) -> Dispatch:
    """Compose ``middlewares`` around ``handler`` and return the dispatch function.

    The first middleware is the outermost one, so it sees each action first.
    """

    dispatch = handler
    for middleware in reversed(middlewares):
        dispatch = middleware(context)(dispatch)
    return dispatch
