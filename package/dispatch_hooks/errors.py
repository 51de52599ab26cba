"""Common error hierarchy used by the hook helpers."""

from __future__ import annotations

from typing import Any, Optional


class DispatchHooksError(Exception):
    """Base exception raised by the hook helpers."""

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail or ""
        super().__init__(detail or "Hook operation failed.")


class HookRegistrationError(DispatchHooksError):
    """Raised by the decorator API when a hook cannot be registered.

    The plain registration functions report failures by returning ``False``;
    a decorator has no return value to inspect, so it raises this instead.
    """

    def __init__(self, position: Any, type: Any, reason: str) -> None:
        self.position = position
        self.type = type
        self.reason = reason
        super().__init__(
            detail=f"Cannot register {position!r} hook for {type!r}: {reason}"
        )


class HookResolutionError(DispatchHooksError):
    def __init__(self, reference: str, reason: str) -> None:
        self.reference = reference
        self.reason = reason
        super().__init__(detail=f"Cannot resolve hook {reference!r}: {reason}")


__all__ = ["DispatchHooksError", "HookRegistrationError", "HookResolutionError"]
