"""Pydantic models describing registered hooks."""

from .hook import HookCallback, HookId, HookPosition, HookRecord

__all__ = ["HookCallback", "HookId", "HookPosition", "HookRecord"]
