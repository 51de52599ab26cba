"""Typed representation of registered hooks."""

import itertools
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict

# Shared by every registry so ids stay unique process-wide.
_sequence = itertools.count(1)


class HookPosition(str, Enum):
    """Whether a hook runs before or after the forwarded call."""

    PRE = "pre"
    POST = "post"


class HookId(BaseModel):
    """Identity returned on registration and used for targeted removal."""

    model_config = ConfigDict(frozen=True)

    type: str
    seq: int

    @classmethod
    def next(cls, type: str) -> "HookId":
        return cls(type=type, seq=next(_sequence))

    def __str__(self) -> str:
        return f"{self.type}#{self.seq}"


class HookRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: HookPosition
    id: HookId
    callback: Callable[..., Any]


HookCallback = Callable[[Any, Any], Any]


__all__ = ["HookPosition", "HookId", "HookRecord", "HookCallback"]
