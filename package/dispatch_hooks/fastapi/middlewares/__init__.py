"""Middleware registration helpers."""

from typing import Optional

from fastapi import FastAPI

from ...registry import HookRegistry
from .hooks import HookRequestMiddleware, RequestAction


def add_middlewares(
    app: FastAPI,
    *,
    registry: Optional[HookRegistry] = None,
    enable_hooks: bool = True,
) -> None:
    """Attach the hook middleware to ``app``."""

    if enable_hooks:
        app.add_middleware(HookRequestMiddleware, registry=registry)


__all__ = ["add_middlewares", "HookRequestMiddleware", "RequestAction"]
