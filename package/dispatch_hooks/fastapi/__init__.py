"""FastAPI integration: run registered hooks around HTTP requests."""

from .middlewares import HookRequestMiddleware, RequestAction, add_middlewares

__all__ = ["HookRequestMiddleware", "RequestAction", "add_middlewares"]
