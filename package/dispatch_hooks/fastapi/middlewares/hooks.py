"""Middleware that runs registered hooks around every HTTP request."""

from typing import Optional

from fastapi import Request
from pydantic import BaseModel, ConfigDict
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from ...registry import HookRegistry, default_registry


class RequestAction(BaseModel):
    """Action dispatched for a request; ``type`` is ``"<METHOD> <path>"``."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    type: str
    request: Request

    @classmethod
    def from_request(cls, request: Request) -> "RequestAction":
        return cls(type=f"{request.method} {request.url.path}", request=request)


class HookRequestMiddleware(BaseHTTPMiddleware):
    """Run ``registry`` hooks with ``(app, RequestAction)`` around ``call_next``.

    Hooks registered for ``"GET /items"`` run for ``GET`` requests to
    ``/items``. Hook exceptions reach the application's exception handlers.
    """

    def __init__(self, app: ASGIApp, registry: Optional[HookRegistry] = None) -> None:
        super().__init__(app)
        self.registry = registry if registry is not None else default_registry

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        async def forward(action: RequestAction) -> Response:
            return await call_next(action.request)

        return await self.registry.async_middleware.handle(
            request.app,
            forward,
            RequestAction.from_request(request),
        )


__all__ = ["HookRequestMiddleware", "RequestAction"]
