"""
Origin restriction middleware.

Serves only requests whose ``Origin`` header equals the configured
frontend origin. Everything else is answered with a CORS error before
reaching the routers. Documentation paths are exempt so the Swagger UI
stays reachable from the API host itself.

No business logic. Pure cross-cutting concern.
"""

import logging
from typing import Iterable, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

CORS_ERROR = "Error de CORS"
HTTP_403 = 403


class OriginRestrictionMiddleware(BaseHTTPMiddleware):
    """Middleware that rejects requests from any origin but one.

    With no configured origin only requests that carry no ``Origin``
    header are served.
    """

    def __init__(
        self,
        app: ASGIApp,
        allowed_origin: Optional[str] = None,
        exempt_paths: Iterable[str] = (),
    ) -> None:
        super().__init__(app)
        self._allowed_origin = allowed_origin
        self._exempt_paths = tuple(p for p in exempt_paths if p)

    def _is_exempt(self, path: str) -> bool:
        return any(path == p or path.startswith(p + "/") for p in self._exempt_paths)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Reject the request unless its origin is the allowed one."""
        origin = request.headers.get("origin")
        if origin != self._allowed_origin and not self._is_exempt(request.url.path):
            logger.warning(
                "Rejected %s %s from origin %s",
                request.method,
                request.url.path,
                origin,
            )
            return JSONResponse(status_code=HTTP_403, content={"error": CORS_ERROR})
        return await call_next(request)
