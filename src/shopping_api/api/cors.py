"""Trusted-origin CORS middleware.

Starlette's CORSMiddleware answers rejected preflights with a 400 and a
text body; this API's clients expect 405 for a disallowed method and 403
for a disallowed header, so the policy is implemented here.

Flow:
    no Origin header            -> pass through
    untrusted Origin            -> pass through, no allow headers
    trusted Origin, preflight   -> answered here, never forwarded
    trusted Origin, other       -> forwarded, Access-Control-Allow-Origin set

Every response gets `Vary: Origin` and `Vary: Access-Control-Request-Method`.
"""

import logging
from collections.abc import Iterable, Sequence

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

DEFAULT_ALLOWED_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS")
DEFAULT_ALLOWED_HEADERS = ("Authorization", "Content-Type")
PREFLIGHT_MAX_AGE = 300


class TrustedOriginCORSMiddleware(BaseHTTPMiddleware):
    """Validate cross-origin requests against a fixed origin allow-list."""

    def __init__(
        self,
        app: ASGIApp,
        trusted_origins: Iterable[str],
        allowed_methods: Sequence[str] = DEFAULT_ALLOWED_METHODS,
        allowed_headers: Sequence[str] = DEFAULT_ALLOWED_HEADERS,
        max_age: int = PREFLIGHT_MAX_AGE,
    ) -> None:
        super().__init__(app)
        self._trusted_origins = frozenset(trusted_origins)
        self._allowed_methods = tuple(allowed_methods)
        self._allowed_headers = tuple(allowed_headers)
        # Header names are case-insensitive; browsers send them lowercased.
        self._allowed_header_keys = frozenset(h.lower() for h in allowed_headers)
        self._max_age = max_age

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        origin = request.headers.get("origin")
        trusted = origin is not None and origin in self._trusted_origins

        if trusted and self._is_preflight(request):
            response = self._preflight_response(request, origin)
        else:
            response = await call_next(request)
            if trusted:
                response.headers["Access-Control-Allow-Origin"] = origin
            elif origin is not None:
                logger.debug("Untrusted origin %s for %s %s", origin, request.method, request.url.path)

        response.headers.append("Vary", "Origin")
        response.headers.append("Vary", "Access-Control-Request-Method")
        return response

    @staticmethod
    def _is_preflight(request: Request) -> bool:
        return request.method == "OPTIONS" and bool(
            request.headers.get("access-control-request-method")
        )

    def _preflight_response(self, request: Request, origin: str) -> Response:
        requested_method = request.headers["access-control-request-method"]
        if requested_method not in self._allowed_methods:
            logger.debug("Preflight from %s rejected: method %s", origin, requested_method)
            return Response(status_code=status.HTTP_405_METHOD_NOT_ALLOWED)

        requested_headers = request.headers.get("access-control-request-headers", "")
        for header in requested_headers.split(","):
            header = header.strip()
            if header and header.lower() not in self._allowed_header_keys:
                logger.debug("Preflight from %s rejected: header %s", origin, header)
                return Response(status_code=status.HTTP_403_FORBIDDEN)

        return Response(
            status_code=status.HTTP_200_OK,
            headers={
                "Access-Control-Allow-Origin": origin,
                "Access-Control-Allow-Methods": ", ".join(self._allowed_methods),
                "Access-Control-Allow-Headers": ", ".join(self._allowed_headers),
                "Access-Control-Max-Age": str(self._max_age),
            },
        )
