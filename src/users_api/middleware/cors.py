"""
Permissive CORS middleware
"""

import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from users_api.config.settings import CORS_ALLOW_ORIGIN, CORS_ALLOW_METHODS, CORS_ALLOW_HEADERS

logger = logging.getLogger(__name__)

class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds CORS headers to every response

    Starlette's CORSMiddleware only answers preflights that carry the
    Access-Control-Request-Method header and sends the methods and headers
    lists on preflight responses only, so the fixed header set is applied here.

    Preflight `OPTIONS` requests to any path are answered here with an
    empty 204 and never reach the router.
    """

    CORS_HEADERS = {
        "Access-Control-Allow-Origin": CORS_ALLOW_ORIGIN,
        "Access-Control-Allow-Methods": CORS_ALLOW_METHODS,
        "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
    }

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            logger.debug(f"Preflight answered for {request.url.path}")
            response = Response(status_code=204)
        else:
            response = await call_next(request)

        response.headers.update(self.CORS_HEADERS)
        return response
