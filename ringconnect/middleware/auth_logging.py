from fastapi import Request
import logging
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("app")

# Prefixes that always need a bearer token
PROTECTED_PREFIXES = ("/users/me", "/notifications", "/messages", "/mentorship/bookings", "/sparring-requests")

class AuthLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        has_auth = bool(request.headers.get("Authorization"))

        if not has_auth and any(prefix in path for prefix in PROTECTED_PREFIXES):
            logger.warning(f"Protected endpoint {path} accessed without auth header")

        response = await call_next(request)

        if response.status_code in (401, 403):
            logger.warning(f"Auth error: {response.status_code} on {request.method} {path}")

        return response
