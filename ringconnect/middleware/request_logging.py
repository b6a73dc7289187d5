from fastapi import Request
import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("app")

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        method = request.method
        path = request.url.path
        query_string = request.url.query

        logger.info(f"Request: {method} {path} {query_string}".rstrip())

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(f"Response: {method} {path} -> {response.status_code} in {process_time:.4f}s")
        response.headers["X-Process-Time"] = f"{process_time:.4f}"

        return response
