"""
NexParcel Backend — Access Log Middleware
===========================================

What:  One log line per request: method, path, status, duration, request
       ID, client IP.
How:   Level follows the status class (5xx ERROR, 4xx WARNING, else INFO),
       so auth failures and missing bookings stand out without alerting.

Example line:
    2024-01-15T12:00:00 [WARNING] nexparcel.access: GET /users 403 4.2ms [1a2b3c4d] from 10.0.0.7

Never logged: request bodies (addresses, phone numbers) and the
Authorization header.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from nexparcel.middleware.request_id import request_id_var

logger = logging.getLogger("nexparcel.access")

# Probed every few seconds by the load balancer
QUIET_PATHS = {"/health"}


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request/response pair with its duration."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")
        status = response.status_code
        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
