"""Correlation ID middleware for request tracing"""
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from src.shared.context import set_correlation_id

CORRELATION_ID_HEADER = "X-Correlation-ID"


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """
    Add correlation IDs to all requests for tracing.

    Features:
    - Accepts X-Correlation-ID header from clients
    - Generates unique correlation ID when the header is missing
    - Adds correlation ID to response headers
    - Makes correlation ID available to logging system
    """

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_ID_HEADER) or str(uuid.uuid4())

        # Store in context variable (accessible throughout request lifecycle)
        set_correlation_id(correlation_id)

        response = await call_next(request)

        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response
