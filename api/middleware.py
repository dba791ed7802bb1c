"""
API Middleware - Request Processing for the NextIntern API

- RequestIDMiddleware: Generates unique request IDs for tracing

Request IDs tie log lines to API responses.
"""

import logging
import uuid

from django.http import HttpRequest, HttpResponse
from django.utils.deprecation import MiddlewareMixin

from .logging import reset_request_id, set_request_id

logger = logging.getLogger(__name__)


# =============================================================================
# REQUEST ID MIDDLEWARE
# =============================================================================

class RequestIDMiddleware(MiddlewareMixin):
    """
    Middleware that generates and attaches a unique request ID to each request.

    Features:
    - Generates UUID4 request IDs for all requests
    - Respects existing X-Request-ID header from client/load balancer
    - Adds X-Request-ID header to all responses
    - Makes request ID available as request.request_id and to log records

    Usage in settings.py:
        MIDDLEWARE = [
            'api.middleware.RequestIDMiddleware',
            ...
        ]
    """

    REQUEST_ID_HEADER = 'HTTP_X_REQUEST_ID'
    RESPONSE_HEADER = 'X-Request-ID'

    def process_request(self, request: HttpRequest) -> None:
        """Generate or extract request ID and attach to request object."""
        request_id = request.META.get(self.REQUEST_ID_HEADER)

        if not request_id:
            request_id = str(uuid.uuid4())

        request.request_id = request_id
        request._request_id_token = set_request_id(request_id)

        logger.debug(f"Request {request_id}: {request.method} {request.path}")

    def process_response(
        self, request: HttpRequest, response: HttpResponse
    ) -> HttpResponse:
        """Add request ID header to response for client correlation."""
        request_id = getattr(request, 'request_id', None)

        if request_id:
            response[self.RESPONSE_HEADER] = request_id

        token = getattr(request, '_request_id_token', None)
        if token is not None:
            reset_request_id(token)

        return response
