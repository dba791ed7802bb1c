"""
API Base Classes - response envelope, pagination and error handling.

Every endpoint answers with the same envelope so clients can branch on
``success`` and ``error_code`` without inspecting status codes:

    {
        "success": bool,
        "data": {...} | [...] | null,
        "message": str | null,
        "errors": [...] | null,
        "error_code": str,            # errors only
        "meta": {"timestamp": ..., "request_id": ..., "pagination": {...}}
    }
"""

import logging
from typing import Any, Dict, List, Optional

from django.utils import timezone
from rest_framework import status
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response
from rest_framework.views import exception_handler

from .logging import get_request_id

logger = logging.getLogger(__name__)


def build_meta(extra: Optional[Dict] = None, request=None) -> Dict:
    meta = {'timestamp': timezone.now().isoformat()}
    request_id = getattr(request, 'request_id', None) or get_request_id()
    if request_id:
        meta['request_id'] = request_id
    if extra:
        meta.update(extra)
    return meta


def envelope(success: bool, data: Any = None, message: str = None, errors: List = None,
             error_code: str = None, meta: Dict = None, request=None) -> Dict:
    body = {
        'success': success,
        'data': data,
        'message': message,
        'errors': errors if errors is not None else ([] if not success else None),
        'meta': build_meta(meta, request),
    }
    if not success:
        body['error_code'] = error_code
    return body


# =============================================================================
# RESPONSE HELPERS
# =============================================================================

class APIResponse:
    """Shortcuts returning DRF responses wrapped in the standard envelope."""

    @staticmethod
    def success(data: Any = None, message: str = None, status_code: int = status.HTTP_200_OK,
                meta: Dict = None, request=None) -> Response:
        return Response(
            envelope(True, data=data, message=message, meta=meta, request=request),
            status=status_code,
        )

    @staticmethod
    def created(data: Any = None, message: str = 'Created.', meta: Dict = None, request=None) -> Response:
        return APIResponse.success(
            data=data,
            message=message,
            status_code=status.HTTP_201_CREATED,
            meta=meta,
            request=request,
        )

    @staticmethod
    def deleted() -> Response:
        return Response(status=status.HTTP_204_NO_CONTENT)

    @staticmethod
    def error(message: str = 'An error occurred', errors: List[Dict] = None,
              status_code: int = status.HTTP_400_BAD_REQUEST, error_code: str = 'ERROR',
              data: Any = None, meta: Dict = None, request=None) -> Response:
        return Response(
            envelope(False, data=data, message=message, errors=errors,
                     error_code=error_code, meta=meta, request=request),
            status=status_code,
        )


# =============================================================================
# PAGINATION
# =============================================================================

class StandardPagination(PageNumberPagination):
    """
    Page-number pagination rendered into the envelope.

    Query params: ``page`` (1-indexed) and ``page_size`` (default 20, max 100).
    """

    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100

    def get_paginated_response(self, data):
        paginator = self.page.paginator
        pagination = {
            'count': paginator.count,
            'page': self.page.number,
            'page_size': self.get_page_size(self.request),
            'total_pages': paginator.num_pages,
            'next': self.get_next_link(),
            'previous': self.get_previous_link(),
        }
        return Response(envelope(True, data=data, meta={'pagination': pagination}, request=self.request))


# =============================================================================
# EXCEPTION HANDLER
# =============================================================================

def _validation_errors(detail) -> List[Dict]:
    if isinstance(detail, dict):
        return [
            {'field': field, 'messages': messages if isinstance(messages, list) else [str(messages)]}
            for field, messages in detail.items()
        ]
    if isinstance(detail, list):
        return [{'field': 'non_field_errors', 'messages': detail}]
    return [{'field': 'non_field_errors', 'messages': [str(detail)]}]


def custom_exception_handler(exc, context):
    """
    Render every API error into the envelope.

    ``NextInternAPIException.extra_data`` becomes ``data`` so clients get
    e.g. the existing application id or the upgrade url next to the error.
    Anything DRF does not handle itself is logged and answered with 500.
    """
    request = context.get('request')
    response = exception_handler(exc, context)

    if response is None:
        logger.exception(f"Unhandled exception: {exc}")
        return APIResponse.error(
            message='An unexpected error occurred',
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code='INTERNAL_ERROR',
            request=request,
        )

    if isinstance(exc, DRFValidationError):
        errors = _validation_errors(exc.detail)
        response.data = envelope(
            False,
            message='Validation failed',
            errors=errors,
            error_code='VALIDATION_ERROR',
            request=request,
        )
        return response

    error_code = getattr(exc, 'error_code', None) or getattr(exc, 'default_code', 'ERROR')
    message = str(exc.detail) if hasattr(exc, 'detail') else str(exc)

    if response.status_code >= 500:
        logger.error(f"API error {error_code}: {message}")

    response.data = envelope(
        False,
        data=getattr(exc, 'extra_data', None) or None,
        message=message,
        error_code=error_code,
        request=request,
    )
    return response
