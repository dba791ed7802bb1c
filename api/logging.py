"""
API Logging - Request-aware logging filter.

Adds the current request id to every log record so that log lines can be
matched with the ``X-Request-ID`` header a client received.

Usage in settings.py:
    LOGGING = {
        'filters': {
            'request_context': {
                '()': 'api.logging.RequestContextFilter',
            },
        },
        'handlers': {
            'console': {
                'filters': ['request_context'],
                ...
            },
        },
    }
"""

import logging
from contextvars import ContextVar, Token
from typing import Optional

_request_id_var: ContextVar[Optional[str]] = ContextVar('request_id', default=None)

NO_REQUEST = '-'


def set_request_id(request_id: str) -> Token:
    return _request_id_var.set(request_id)


def reset_request_id(token: Token) -> None:
    _request_id_var.reset(token)


def get_request_id() -> Optional[str]:
    return _request_id_var.get()


class RequestContextFilter(logging.Filter):
    """Logging filter that adds ``request_id`` to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or NO_REQUEST
        return True
