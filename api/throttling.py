"""
API Throttling - Rate limiting for write-heavy candidate actions.

Rates are configured in ``REST_FRAMEWORK['DEFAULT_THROTTLE_RATES']`` under
the throttle's scope.
"""

from rest_framework.throttling import UserRateThrottle


class ApplyRateThrottle(UserRateThrottle):
    """Limits how often one user may submit applications."""

    scope = 'apply'

    def allow_request(self, request, view):
        # Reads (status lookups) are not limited.
        if request.method != 'POST':
            return True
        return super().allow_request(request, view)
