"""
API Exceptions - Custom Exception Classes for the NextIntern API

This module provides the exception classes raised by views:
- Application eligibility outcomes (closed, deadline, premium, duplicate)
- Resource and state exceptions
- Role exceptions

All exceptions render through ``api.base.custom_exception_handler``:
{
    "success": false,
    "data": {...extra data...} | null,
    "message": "Human-readable message",
    "error_code": "MACHINE_READABLE_CODE",
    "errors": [...],
    "meta": {...}
}
"""

import logging
from typing import Any, Dict, List

from django.utils.translation import gettext_lazy as _
from rest_framework import status
from rest_framework.exceptions import APIException

from core.conf import get_upgrade_url
from policy.eligibility import EligibilityFailure, EligibilityResult

logger = logging.getLogger(__name__)


# =============================================================================
# BASE EXCEPTIONS
# =============================================================================

class NextInternAPIException(APIException):
    """
    Base exception for all NextIntern API errors.

    Attributes:
        status_code: HTTP status code
        default_detail: Default error message
        default_code: Machine-readable error code
        error_code: Specific error code for this instance
        extra_data: Additional data to include in response
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = _("An unexpected error occurred.")
    default_code = "ERROR"

    def __init__(
        self,
        detail: str = None,
        code: str = None,
        extra_data: Dict = None,
    ):
        self.error_code = code or self.default_code
        self.extra_data = extra_data or {}

        if detail is None:
            detail = str(self.default_detail)

        super().__init__(detail=detail, code=code)


# =============================================================================
# APPLICATION ELIGIBILITY EXCEPTIONS
# =============================================================================

class OpportunityClosedError(NextInternAPIException):
    """Raised when the opportunity no longer accepts applications."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = _("This opportunity is no longer accepting applications.")
    default_code = "OPPORTUNITY_CLOSED"


class DeadlinePassedError(OpportunityClosedError):
    """Raised when the application deadline is in the past."""

    default_code = "DEADLINE_PASSED"


class PremiumRequiredError(NextInternAPIException):
    """Raised when a free account targets a premium-gated opportunity."""

    status_code = status.HTTP_402_PAYMENT_REQUIRED
    default_detail = _("Upgrade to premium to apply to this opportunity.")
    default_code = "PREMIUM_REQUIRED"

    def __init__(self, upgrade_url: str = None, **kwargs):
        extra_data = kwargs.pop('extra_data', {})
        extra_data['upgrade_url'] = upgrade_url or get_upgrade_url()
        super().__init__(extra_data=extra_data, **kwargs)


class AlreadyAppliedError(NextInternAPIException):
    """Raised when a non-withdrawn application already exists for the pair."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = _("You have already applied to this opportunity.")
    default_code = "ALREADY_APPLIED"

    def __init__(self, application_id: Any = None, application_status: str = None, **kwargs):
        extra_data = kwargs.pop('extra_data', {})
        if application_id is not None:
            extra_data['application_id'] = application_id
            extra_data['redirect_url'] = f"/candidate/applications/{application_id}"
        if application_status:
            extra_data['status'] = str(application_status)
        super().__init__(extra_data=extra_data, **kwargs)


def exception_for_eligibility(result: EligibilityResult) -> NextInternAPIException:
    """Translate a failed eligibility result into the exception the view raises."""
    failure = result.failure

    if failure == EligibilityFailure.OPPORTUNITY_CLOSED:
        return OpportunityClosedError()
    if failure == EligibilityFailure.DEADLINE_PASSED:
        return DeadlinePassedError()
    if failure == EligibilityFailure.PREMIUM_REQUIRED:
        return PremiumRequiredError()
    if failure == EligibilityFailure.ALREADY_APPLIED:
        return AlreadyAppliedError(
            application_id=result.existing_application_id,
            application_status=result.existing_status,
        )

    logger.error(f"No exception mapped for eligibility failure {failure!r}")
    return NextInternAPIException()


# =============================================================================
# RESOURCE EXCEPTIONS
# =============================================================================

class ResourceNotFoundError(NextInternAPIException):
    """Raised when a requested resource is not found."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = _("The requested resource was not found.")
    default_code = "NOT_FOUND"

    def __init__(self, resource_type: str = None, resource_id: Any = None, **kwargs):
        detail = str(self.default_detail)
        extra_data = kwargs.pop('extra_data', {})

        if resource_type:
            extra_data['resource_type'] = resource_type
            detail = f"{resource_type} not found."

        if resource_id:
            extra_data['resource_id'] = str(resource_id)
            detail = f"{resource_type or 'Resource'} with ID '{resource_id}' not found."

        super().__init__(detail=detail, extra_data=extra_data, **kwargs)


class ResourceStateError(NextInternAPIException):
    """Raised when a resource is in an invalid state for the operation."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = _("This operation cannot be performed on the resource in its current state.")
    default_code = "INVALID_STATE"

    def __init__(
        self,
        current_state: str = None,
        requested_state: str = None,
        allowed_states: List[str] = None,
        **kwargs
    ):
        detail = str(self.default_detail)
        extra_data = kwargs.pop('extra_data', {})

        if current_state:
            extra_data['current_state'] = str(current_state)
            detail = f"Resource is in '{current_state}' state."

        if requested_state:
            extra_data['requested_state'] = str(requested_state)
            detail = f"{detail} Cannot move to '{requested_state}'."

        if allowed_states is not None:
            extra_data['allowed_states'] = sorted(str(s) for s in allowed_states)

        super().__init__(detail=detail, extra_data=extra_data, **kwargs)


# =============================================================================
# PERMISSION EXCEPTIONS
# =============================================================================

class OwnershipRequiredError(NextInternAPIException):
    """Raised when user must own the resource."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = _("You can only perform this action on your own resources.")
    default_code = "OWNERSHIP_REQUIRED"
