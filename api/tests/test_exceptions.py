"""
Tests for the API error layer: eligibility translation, the exception
handler envelope and request ids.
"""

import logging

import pytest
from django.test import override_settings
from django.urls import reverse
from rest_framework import status

from api.exceptions import (
    AlreadyAppliedError,
    DeadlinePassedError,
    OpportunityClosedError,
    PremiumRequiredError,
    ResourceStateError,
    exception_for_eligibility,
)
from api.logging import RequestContextFilter, reset_request_id, set_request_id
from policy.eligibility import EligibilityFailure, EligibilityResult


class TestExceptionForEligibility:

    def test_closed(self):
        exc = exception_for_eligibility(EligibilityResult.denied(EligibilityFailure.OPPORTUNITY_CLOSED))
        assert isinstance(exc, OpportunityClosedError)
        assert exc.status_code == status.HTTP_400_BAD_REQUEST
        assert exc.error_code == 'OPPORTUNITY_CLOSED'

    def test_deadline(self):
        exc = exception_for_eligibility(EligibilityResult.denied(EligibilityFailure.DEADLINE_PASSED))
        assert isinstance(exc, DeadlinePassedError)
        assert exc.status_code == status.HTTP_400_BAD_REQUEST
        assert exc.error_code == 'DEADLINE_PASSED'

    @override_settings(NEXTINTERN_UPGRADE_URL='/plans')
    def test_premium(self):
        exc = exception_for_eligibility(EligibilityResult.denied(EligibilityFailure.PREMIUM_REQUIRED))
        assert isinstance(exc, PremiumRequiredError)
        assert exc.status_code == status.HTTP_402_PAYMENT_REQUIRED
        assert exc.extra_data == {'upgrade_url': '/plans'}

    def test_already_applied(self):
        result = EligibilityResult(
            ok=False,
            failure=EligibilityFailure.ALREADY_APPLIED,
            existing_application_id=42,
            existing_status='REVIEWED',
        )
        exc = exception_for_eligibility(result)

        assert isinstance(exc, AlreadyAppliedError)
        assert exc.status_code == status.HTTP_409_CONFLICT
        assert exc.extra_data == {
            'application_id': 42,
            'redirect_url': '/candidate/applications/42',
            'status': 'REVIEWED',
        }


class TestResourceStateError:

    def test_extra_data(self):
        exc = ResourceStateError(
            current_state='SELECTED',
            requested_state='WITHDRAWN',
            allowed_states=[],
        )

        assert exc.status_code == status.HTTP_409_CONFLICT
        assert exc.extra_data == {
            'current_state': 'SELECTED',
            'requested_state': 'WITHDRAWN',
            'allowed_states': [],
        }


class TestRequestContextFilter:

    def test_adds_request_id(self):
        record = logging.LogRecord('test', logging.INFO, __file__, 1, 'msg', (), None)
        token = set_request_id('abc-123')
        try:
            RequestContextFilter().filter(record)
        finally:
            reset_request_id(token)

        assert record.request_id == 'abc-123'

    def test_outside_request(self):
        record = logging.LogRecord('test', logging.INFO, __file__, 1, 'msg', (), None)
        RequestContextFilter().filter(record)
        assert record.request_id == '-'


@pytest.mark.django_db
class TestEnvelope:

    def test_error_envelope(self, api_client):
        response = api_client.get(reverse('api:public-opportunity-detail', kwargs={'pk': 999999}))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert set(response.data) >= {'success', 'data', 'message', 'errors', 'error_code', 'meta'}
        assert response.data['success'] is False

    def test_request_id_echoed(self, api_client):
        response = api_client.get(
            reverse('api:public-opportunity-list'),
            HTTP_X_REQUEST_ID='req-1',
        )

        assert response['X-Request-ID'] == 'req-1'

    def test_request_id_generated(self, api_client):
        response = api_client.get(reverse('api:public-opportunity-list'))
        assert response['X-Request-ID']
