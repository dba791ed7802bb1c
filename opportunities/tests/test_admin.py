"""
Tests for admin actions and display helpers.
"""

import pytest
from django.contrib.admin.sites import site

from accounts.admin import CandidateAdmin
from accounts.models import Candidate
from conftest import CompleteCandidateFactory, OpportunityFactory
from opportunities.admin import OpportunityAdmin
from opportunities.models import Opportunity
from policy.choices import ApprovalStatus


@pytest.mark.django_db
class TestAdmin:

    def test_approve_action(self, rf, admin_user):
        pending = OpportunityFactory(approval_status=ApprovalStatus.PENDING)
        request = rf.post('/admin/')
        request.user = admin_user

        OpportunityAdmin(Opportunity, site).approve(request, Opportunity.objects.filter(pk=pending.pk))

        pending.refresh_from_db()
        assert pending.approval_status == ApprovalStatus.APPROVED
        assert pending in Opportunity.objects.public()

    def test_completion_badge(self):
        candidate = CompleteCandidateFactory()

        badge = CandidateAdmin(Candidate, site).completion_badge(candidate)

        assert '85%' in badge
        assert 'green' in badge
