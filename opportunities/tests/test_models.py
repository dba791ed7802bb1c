"""
Tests for opportunity querysets and counters.
"""

import pytest
from django.db import IntegrityError

from conftest import (
    FreelancingOpportunityFactory,
    OpportunityFactory,
    PremiumOnlyOpportunityFactory,
    SavedOpportunityFactory,
)
from opportunities.models import Opportunity
from policy.choices import ApprovalStatus, UserType
from policy.visibility import ViewerContext, is_visible


FREE_CANDIDATE = ViewerContext(is_authenticated=True, is_premium=False, user_type=UserType.CANDIDATE)
PREMIUM_CANDIDATE = ViewerContext(is_authenticated=True, is_premium=True, user_type=UserType.CANDIDATE)
PREMIUM_INSTITUTE = ViewerContext(is_authenticated=True, is_premium=True, user_type=UserType.INSTITUTE)


@pytest.mark.django_db
class TestOpportunityQuerySet:

    @pytest.fixture
    def catalog(self):
        return {
            'internship': OpportunityFactory(),
            'freelancing': FreelancingOpportunityFactory(),
            'premium_only': PremiumOnlyOpportunityFactory(),
            'pending': OpportunityFactory(approval_status=ApprovalStatus.PENDING),
            'inactive': OpportunityFactory(is_active=False),
        }

    def test_listable_requires_approved_and_active(self, catalog):
        listed = set(Opportunity.objects.listable())
        assert catalog['pending'] not in listed
        assert catalog['inactive'] not in listed
        assert catalog['internship'] in listed

    def test_public_hides_gated_listings(self, catalog):
        assert list(Opportunity.objects.public()) == [catalog['internship']]

    def test_authenticated_candidate_sees_everything_listable(self, catalog):
        listed = set(Opportunity.objects.listable().visible_to(FREE_CANDIDATE))
        assert listed == {catalog['internship'], catalog['freelancing'], catalog['premium_only']}

    def test_institute_never_sees_freelancing(self, catalog):
        listed = set(Opportunity.objects.listable().visible_to(PREMIUM_INSTITUTE))
        assert catalog['freelancing'] not in listed
        assert catalog['premium_only'] in listed

    @pytest.mark.parametrize('viewer', [
        ViewerContext.anonymous(),
        FREE_CANDIDATE,
        PREMIUM_CANDIDATE,
        PREMIUM_INSTITUTE,
    ])
    def test_queryset_agrees_with_is_visible(self, catalog, viewer):
        listable = list(Opportunity.objects.listable())
        expected = {o.pk for o in listable if is_visible(o, viewer)}
        actual = set(Opportunity.objects.listable().visible_to(viewer).values_list('pk', flat=True))
        assert actual == expected

    def test_search_is_case_insensitive(self):
        match = OpportunityFactory(title='Backend Python Intern')
        OpportunityFactory(title='Design Intern', description='Figma', requirements='')

        assert list(Opportunity.objects.search('python')) == [match]

    def test_blank_search_is_ignored(self):
        OpportunityFactory.create_batch(2)
        assert Opportunity.objects.search('  ').count() == 2

    def test_newest_first(self):
        older = OpportunityFactory()
        newer = OpportunityFactory()
        assert list(Opportunity.objects.all()) == [newer, older]


@pytest.mark.django_db
class TestOpportunityCounters:

    def test_increment_view_count(self):
        opportunity = OpportunityFactory()
        opportunity.increment_view_count()
        opportunity.increment_view_count()

        opportunity.refresh_from_db()
        assert opportunity.view_count == 2

    def test_increment_application_count(self):
        opportunity = OpportunityFactory()
        opportunity.increment_application_count()

        opportunity.refresh_from_db()
        assert opportunity.application_count == 1


@pytest.mark.django_db
class TestSavedOpportunity:

    def test_pair_is_unique(self):
        saved = SavedOpportunityFactory()
        with pytest.raises(IntegrityError):
            SavedOpportunityFactory(candidate=saved.candidate, opportunity=saved.opportunity)
