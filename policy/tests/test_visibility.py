"""
Tests for opportunity visibility and redaction.
"""

from types import SimpleNamespace

import pytest

from policy.choices import OpportunityType, UserType
from policy.visibility import ViewerContext, can_apply, filter_visible, hidden_listings, is_visible, redact

PUBLIC = ViewerContext.anonymous()
FREE_CANDIDATE = ViewerContext(is_authenticated=True, is_premium=False, user_type=UserType.CANDIDATE)
PREMIUM_CANDIDATE = ViewerContext(is_authenticated=True, is_premium=True, user_type=UserType.CANDIDATE)
PREMIUM_INSTITUTE = ViewerContext(is_authenticated=True, is_premium=True, user_type=UserType.INSTITUTE)


def make_company(**overrides):
    data = {
        'company_name': 'Globex',
        'industry': 'Fintech',
        'is_verified': True,
        'show_company_name': False,
        'anonymous_id': 'ANON123456',
        'description': 'We build ledgers.',
        'city': 'Pune',
        'state': 'MH',
        'country': 'India',
        'website': 'https://globex.example.com',
        'contact_email': 'jobs@globex.example.com',
        'phone': '+911234567890',
    }
    data.update(overrides)
    return SimpleNamespace(**data)


def make_opportunity(**overrides):
    data = {
        'id': 1,
        'title': 'Backend Intern',
        'type': OpportunityType.INTERNSHIP,
        'is_premium_only': False,
        'industry': make_company(),
    }
    data.update(overrides)
    return SimpleNamespace(**data)


class TestIsVisible:

    @pytest.mark.parametrize('overrides', [
        {'type': OpportunityType.FREELANCING},
        {'is_premium_only': True},
    ])
    def test_public_never_enumerates_gated_listings(self, overrides):
        assert is_visible(make_opportunity(**overrides), PUBLIC) is False

    def test_public_sees_regular_listings(self):
        assert is_visible(make_opportunity(), PUBLIC) is True
        assert is_visible(make_opportunity(type=OpportunityType.PROJECT), PUBLIC) is True

    @pytest.mark.parametrize('overrides', [
        {'type': OpportunityType.FREELANCING},
        {'is_premium_only': True},
    ])
    def test_dashboard_shows_gated_listings_locked(self, overrides):
        opportunity = make_opportunity(**overrides)
        assert is_visible(opportunity, FREE_CANDIDATE) is True
        assert can_apply(opportunity, FREE_CANDIDATE) is False
        assert can_apply(opportunity, PREMIUM_CANDIDATE) is True

    def test_institutes_never_see_freelancing(self):
        freelancing = make_opportunity(type=OpportunityType.FREELANCING)
        assert is_visible(freelancing, PREMIUM_INSTITUTE) is False
        assert is_visible(make_opportunity(is_premium_only=True), PREMIUM_INSTITUTE) is True

    def test_hidden_listings_matches_is_visible(self):
        hidden = hidden_listings(PUBLIC)
        assert OpportunityType.FREELANCING in hidden.types
        assert hidden.premium_only is True
        assert hidden_listings(FREE_CANDIDATE).types == frozenset()


class TestCanApply:

    def test_anonymous_viewer_cannot_apply(self):
        assert can_apply(make_opportunity(), PUBLIC) is False

    def test_non_candidate_cannot_apply(self):
        industry = ViewerContext(is_authenticated=True, is_premium=True, user_type=UserType.INDUSTRY)
        assert can_apply(make_opportunity(), industry) is False

    def test_free_candidate_can_apply_to_regular_listing(self):
        assert can_apply(make_opportunity(), FREE_CANDIDATE) is True


class TestRedact:

    def test_anonymous_company_hides_private_block(self):
        view = redact(make_opportunity(), FREE_CANDIDATE)

        assert view.display_name == 'Company #456'
        assert view.show_details is False
        assert view.company['industry'] == 'Fintech'
        for field in ('description', 'city', 'state', 'country', 'website', 'contact_email', 'phone'):
            assert view.company[field] is None

    def test_premium_viewer_sees_everything(self):
        view = redact(make_opportunity(), PREMIUM_CANDIDATE)

        assert view.display_name == 'Globex'
        assert view.show_details is True
        assert view.company['city'] == 'Pune'
        assert view.company['contact_email'] == 'jobs@globex.example.com'

    def test_disclosed_company_shown_to_free_viewer(self):
        opportunity = make_opportunity(industry=make_company(show_company_name=True))
        view = redact(opportunity, FREE_CANDIDATE)

        assert view.display_name == 'Globex'
        assert view.show_details is True

    def test_view_exposes_original_fields(self):
        view = redact(make_opportunity(), PUBLIC)
        assert view.title == 'Backend Intern'
        assert view.type == OpportunityType.INTERNSHIP

    def test_missing_company_degrades_to_placeholder(self):
        view = redact(make_opportunity(industry=None), PREMIUM_CANDIDATE)

        assert view.display_name == 'Company #000'
        assert view.show_details is False
        assert view.company['description'] is None


class TestFilterVisible:

    def test_public_feed_drops_gated_and_keeps_order(self):
        opportunities = [
            make_opportunity(id=1),
            make_opportunity(id=2, type=OpportunityType.FREELANCING),
            make_opportunity(id=3, is_premium_only=True),
            make_opportunity(id=4, type=OpportunityType.PROJECT),
        ]
        views = filter_visible(opportunities, PUBLIC)
        assert [view.id for view in views] == [1, 4]

    def test_dashboard_feed_keeps_everything(self):
        opportunities = [
            make_opportunity(id=1),
            make_opportunity(id=2, type=OpportunityType.FREELANCING),
        ]
        views = filter_visible(opportunities, FREE_CANDIDATE)
        assert [(view.id, view.can_apply) for view in views] == [(1, True), (2, False)]
