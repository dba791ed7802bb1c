"""
Tests for accounts models and the viewer context.
"""

import pytest

from accounts.context import viewer_from_user
from accounts.models import Candidate, Industry, generate_anonymous_id
from conftest import (
    AccountFactory,
    CandidateFactory,
    CandidateSkillFactory,
    CompleteCandidateFactory,
    IndustryFactory,
    UserFactory,
)
from policy.choices import UserType


def test_generate_anonymous_id_is_uppercase_hex():
    value = generate_anonymous_id()
    assert len(value) == 12
    assert value == value.upper()
    int(value, 16)


@pytest.mark.django_db
class TestCandidate:

    def test_anonymous_id_assigned_on_create(self):
        candidate = CandidateFactory()
        assert candidate.anonymous_id
        assert Candidate.objects.get(pk=candidate.pk).anonymous_id == candidate.anonymous_id

    def test_is_premium_follows_account(self):
        candidate = CandidateFactory()
        assert candidate.is_premium is False

        candidate.user.account.is_premium = True
        candidate.user.account.save()
        assert Candidate.objects.get(pk=candidate.pk).is_premium is True

    def test_is_premium_false_without_account(self):
        candidate = Candidate.objects.create(user=UserFactory())
        assert candidate.is_premium is False

    def test_completion_counts_skills_from_database(self):
        candidate = CompleteCandidateFactory()
        assert candidate.get_completion().percentage == 85

        for name in ('Python', 'Django', 'SQL'):
            CandidateSkillFactory(candidate=candidate, skill_name=name)

        result = Candidate.objects.get(pk=candidate.pk).get_completion()
        assert result.percentage == 100
        assert result.is_complete is True

    def test_completion_threshold_is_configurable(self):
        candidate = CompleteCandidateFactory()
        assert candidate.get_completion(threshold=90).is_complete is False


@pytest.mark.django_db
class TestIndustry:

    def test_company_name_hidden_by_default(self):
        company = IndustryFactory()
        assert company.show_company_name is False

    def test_anonymous_ids_are_unique(self):
        first = IndustryFactory()
        second = IndustryFactory()
        assert first.anonymous_id != second.anonymous_id

    def test_anonymous_id_survives_updates(self):
        company = IndustryFactory()
        original = company.anonymous_id

        company.company_name = 'Renamed Labs'
        company.save()

        assert Industry.objects.get(pk=company.pk).anonymous_id == original


@pytest.mark.django_db
class TestViewerContext:

    def test_anonymous_user(self):
        from django.contrib.auth.models import AnonymousUser

        viewer = viewer_from_user(AnonymousUser())
        assert viewer.is_authenticated is False
        assert viewer.is_premium is False

    def test_none_user(self):
        assert viewer_from_user(None).is_authenticated is False

    def test_candidate_user(self):
        candidate = CandidateFactory(is_premium=True)
        viewer = viewer_from_user(candidate.user)

        assert viewer.is_authenticated is True
        assert viewer.is_premium is True
        assert viewer.is_candidate is True

    def test_institute_user(self):
        user = AccountFactory(user_type=UserType.INSTITUTE).user
        viewer = viewer_from_user(user)

        assert viewer.is_institute is True
        assert viewer.is_candidate is False

    def test_user_without_account(self):
        viewer = viewer_from_user(UserFactory())

        assert viewer.is_authenticated is True
        assert viewer.user_type is None
