"""
NextIntern Test Configuration - pytest fixtures and factories

This module provides:
- pytest-django configuration (see ``[tool.pytest.ini_options]``)
- factory_boy factories for every model
- Shared fixtures for the three account roles and API clients

RUNNING TESTS:
# Run all tests
pytest -v

# Pure policy tests only (no database)
pytest policy/ -v

# Run by app
pytest applications/ -v
"""

import uuid
from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

import factory
from factory.django import DjangoModelFactory

from policy.choices import (
    ApplicationStatus,
    ApprovalStatus,
    OpportunityType,
    Proficiency,
    UserType,
    WorkType,
)


# ============================================================================
# USER / ACCOUNT FACTORIES
# ============================================================================

class UserFactory(DjangoModelFactory):
    """Factory for the Django user model."""

    class Meta:
        model = 'auth.User'
        django_get_or_create = ('username',)

    username = factory.LazyAttribute(lambda o: f"user_{uuid.uuid4().hex[:8]}")
    email = factory.LazyAttribute(lambda o: f"{o.username}@example.com")
    first_name = factory.Faker('first_name')
    last_name = factory.Faker('last_name')
    password = factory.PostGenerationMethodCall('set_password', 'testpass123')
    is_active = True


class AccountFactory(DjangoModelFactory):
    """Role and subscription flag of a user."""

    class Meta:
        model = 'accounts.Account'

    user = factory.SubFactory(UserFactory)
    user_type = UserType.CANDIDATE
    is_premium = False


def _ensure_account(user, user_type, is_premium):
    from accounts.models import Account

    Account.objects.update_or_create(
        user=user,
        defaults={'user_type': user_type, 'is_premium': bool(is_premium)},
    )


class CandidateFactory(DjangoModelFactory):
    """
    Candidate profile; also creates the CANDIDATE account.

    ``CandidateFactory(is_premium=True)`` gives a premium candidate.
    """

    class Meta:
        model = 'accounts.Candidate'

    user = factory.SubFactory(UserFactory)
    first_name = factory.Faker('first_name')
    last_name = factory.Faker('last_name')

    @factory.post_generation
    def is_premium(obj, create, extracted, **kwargs):
        if create:
            _ensure_account(obj.user, UserType.CANDIDATE, extracted)


class CompleteCandidateFactory(CandidateFactory):
    """Candidate with every tracked profile field filled (skills excluded)."""

    phone = '+91 98765 43210'
    date_of_birth = factory.LazyFunction(lambda: timezone.now().date() - timedelta(days=365 * 21))
    bio = factory.Faker('sentence')
    city = 'Pune'
    state = 'Maharashtra'
    country = 'India'
    college = 'College of Engineering'
    degree = 'B.Tech'
    field_of_study = 'Computer Science'
    graduation_year = 2026
    cgpa = Decimal('8.40')
    resume_url = 'https://example.com/resume.pdf'
    portfolio_url = 'https://example.com'
    linkedin_url = 'https://linkedin.com/in/example'
    github_url = 'https://github.com/example'


class CandidateSkillFactory(DjangoModelFactory):

    class Meta:
        model = 'accounts.CandidateSkill'

    candidate = factory.SubFactory(CandidateFactory)
    skill_name = factory.Sequence(lambda n: f"Skill {n}")
    proficiency = Proficiency.INTERMEDIATE
    years_of_experience = 1


class IndustryFactory(DjangoModelFactory):
    """Company profile; also creates the INDUSTRY account."""

    class Meta:
        model = 'accounts.Industry'

    user = factory.SubFactory(UserFactory)
    company_name = factory.Faker('company')
    industry = 'Fintech'
    description = factory.Faker('text', max_nb_chars=300)
    website = 'https://company.example.com'
    contact_email = factory.LazyAttribute(lambda o: o.user.email)
    phone = '+91 20 1234 5678'
    city = 'Bengaluru'
    state = 'Karnataka'
    country = 'India'
    is_verified = True
    show_company_name = False

    @factory.post_generation
    def account(obj, create, extracted, **kwargs):
        if create:
            _ensure_account(obj.user, UserType.INDUSTRY, kwargs.get('is_premium', False))


class DisclosedIndustryFactory(IndustryFactory):
    """Company that opted into showing its name."""

    show_company_name = True


# ============================================================================
# OPPORTUNITY FACTORIES
# ============================================================================

class CategoryFactory(DjangoModelFactory):

    class Meta:
        model = 'opportunities.Category'
        django_get_or_create = ('slug',)

    name = factory.Sequence(lambda n: f"Category {n}")
    slug = factory.LazyAttribute(lambda o: o.name.lower().replace(' ', '-'))
    color = '#3366ff'


class LocationFactory(DjangoModelFactory):

    class Meta:
        model = 'opportunities.Location'
        django_get_or_create = ('city', 'state', 'country')

    city = 'Pune'
    state = 'Maharashtra'
    country = 'India'


class OpportunityFactory(DjangoModelFactory):
    """Approved, active internship open for a week."""

    class Meta:
        model = 'opportunities.Opportunity'

    industry = factory.SubFactory(IndustryFactory)
    category = factory.SubFactory(CategoryFactory)
    location = factory.SubFactory(LocationFactory)

    title = factory.Faker('job')
    description = factory.Faker('text', max_nb_chars=500)
    requirements = factory.Faker('text', max_nb_chars=200)
    type = OpportunityType.INTERNSHIP
    work_type = WorkType.REMOTE
    stipend = Decimal('15000.00')
    duration = '3 months'

    is_active = True
    is_premium_only = False
    approval_status = ApprovalStatus.APPROVED
    application_deadline = factory.LazyFunction(lambda: timezone.now() + timedelta(days=7))
    start_date = factory.LazyFunction(lambda: (timezone.now() + timedelta(days=30)).date())


class FreelancingOpportunityFactory(OpportunityFactory):
    type = OpportunityType.FREELANCING


class PremiumOnlyOpportunityFactory(OpportunityFactory):
    is_premium_only = True


class OpportunitySkillFactory(DjangoModelFactory):

    class Meta:
        model = 'opportunities.OpportunitySkill'

    opportunity = factory.SubFactory(OpportunityFactory)
    skill_name = factory.Sequence(lambda n: f"Skill {n}")
    is_required = True
    min_level = Proficiency.BEGINNER


class SavedOpportunityFactory(DjangoModelFactory):

    class Meta:
        model = 'opportunities.SavedOpportunity'

    candidate = factory.SubFactory(CandidateFactory)
    opportunity = factory.SubFactory(OpportunityFactory)


# ============================================================================
# APPLICATION FACTORIES
# ============================================================================

class ApplicationFactory(DjangoModelFactory):
    """Application row created directly, bypassing the eligibility gate."""

    class Meta:
        model = 'applications.Application'

    candidate = factory.SubFactory(CandidateFactory)
    opportunity = factory.SubFactory(OpportunityFactory)
    industry = factory.SelfAttribute('opportunity.industry')
    status = ApplicationStatus.PENDING
    cover_letter = factory.Faker('paragraph')


# ============================================================================
# FACTORY FIXTURES
# ============================================================================

@pytest.fixture
def user_factory(db):
    """Provide UserFactory for tests."""
    return UserFactory


@pytest.fixture
def candidate_factory(db):
    """Provide CandidateFactory for tests."""
    return CandidateFactory


@pytest.fixture
def industry_factory(db):
    """Provide IndustryFactory for tests."""
    return IndustryFactory


@pytest.fixture
def opportunity_factory(db):
    """Provide OpportunityFactory for tests."""
    return OpportunityFactory


@pytest.fixture
def application_factory(db):
    """Provide ApplicationFactory for tests."""
    return ApplicationFactory


# ============================================================================
# COMMON TEST FIXTURES
# ============================================================================

@pytest.fixture
def candidate(db):
    """Free candidate."""
    return CandidateFactory()


@pytest.fixture
def premium_candidate(db):
    return CandidateFactory(is_premium=True)


@pytest.fixture
def industry(db):
    """Company that keeps its name hidden."""
    return IndustryFactory()


@pytest.fixture
def institute_user(db):
    """User with an INSTITUTE account."""
    return AccountFactory(user_type=UserType.INSTITUTE).user


@pytest.fixture
def opportunity(db, industry):
    return OpportunityFactory(industry=industry)


@pytest.fixture
def freelancing_opportunity(db, industry):
    return FreelancingOpportunityFactory(industry=industry)


@pytest.fixture
def premium_only_opportunity(db, industry):
    return PremiumOnlyOpportunityFactory(industry=industry)


@pytest.fixture
def api_client(db):
    """Provide a DRF API test client."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def make_client(db):
    """Build an API client authenticated as the given user."""
    from rest_framework.test import APIClient

    def _make(user):
        client = APIClient()
        client.force_authenticate(user=user)
        return client

    return _make


@pytest.fixture
def candidate_client(make_client, candidate):
    return make_client(candidate.user)


@pytest.fixture
def premium_client(make_client, premium_candidate):
    return make_client(premium_candidate.user)


@pytest.fixture
def industry_client(make_client, industry):
    return make_client(industry.user)
