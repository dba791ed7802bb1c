"""
Accounts Models.

Identity rows attached to Django users:
- Account: user type and subscription flag supplied by the identity provider
- Candidate: student profile plus skills
- Industry: company profile with its disclosure preference
"""

import secrets

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from core.db.models import TimestampMixin
from policy.choices import Proficiency, UserType
from policy.completion import DEFAULT_COMPLETE_THRESHOLD, completion


def generate_anonymous_id() -> str:
    """Opaque identifier used to build redacted display names."""
    return secrets.token_hex(6).upper()


class Account(TimestampMixin):
    """
    Subscription and role of a user.

    ``is_premium`` lives here rather than on the profiles so one flag covers
    every profile type.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='account'
    )
    user_type = models.CharField(
        max_length=20,
        choices=UserType.choices,
        default=UserType.CANDIDATE,
        db_index=True
    )
    is_premium = models.BooleanField(default=False)

    class Meta:
        verbose_name = _('Account')
        verbose_name_plural = _('Accounts')

    def __str__(self):
        return f"{self.user} ({self.user_type})"


class Candidate(TimestampMixin):
    """Student profile. Completion is computed on read, never stored."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='candidate'
    )
    anonymous_id = models.CharField(
        max_length=32,
        unique=True,
        default=generate_anonymous_id,
        editable=False
    )

    # Basic info
    first_name = models.CharField(max_length=100, blank=True)
    last_name = models.CharField(max_length=100, blank=True)
    phone = models.CharField(max_length=30, blank=True)
    date_of_birth = models.DateField(null=True, blank=True)
    bio = models.TextField(blank=True)

    # Location
    city = models.CharField(max_length=100, blank=True)
    state = models.CharField(max_length=100, blank=True)
    country = models.CharField(max_length=100, blank=True)

    # Academics
    college = models.CharField(max_length=255, blank=True)
    degree = models.CharField(max_length=100, blank=True)
    field_of_study = models.CharField(max_length=150, blank=True)
    graduation_year = models.PositiveSmallIntegerField(null=True, blank=True)
    cgpa = models.DecimalField(
        max_digits=4,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0), MaxValueValidator(10)]
    )

    # Professional links
    resume_url = models.URLField(blank=True)
    portfolio_url = models.URLField(blank=True)
    linkedin_url = models.URLField(blank=True)
    github_url = models.URLField(blank=True)

    class Meta:
        verbose_name = _('Candidate')
        verbose_name_plural = _('Candidates')

    def __str__(self):
        name = f"{self.first_name} {self.last_name}".strip()
        return name or f"Candidate {self.anonymous_id}"

    @property
    def is_premium(self) -> bool:
        account = getattr(self.user, 'account', None)
        return bool(account and account.is_premium)

    def get_completion(self, threshold: int = DEFAULT_COMPLETE_THRESHOLD):
        return completion(self, threshold=threshold)


class CandidateSkill(models.Model):
    candidate = models.ForeignKey(
        Candidate,
        on_delete=models.CASCADE,
        related_name='skills'
    )
    skill_name = models.CharField(max_length=100)
    proficiency = models.CharField(
        max_length=20,
        choices=Proficiency.choices,
        default=Proficiency.BEGINNER
    )
    years_of_experience = models.PositiveSmallIntegerField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['created_at', 'id']
        constraints = [
            models.UniqueConstraint(
                fields=['candidate', 'skill_name'],
                name='unique_candidate_skill'
            ),
        ]

    def __str__(self):
        return f"{self.skill_name} ({self.proficiency})"


class Industry(TimestampMixin):
    """
    Company profile.

    ``anonymous_id`` is assigned once and never changes; the redacted name is
    always derived from it at read time.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='industry'
    )
    company_name = models.CharField(max_length=255)
    industry = models.CharField(
        max_length=100,
        blank=True,
        help_text=_("Sector, e.g. Fintech")
    )
    description = models.TextField(blank=True)
    website = models.URLField(blank=True)
    contact_email = models.EmailField(blank=True)
    phone = models.CharField(max_length=30, blank=True)
    city = models.CharField(max_length=100, blank=True)
    state = models.CharField(max_length=100, blank=True)
    country = models.CharField(max_length=100, blank=True)

    is_verified = models.BooleanField(default=False)
    show_company_name = models.BooleanField(
        default=False,
        help_text=_("Disclose the company name to non-premium candidates")
    )
    anonymous_id = models.CharField(
        max_length=32,
        unique=True,
        default=generate_anonymous_id,
        editable=False
    )

    class Meta:
        verbose_name = _('Industry')
        verbose_name_plural = _('Industries')

    def __str__(self):
        return self.company_name

    @property
    def is_premium(self) -> bool:
        account = getattr(self.user, 'account', None)
        return bool(account and account.is_premium)
