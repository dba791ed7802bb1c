"""
Opportunities Models.

Internships, projects and freelancing engagements posted by companies, plus
the candidate bookmark relation.

Visibility is decided by :mod:`policy.visibility`; the queryset methods here
translate the same rules into SQL so listings can be paginated in the
database.
"""

from django.db import models
from django.db.models import F, Q
from django.utils.translation import gettext_lazy as _

from accounts.models import Candidate, Industry
from core.db.models import TimestampMixin
from policy.choices import ApprovalStatus, OpportunityType, Proficiency, WorkType
from policy.visibility import ViewerContext, hidden_listings


class Category(models.Model):
    name = models.CharField(max_length=100, unique=True)
    slug = models.SlugField(max_length=100, unique=True)
    color = models.CharField(max_length=20, blank=True)

    class Meta:
        verbose_name_plural = _('Categories')
        ordering = ['name']

    def __str__(self):
        return self.name


class Location(models.Model):
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=100, blank=True)
    country = models.CharField(max_length=100)

    class Meta:
        ordering = ['country', 'state', 'city']
        constraints = [
            models.UniqueConstraint(fields=['city', 'state', 'country'], name='unique_location'),
        ]

    def __str__(self):
        return ", ".join(part for part in (self.city, self.state, self.country) if part)


class OpportunityQuerySet(models.QuerySet):

    def listable(self):
        """Approved and active listings: the only ones any browse endpoint shows."""
        return self.filter(is_active=True, approval_status=ApprovalStatus.APPROVED)

    def visible_to(self, viewer: ViewerContext):
        """Listings ``viewer`` may enumerate, per :func:`policy.visibility.hidden_listings`."""
        hidden = hidden_listings(viewer)
        queryset = self
        if hidden.types:
            queryset = queryset.exclude(type__in=hidden.types)
        if hidden.premium_only:
            queryset = queryset.filter(is_premium_only=False)
        return queryset

    def public(self):
        return self.listable().visible_to(ViewerContext.anonymous())

    def search(self, term: str):
        term = (term or '').strip()
        if not term:
            return self
        return self.filter(
            Q(title__icontains=term) |
            Q(description__icontains=term) |
            Q(requirements__icontains=term)
        )

    def with_related(self):
        return self.select_related('industry', 'category', 'location').prefetch_related('skills')


class Opportunity(TimestampMixin):
    """
    A posted internship, project or freelancing engagement.

    ``application_count`` and ``view_count`` only ever grow; they are bumped
    with ``F()`` updates and never recomputed.
    """

    industry = models.ForeignKey(
        Industry,
        on_delete=models.CASCADE,
        related_name='opportunities'
    )
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='opportunities'
    )
    location = models.ForeignKey(
        Location,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='opportunities'
    )

    title = models.CharField(max_length=255)
    description = models.TextField()
    requirements = models.TextField(blank=True)

    type = models.CharField(
        max_length=20,
        choices=OpportunityType.choices,
        default=OpportunityType.INTERNSHIP,
        db_index=True
    )
    work_type = models.CharField(
        max_length=20,
        choices=WorkType.choices,
        default=WorkType.REMOTE
    )

    stipend = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    currency = models.CharField(max_length=3, default='INR')
    duration = models.CharField(max_length=100, blank=True)

    is_active = models.BooleanField(default=True)
    is_premium_only = models.BooleanField(default=False)
    approval_status = models.CharField(
        max_length=20,
        choices=ApprovalStatus.choices,
        default=ApprovalStatus.PENDING
    )

    application_deadline = models.DateTimeField(null=True, blank=True)
    start_date = models.DateField(null=True, blank=True)

    application_count = models.PositiveIntegerField(default=0)
    view_count = models.PositiveIntegerField(default=0)

    objects = OpportunityQuerySet.as_manager()

    class Meta:
        verbose_name_plural = _('Opportunities')
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['is_active', 'approval_status'], name='opp_listable_idx'),
            models.Index(fields=['type', 'is_premium_only'], name='opp_gate_idx'),
            models.Index(fields=['-created_at'], name='opp_created_idx'),
        ]

    def __str__(self):
        return f"{self.title} ({self.type})"

    def increment_view_count(self):
        """Atomically increment view count."""
        Opportunity.objects.filter(pk=self.pk).update(view_count=F('view_count') + 1)

    def increment_application_count(self):
        Opportunity.objects.filter(pk=self.pk).update(application_count=F('application_count') + 1)


class OpportunitySkill(models.Model):
    opportunity = models.ForeignKey(
        Opportunity,
        on_delete=models.CASCADE,
        related_name='skills'
    )
    skill_name = models.CharField(max_length=100)
    is_required = models.BooleanField(default=True)
    min_level = models.CharField(
        max_length=20,
        choices=Proficiency.choices,
        blank=True
    )

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['opportunity', 'skill_name'], name='unique_opportunity_skill'),
        ]

    def __str__(self):
        return self.skill_name


class SavedOpportunity(models.Model):
    """Candidate bookmark. Independent of applications."""

    candidate = models.ForeignKey(
        Candidate,
        on_delete=models.CASCADE,
        related_name='saved_opportunities'
    )
    opportunity = models.ForeignKey(
        Opportunity,
        on_delete=models.CASCADE,
        related_name='saved_by'
    )
    saved_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name_plural = _('Saved opportunities')
        ordering = ['-saved_at', '-id']
        constraints = [
            models.UniqueConstraint(fields=['candidate', 'opportunity'], name='unique_saved_opportunity'),
        ]

    def __str__(self):
        return f"{self.candidate} saved {self.opportunity}"
