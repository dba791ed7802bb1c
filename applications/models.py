"""
Applications Models.

An Application links one candidate to one opportunity. It is only ever
created through ``ApplicationService.apply`` and then moves through the
state machine in :mod:`policy.statuses`.
"""

from django.db import models
from django.db.models import Q
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from accounts.models import Candidate, Industry
from opportunities.models import Opportunity
from policy.choices import ApplicationStatus
from policy.statuses import TERMINAL_STATUSES, bucket_for, statuses_in_bucket


class ApplicationQuerySet(models.QuerySet):

    def active(self):
        """Applications that still block a new submission for the same pair."""
        return self.exclude(status=ApplicationStatus.WITHDRAWN)

    def in_bucket(self, bucket: str):
        return self.filter(status__in=statuses_in_bucket(bucket))

    def for_pair(self, candidate, opportunity):
        return self.filter(candidate=candidate, opportunity=opportunity)


class Application(models.Model):
    """
    Job application linking a candidate to an opportunity.

    At most one non-withdrawn application exists per (candidate, opportunity);
    the partial unique constraint enforces it in the database.
    """

    ApplicationStatus = ApplicationStatus
    TERMINAL_STATUSES = TERMINAL_STATUSES

    candidate = models.ForeignKey(
        Candidate,
        on_delete=models.CASCADE,
        related_name='applications'
    )
    opportunity = models.ForeignKey(
        Opportunity,
        on_delete=models.CASCADE,
        related_name='applications'
    )
    industry = models.ForeignKey(
        Industry,
        on_delete=models.CASCADE,
        related_name='applications'
    )

    status = models.CharField(
        max_length=30,
        choices=ApplicationStatus.choices,
        default=ApplicationStatus.PENDING,
        db_index=True
    )

    # Application content
    cover_letter = models.TextField(blank=True)
    resume_url = models.URLField(blank=True, null=True)
    expected_salary = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    can_join_from = models.DateField(null=True, blank=True)

    applied_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ApplicationQuerySet.as_manager()

    class Meta:
        ordering = ['-applied_at', '-id']
        constraints = [
            models.UniqueConstraint(
                fields=['candidate', 'opportunity'],
                condition=~Q(status=ApplicationStatus.WITHDRAWN),
                name='unique_active_application',
            ),
        ]
        indexes = [
            models.Index(fields=['candidate', 'status'], name='app_candidate_status_idx'),
        ]

    def __str__(self):
        return f"{self.candidate} - {self.opportunity.title} ({self.status})"

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    @property
    def bucket(self):
        return bucket_for(self.status)
