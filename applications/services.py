"""
Applications Services - Business Logic Layer

- ApplicationService: apply, withdraw and company-side status changes

Eligibility is decided by :func:`policy.eligibility.check_eligibility`; the
service loads the rows it needs, persists the outcome and reports it as a
``ServiceResult``. Views translate failed results into API exceptions.

The duplicate check in the policy is advisory only. Two concurrent submits
for the same pair can both pass it; the partial unique constraint on
Application then rejects the second insert, which is reported as
ALREADY_APPLIED.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from django.db import IntegrityError, transaction
from django.db.models import Count
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from accounts.models import Candidate
from opportunities.models import Opportunity
from policy.choices import ApplicationStatus
from policy.eligibility import EligibilityFailure, EligibilityResult, check_eligibility
from policy.statuses import (
    ALLOWED_TRANSITIONS,
    COMPANY_TRANSITIONS,
    STATUS_BUCKETS,
    can_withdraw,
    company_can_transition,
)

from .models import Application

logger = logging.getLogger(__name__)


@dataclass
class ServiceResult:
    """Base result class for service operations."""
    success: bool
    message: str = ''
    data: Any = None
    errors: Dict[str, Any] = None
    eligibility: Optional[EligibilityResult] = None

    def __post_init__(self):
        if self.errors is None:
            self.errors = {}


def _state_error(application: Application, requested: str, message, transitions=ALLOWED_TRANSITIONS) -> ServiceResult:
    return ServiceResult(
        success=False,
        message=message,
        errors={'status': str(message)},
        data={
            'current_state': application.status,
            'requested_state': requested,
            'allowed_states': sorted(transitions.get(application.status, ())),
        },
    )


class ApplicationService:
    """
    Service for managing applications.

    Handles:
    - Submitting new applications behind the eligibility gate
    - Candidate withdrawal
    - Company-side status changes
    - Per-candidate lookups and statistics
    - Per-company review queue totals
    """

    @staticmethod
    def current_application(candidate: Candidate, opportunity: Opportunity) -> Optional[Application]:
        """
        Application the candidate holds for ``opportunity``.

        The latest non-withdrawn one if any, otherwise the latest withdrawn
        one, otherwise ``None``.
        """
        applications = Application.objects.for_pair(candidate, opportunity).order_by('-applied_at', '-id')
        return applications.active().first() or applications.first()

    @staticmethod
    def apply(
        candidate: Candidate,
        opportunity: Opportunity,
        cover_letter: str = '',
        resume_url: str = None,
        expected_salary=None,
        can_join_from=None,
        now: datetime = None,
    ) -> ServiceResult:
        """
        Submit a new application.

        Args:
            candidate: The candidate applying
            opportunity: The opportunity being applied to
            cover_letter: Optional cover letter text
            resume_url: Optional link to the resume
            expected_salary: Optional expected salary
            can_join_from: Optional earliest joining date
            now: Evaluation instant for the deadline check

        Returns:
            ServiceResult with the created application, or a failed result
            whose ``eligibility`` holds the refusal reason
        """
        existing = list(Application.objects.for_pair(candidate, opportunity).active())
        result = check_eligibility(candidate, opportunity, existing, now=now)

        if not result.ok:
            logger.info(
                f"Application refused: candidate {candidate.pk} -> opportunity {opportunity.pk} "
                f"({result.failure.value})"
            )
            return ServiceResult(
                success=False,
                message=result.message,
                errors={'eligibility': result.failure.value},
                eligibility=result,
            )

        try:
            with transaction.atomic():
                application = Application.objects.create(
                    candidate=candidate,
                    opportunity=opportunity,
                    industry_id=opportunity.industry_id,
                    status=result.initial_status,
                    cover_letter=cover_letter or '',
                    resume_url=resume_url or None,
                    expected_salary=expected_salary,
                    can_join_from=can_join_from,
                    applied_at=now or timezone.now(),
                )
                opportunity.increment_application_count()
        except IntegrityError:
            winner = Application.objects.for_pair(candidate, opportunity).active().first()
            logger.warning(
                f"Concurrent application rejected by constraint: candidate {candidate.pk} -> "
                f"opportunity {opportunity.pk}"
            )
            result = EligibilityResult.denied(EligibilityFailure.ALREADY_APPLIED, winner)
            return ServiceResult(
                success=False,
                message=result.message,
                errors={'eligibility': result.failure.value},
                eligibility=result,
            )

        logger.info(
            f"Application created: candidate {candidate.pk} -> opportunity {opportunity.pk} "
            f"(application {application.pk})"
        )

        return ServiceResult(
            success=True,
            message=_('Application submitted successfully.'),
            data=application,
        )

    @staticmethod
    @transaction.atomic
    def withdraw(application: Application) -> ServiceResult:
        """
        Withdraw an application on behalf of its candidate.

        Only legal before a final decision. A withdrawn application no longer
        blocks a new submission for the same opportunity.
        """
        if not can_withdraw(application.status):
            return _state_error(
                application,
                ApplicationStatus.WITHDRAWN,
                _('Application can no longer be withdrawn.'),
            )

        application.status = ApplicationStatus.WITHDRAWN
        application.save(update_fields=['status', 'updated_at'])

        logger.info(f"Application {application.pk} withdrawn by candidate {application.candidate_id}")

        return ServiceResult(
            success=True,
            message=_('Application withdrawn.'),
            data=application,
        )

    @staticmethod
    @transaction.atomic
    def change_status(application: Application, new_status: str) -> ServiceResult:
        """
        Move an application along the company review path.

        Callers check that the company owns the application. WITHDRAWN is
        never a valid target here; only the candidate withdraws.

        Args:
            application: The application to update
            new_status: Target status

        Returns:
            ServiceResult with the updated application
        """
        if not company_can_transition(application.status, new_status):
            return _state_error(
                application,
                new_status,
                _('Invalid status transition.'),
                transitions=COMPANY_TRANSITIONS,
            )

        previous = application.status
        application.status = new_status
        application.save(update_fields=['status', 'updated_at'])

        logger.info(f"Application {application.pk} moved {previous} -> {new_status}")

        return ServiceResult(
            success=True,
            message=_('Application status updated.'),
            data=application,
        )

    @staticmethod
    def candidate_stats(candidate: Candidate) -> Dict[str, int]:
        """Application counts per UI bucket, total and saved count."""
        counts = dict(
            Application.objects
            .filter(candidate=candidate)
            .order_by()
            .values('status')
            .annotate(total=Count('id'))
            .values_list('status', 'total')
        )

        stats = {
            bucket: sum(counts.get(status, 0) for status in statuses)
            for bucket, statuses in STATUS_BUCKETS.items()
        }
        stats['total'] = sum(counts.values())
        stats['saved'] = candidate.saved_opportunities.count()
        return stats

    @staticmethod
    def industry_stats(industry) -> Dict[str, int]:
        """Application totals for a company's review queue."""
        counts = dict(
            Application.objects
            .filter(industry=industry)
            .order_by()
            .values('status')
            .annotate(total=Count('id'))
            .values_list('status', 'total')
        )
        return {
            'total': sum(counts.values()),
            'pending': counts.get(ApplicationStatus.PENDING, 0),
            'reviewed': counts.get(ApplicationStatus.REVIEWED, 0),
            'shortlisted': counts.get(ApplicationStatus.SHORTLISTED, 0),
        }
