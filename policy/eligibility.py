"""
Application eligibility gate.

Decides whether a candidate may submit an application to an opportunity
right now. Rules run in a fixed order and the first failing rule wins:

1. opportunity inactive -> OPPORTUNITY_CLOSED
2. deadline strictly in the past -> DEADLINE_PASSED
3. freelancing without premium -> PREMIUM_REQUIRED
4. premium-only without premium -> PREMIUM_REQUIRED
5. a non-withdrawn application already exists -> ALREADY_APPLIED

The gate is a pure function over rows the caller already loaded. Rule 5 is
only advisory: the caller must also rely on the database uniqueness
constraint when inserting.
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone as dt_timezone
from enum import Enum
from typing import Iterable, Optional

from .choices import ApplicationStatus, OpportunityType


class EligibilityFailure(str, Enum):
    OPPORTUNITY_CLOSED = 'OpportunityClosed'
    DEADLINE_PASSED = 'DeadlinePassed'
    PREMIUM_REQUIRED = 'PremiumRequired'
    ALREADY_APPLIED = 'AlreadyApplied'


FAILURE_MESSAGES = {
    EligibilityFailure.OPPORTUNITY_CLOSED: 'This opportunity is no longer accepting applications.',
    EligibilityFailure.DEADLINE_PASSED: 'This opportunity is no longer accepting applications.',
    EligibilityFailure.PREMIUM_REQUIRED: 'Upgrade to premium to apply to this opportunity.',
    EligibilityFailure.ALREADY_APPLIED: 'You have already applied to this opportunity.',
}


@dataclass(frozen=True)
class EligibilityResult:
    """Outcome of :func:`check_eligibility`."""
    ok: bool
    failure: Optional[EligibilityFailure] = None
    existing_application_id: Optional[int] = None
    existing_status: Optional[str] = None

    @property
    def message(self) -> str:
        if self.failure is None:
            return ''
        return FAILURE_MESSAGES[self.failure]

    @property
    def initial_status(self) -> Optional[str]:
        """Status a newly authorised application starts in."""
        return ApplicationStatus.PENDING if self.ok else None

    @classmethod
    def allowed(cls) -> 'EligibilityResult':
        return cls(ok=True)

    @classmethod
    def denied(cls, failure: EligibilityFailure, application=None) -> 'EligibilityResult':
        if application is None:
            return cls(ok=False, failure=failure)
        return cls(
            ok=False,
            failure=failure,
            existing_application_id=getattr(application, 'id', None),
            existing_status=getattr(application, 'status', None),
        )


def _utcnow() -> datetime:
    return datetime.now(dt_timezone.utc)


def deadline_passed(deadline, now: datetime) -> bool:
    """True when ``deadline`` lies strictly before ``now``."""
    if deadline is None:
        return False

    if isinstance(deadline, datetime):
        if deadline.tzinfo is None and now.tzinfo is not None:
            deadline = deadline.replace(tzinfo=dt_timezone.utc)
        elif deadline.tzinfo is not None and now.tzinfo is None:
            now = now.replace(tzinfo=dt_timezone.utc)
        return deadline < now

    if isinstance(deadline, date):
        return deadline < now.date()

    return False


def _same_pair(application, candidate, opportunity) -> bool:
    opportunity_id = getattr(application, 'opportunity_id', None)
    if opportunity_id is not None and opportunity_id != getattr(opportunity, 'id', None):
        return False

    candidate_id = getattr(application, 'candidate_id', None)
    if candidate_id is not None and candidate_id != getattr(candidate, 'id', None):
        return False

    return True


def find_active_application(candidate, opportunity, existing_applications: Iterable):
    """First application of the pair that still blocks a new submission."""
    for application in existing_applications or ():
        if not _same_pair(application, candidate, opportunity):
            continue
        if getattr(application, 'status', None) != ApplicationStatus.WITHDRAWN:
            return application
    return None


def check_eligibility(
    candidate,
    opportunity,
    existing_applications: Iterable = (),
    now: Optional[datetime] = None,
) -> EligibilityResult:
    """
    Decide whether ``candidate`` may apply to ``opportunity``.

    Args:
        candidate: Candidate row (or any object) exposing ``id`` and
            ``is_premium``.
        opportunity: Opportunity row exposing ``id``, ``is_active``,
            ``application_deadline``, ``type`` and ``is_premium_only``.
        existing_applications: Applications already stored for the pair.
            Rows belonging to another pair are ignored.
        now: Evaluation instant; defaults to the current UTC time.

    Returns:
        EligibilityResult with ``ok=True`` or the first failing rule.
    """
    if now is None:
        now = _utcnow()

    is_premium = bool(getattr(candidate, 'is_premium', False))

    if not getattr(opportunity, 'is_active', False):
        return EligibilityResult.denied(EligibilityFailure.OPPORTUNITY_CLOSED)

    if deadline_passed(getattr(opportunity, 'application_deadline', None), now):
        return EligibilityResult.denied(EligibilityFailure.DEADLINE_PASSED)

    if getattr(opportunity, 'type', None) == OpportunityType.FREELANCING and not is_premium:
        return EligibilityResult.denied(EligibilityFailure.PREMIUM_REQUIRED)

    if getattr(opportunity, 'is_premium_only', False) and not is_premium:
        return EligibilityResult.denied(EligibilityFailure.PREMIUM_REQUIRED)

    existing = find_active_application(candidate, opportunity, existing_applications)
    if existing is not None:
        return EligibilityResult.denied(EligibilityFailure.ALREADY_APPLIED, existing)

    return EligibilityResult.allowed()
