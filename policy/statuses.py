"""
Application status state machine.

Company-side review moves an application forward; the candidate may withdraw
at any point before a final decision. SELECTED, REJECTED and WITHDRAWN are
terminal.
"""

from typing import Dict, FrozenSet, Optional

from .choices import ApplicationStatus


ALLOWED_TRANSITIONS: Dict[str, FrozenSet[str]] = {
    ApplicationStatus.PENDING: frozenset({
        ApplicationStatus.REVIEWED,
        ApplicationStatus.WITHDRAWN,
    }),
    ApplicationStatus.REVIEWED: frozenset({
        ApplicationStatus.SHORTLISTED,
        ApplicationStatus.REJECTED,
        ApplicationStatus.WITHDRAWN,
    }),
    ApplicationStatus.SHORTLISTED: frozenset({
        ApplicationStatus.INTERVIEW_SCHEDULED,
        ApplicationStatus.REJECTED,
        ApplicationStatus.WITHDRAWN,
    }),
    ApplicationStatus.INTERVIEW_SCHEDULED: frozenset({
        ApplicationStatus.SELECTED,
        ApplicationStatus.REJECTED,
        ApplicationStatus.WITHDRAWN,
    }),
    # Terminal statuses
    ApplicationStatus.SELECTED: frozenset(),
    ApplicationStatus.REJECTED: frozenset(),
    ApplicationStatus.WITHDRAWN: frozenset(),
}

TERMINAL_STATUSES = frozenset(
    status for status, targets in ALLOWED_TRANSITIONS.items() if not targets
)

# Withdrawal is candidate-initiated only; companies move along the review path.
COMPANY_TRANSITIONS: Dict[str, FrozenSet[str]] = {
    status: targets - {ApplicationStatus.WITHDRAWN}
    for status, targets in ALLOWED_TRANSITIONS.items()
}

# UI buckets used by listing filters
BUCKET_PENDING = 'pending'
BUCKET_IN_PROGRESS = 'in_progress'
BUCKET_SELECTED = 'selected'
BUCKET_CLOSED = 'closed'

STATUS_BUCKETS: Dict[str, FrozenSet[str]] = {
    BUCKET_PENDING: frozenset({ApplicationStatus.PENDING, ApplicationStatus.REVIEWED}),
    BUCKET_IN_PROGRESS: frozenset({ApplicationStatus.SHORTLISTED, ApplicationStatus.INTERVIEW_SCHEDULED}),
    BUCKET_SELECTED: frozenset({ApplicationStatus.SELECTED}),
    BUCKET_CLOSED: frozenset({ApplicationStatus.REJECTED, ApplicationStatus.WITHDRAWN}),
}


def is_terminal(status: str) -> bool:
    return status in TERMINAL_STATUSES


def can_transition(current: str, new: str) -> bool:
    """Whether an application in ``current`` may move to ``new``."""
    return new in ALLOWED_TRANSITIONS.get(current, frozenset())


def company_can_transition(current: str, new: str) -> bool:
    """Whether the reviewing company may move an application from ``current`` to ``new``."""
    return new in COMPANY_TRANSITIONS.get(current, frozenset())


def can_withdraw(status: str) -> bool:
    return can_transition(status, ApplicationStatus.WITHDRAWN)


def bucket_for(status: str) -> Optional[str]:
    """UI bucket name for ``status``, or ``None`` for an unknown status."""
    for bucket, statuses in STATUS_BUCKETS.items():
        if status in statuses:
            return bucket
    return None


def statuses_in_bucket(bucket: str) -> FrozenSet[str]:
    """Statuses grouped under ``bucket``; empty for an unknown bucket."""
    return STATUS_BUCKETS.get(bucket, frozenset())
