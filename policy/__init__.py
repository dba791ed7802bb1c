"""
Opportunity visibility and application eligibility policy.

Pure decision functions shared by every listing, detail and apply endpoint:

- anonymization: company and candidate display names for a given viewer
- visibility: which opportunities a viewer may enumerate, and how redacted
- eligibility: whether a candidate may apply right now
- statuses: application state machine and UI buckets
- completion: weighted candidate profile completion

Nothing in this package touches the database or logs. Callers load rows,
call these functions, and act on the result.
"""

from .anonymization import candidate_display_name, display_name, shows_details
from .completion import ProfileCompletion, completion
from .eligibility import EligibilityFailure, EligibilityResult, check_eligibility
from .statuses import bucket_for, can_transition, company_can_transition, is_terminal, statuses_in_bucket
from .visibility import OpportunityView, ViewerContext, can_apply, filter_visible, is_visible, redact

__all__ = [
    'candidate_display_name',
    'display_name',
    'shows_details',
    'ProfileCompletion',
    'completion',
    'EligibilityFailure',
    'EligibilityResult',
    'check_eligibility',
    'bucket_for',
    'can_transition',
    'company_can_transition',
    'is_terminal',
    'statuses_in_bucket',
    'OpportunityView',
    'ViewerContext',
    'can_apply',
    'filter_visible',
    'is_visible',
    'redact',
]
