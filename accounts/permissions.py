"""
Accounts Permissions - role checks for the REST API.

- IsCandidate: authenticated user with a candidate account and profile
- IsIndustry: authenticated user with an industry account and profile
"""

from rest_framework import permissions

from policy.choices import UserType


def _has_role(user, user_type: str, profile_attr: str) -> bool:
    if not user or not user.is_authenticated:
        return False

    account = getattr(user, 'account', None)
    if account is None or account.user_type != user_type:
        return False

    return getattr(user, profile_attr, None) is not None


class IsCandidate(permissions.BasePermission):
    """
    Permission check for candidate accounts.

    Requires:
    - User to be authenticated
    - Account.user_type == CANDIDATE
    - A Candidate profile
    """
    message = "Only candidates can perform this action."

    def has_permission(self, request, view):
        return _has_role(request.user, UserType.CANDIDATE, 'candidate')


class IsIndustry(permissions.BasePermission):
    """Permission check for company accounts with an Industry profile."""
    message = "Only companies can perform this action."

    def has_permission(self, request, view):
        return _has_role(request.user, UserType.INDUSTRY, 'industry')
