"""
Accounts Context - viewer identity for the policy functions.

The identity provider authenticates the request; this module reads the
resulting user and its Account into a :class:`policy.visibility.ViewerContext`.
"""

from policy.visibility import ViewerContext


def viewer_from_user(user) -> ViewerContext:
    """Build the viewer context for ``user`` (anonymous users included)."""
    if user is None or not getattr(user, 'is_authenticated', False):
        return ViewerContext.anonymous()

    account = getattr(user, 'account', None)
    if account is None:
        return ViewerContext(is_authenticated=True)

    return ViewerContext(
        is_authenticated=True,
        is_premium=account.is_premium,
        user_type=account.user_type,
    )


def viewer_from_request(request) -> ViewerContext:
    return viewer_from_user(getattr(request, 'user', None))
