"""
Centralized Policy Configuration

Single access point for the product knobs the policy functions take as
arguments. Views read them here and pass them through, so the policy package
itself never touches settings.

Settings:
    NEXTINTERN_ANONYMOUS_SUFFIX_LENGTH: characters of the anonymous id shown
        in "Company #xxx" (default 3)
    NEXTINTERN_PROFILE_COMPLETE_THRESHOLD: completion percentage that counts
        as a complete profile (default 80)
    NEXTINTERN_UPGRADE_URL: where premium prompts send the candidate
    NEXTINTERN_FEED_LIMIT: dashboard feed size (default 50)
    NEXTINTERN_RECOMMENDED_LIMIT: recommended feed size (default 10)

Usage:
    from core.conf import get_anonymous_suffix_length

    name = display_name(company, viewer.is_premium, get_anonymous_suffix_length())
"""

import logging

from django.conf import settings

from policy.anonymization import DEFAULT_SUFFIX_LENGTH
from policy.completion import DEFAULT_COMPLETE_THRESHOLD

logger = logging.getLogger(__name__)

DEFAULT_UPGRADE_URL = '/pricing'
DEFAULT_FEED_LIMIT = 50
DEFAULT_RECOMMENDED_LIMIT = 10


def _positive_int(name: str, default: int) -> int:
    value = getattr(settings, name, default)
    try:
        value = int(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid {name}={value!r}, using {default}")
        return default
    if value <= 0:
        logger.warning(f"Non-positive {name}={value}, using {default}")
        return default
    return value


def get_anonymous_suffix_length() -> int:
    return _positive_int('NEXTINTERN_ANONYMOUS_SUFFIX_LENGTH', DEFAULT_SUFFIX_LENGTH)


def get_completion_threshold() -> int:
    """Completion percentage at which a profile counts as complete."""
    return _positive_int('NEXTINTERN_PROFILE_COMPLETE_THRESHOLD', DEFAULT_COMPLETE_THRESHOLD)


def get_upgrade_url() -> str:
    return getattr(settings, 'NEXTINTERN_UPGRADE_URL', '') or DEFAULT_UPGRADE_URL


def get_feed_limit(recommended: bool = False) -> int:
    """Number of items in the dashboard feed."""
    if recommended:
        return _positive_int('NEXTINTERN_RECOMMENDED_LIMIT', DEFAULT_RECOMMENDED_LIMIT)
    return _positive_int('NEXTINTERN_FEED_LIMIT', DEFAULT_FEED_LIMIT)
