"""
Opportunity visibility and redaction.

Two browse contexts exist:

- public (no authenticated viewer): freelancing and premium-only listings are
  never enumerated.
- authenticated dashboard: everything is enumerated, locked listings carry
  ``can_apply=False`` so the UI can prompt for an upgrade.

Institute accounts never see freelancing in either context.

Company disclosure is independent of the rules above: see
:mod:`policy.anonymization`.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, Optional

from .anonymization import DEFAULT_SUFFIX_LENGTH, display_name, shows_details
from .choices import OpportunityType, UserType


# Company fields hidden from the detail view unless the company is disclosed.
PRIVATE_COMPANY_FIELDS = (
    'description',
    'city',
    'state',
    'country',
    'website',
    'contact_email',
    'phone',
)


@dataclass(frozen=True)
class ViewerContext:
    """Who is looking. Built from the identity provider by the request layer."""
    is_authenticated: bool = False
    is_premium: bool = False
    user_type: Optional[str] = None

    @classmethod
    def anonymous(cls) -> 'ViewerContext':
        return cls()

    @property
    def is_candidate(self) -> bool:
        return self.is_authenticated and self.user_type == UserType.CANDIDATE

    @property
    def is_institute(self) -> bool:
        return self.user_type == UserType.INSTITUTE


@dataclass(frozen=True)
class HiddenListings:
    """What a viewer must not enumerate; mirrors :func:`is_visible` for querysets."""
    types: FrozenSet[str] = frozenset()
    premium_only: bool = False


@dataclass
class OpportunityView:
    """An opportunity as one viewer is allowed to see it."""
    opportunity: Any
    display_name: str
    show_details: bool
    can_apply: bool
    company: Dict[str, Any] = field(default_factory=dict)

    def __getattr__(self, name):
        # Only reached for attributes not defined on the view itself.
        if name == 'opportunity':
            raise AttributeError(name)
        return getattr(self.opportunity, name)


def _is_gated(opportunity) -> bool:
    """Premium gating: freelancing and premium-only listings need a subscription."""
    if getattr(opportunity, 'type', None) == OpportunityType.FREELANCING:
        return True
    return bool(getattr(opportunity, 'is_premium_only', False))


def hidden_listings(viewer: ViewerContext) -> HiddenListings:
    """Listing criteria excluded from enumeration for ``viewer``."""
    types = set()
    premium_only = False

    if viewer.is_institute:
        types.add(OpportunityType.FREELANCING)

    if not viewer.is_authenticated:
        types.add(OpportunityType.FREELANCING)
        premium_only = True

    return HiddenListings(types=frozenset(types), premium_only=premium_only)


def is_visible(opportunity, viewer: ViewerContext) -> bool:
    """Whether ``viewer`` may enumerate or open ``opportunity``."""
    hidden = hidden_listings(viewer)

    if getattr(opportunity, 'type', None) in hidden.types:
        return False

    if hidden.premium_only and getattr(opportunity, 'is_premium_only', False):
        return False

    return True


def can_apply(opportunity, viewer: ViewerContext) -> bool:
    """
    Whether the listing should offer an apply action to ``viewer``.

    Only the premium gate is evaluated here; closure, deadline and duplicate
    checks happen in :func:`policy.eligibility.check_eligibility` at submit
    time.
    """
    if not viewer.is_candidate:
        return False

    if _is_gated(opportunity) and not viewer.is_premium:
        return False

    return True


def _company_block(company, show_details: bool, name: str) -> Dict[str, Any]:
    block = {
        'display_name': name,
        'industry': getattr(company, 'industry', '') if company is not None else '',
        'is_verified': bool(getattr(company, 'is_verified', False)),
    }
    for attr in PRIVATE_COMPANY_FIELDS:
        block[attr] = getattr(company, attr, None) if (show_details and company is not None) else None
    return block


def redact(
    opportunity,
    viewer: ViewerContext,
    suffix_length: int = DEFAULT_SUFFIX_LENGTH,
) -> OpportunityView:
    """
    Wrap ``opportunity`` with the viewer-specific display data.

    The returned view keeps every field of the opportunity and adds
    ``display_name``, ``show_details``, ``can_apply`` and a ``company``
    block whose private fields are ``None`` unless details are shown.
    """
    company = getattr(opportunity, 'industry', None)
    details = company is not None and shows_details(company, viewer.is_premium)
    name = display_name(company, viewer.is_premium, suffix_length=suffix_length)

    return OpportunityView(
        opportunity=opportunity,
        display_name=name,
        show_details=details,
        can_apply=can_apply(opportunity, viewer),
        company=_company_block(company, details, name),
    )


def filter_visible(
    opportunities: Iterable,
    viewer: ViewerContext,
    suffix_length: int = DEFAULT_SUFFIX_LENGTH,
) -> List[OpportunityView]:
    """Drop what ``viewer`` may not see and redact the rest, preserving order."""
    return [
        redact(opportunity, viewer, suffix_length=suffix_length)
        for opportunity in opportunities
        if is_visible(opportunity, viewer)
    ]
