"""
Company name disclosure.

A company is shown under its real name when it opted into disclosure or the
viewer holds a premium subscription. Everyone else sees a stable placeholder
derived from the company's anonymous id.
"""

DEFAULT_SUFFIX_LENGTH = 3
PLACEHOLDER_NAME = 'Company #000'


def shows_details(company, viewer_is_premium: bool) -> bool:
    """True when the viewer may see the company's identity and contact block."""
    if viewer_is_premium:
        return True
    return bool(getattr(company, 'show_company_name', False))


def anonymous_name(anonymous_id, suffix_length: int = DEFAULT_SUFFIX_LENGTH) -> str:
    if not anonymous_id:
        return PLACEHOLDER_NAME
    return f"Company #{str(anonymous_id)[-suffix_length:]}"


def display_name(company, viewer_is_premium: bool, suffix_length: int = DEFAULT_SUFFIX_LENGTH) -> str:
    """
    Name of ``company`` as the viewer is allowed to see it.

    Args:
        company: Industry row or any object with ``company_name``,
            ``show_company_name`` and ``anonymous_id``. ``None`` is accepted.
        viewer_is_premium: Subscription flag of the viewing account.
        suffix_length: How many trailing characters of the anonymous id form
            the placeholder.

    Returns:
        The real company name, or ``"Company #<suffix>"``.
    """
    if company is None:
        return PLACEHOLDER_NAME

    if shows_details(company, viewer_is_premium):
        name = getattr(company, 'company_name', '')
        if name:
            return name

    return anonymous_name(getattr(company, 'anonymous_id', None), suffix_length)


# Candidates, as seen by the reviewing company

CANDIDATE_SUFFIX_LENGTH = 8
HIDDEN_LOCATION = 'Location Hidden'
CANDIDATE_PLACEHOLDER_NAME = 'Candidate #00000000'


def anonymous_candidate_name(anonymous_id, suffix_length: int = CANDIDATE_SUFFIX_LENGTH) -> str:
    if not anonymous_id:
        return CANDIDATE_PLACEHOLDER_NAME
    return f"Candidate #{str(anonymous_id)[-suffix_length:]}"


def candidate_display_name(candidate, viewer_is_premium: bool,
                           suffix_length: int = CANDIDATE_SUFFIX_LENGTH) -> str:
    """
    Name of an applicant as the reviewing company may see it.

    Premium companies see the candidate's real name; everyone else sees
    ``"Candidate #<suffix>"`` built from the candidate's anonymous id.
    """
    anonymous_id = getattr(candidate, 'anonymous_id', None)
    if viewer_is_premium:
        name = f"{getattr(candidate, 'first_name', '') or ''} {getattr(candidate, 'last_name', '') or ''}".strip()
        if name:
            return name
    return anonymous_candidate_name(anonymous_id, suffix_length)


def candidate_location(candidate, viewer_is_premium: bool) -> str:
    city = getattr(candidate, 'city', '')
    state = getattr(candidate, 'state', '')
    if viewer_is_premium and city and state:
        return f"{city}, {state}"
    return HIDDEN_LOCATION


def candidate_bio(candidate, viewer_is_premium: bool):
    if not viewer_is_premium:
        return None
    return getattr(candidate, 'bio', None)
