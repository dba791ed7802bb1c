"""
Candidate profile completion.

Twenty points in total: one for each of seventeen tracked profile fields, and
a flat three when the candidate lists at least three skills. The percentage
is recomputed on every read and never stored.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

TRACKED_FIELDS = (
    # basic info
    'first_name',
    'last_name',
    'phone',
    'date_of_birth',
    'bio',
    # location
    'city',
    'state',
    'country',
    # academics
    'college',
    'degree',
    'field_of_study',
    'graduation_year',
    'cgpa',
    # professional links
    'resume_url',
    'portfolio_url',
    'linkedin_url',
    'github_url',
)

SKILLS_REQUIRED = 3
SKILLS_POINTS = 3
TOTAL_POINTS = len(TRACKED_FIELDS) + SKILLS_POINTS
DEFAULT_COMPLETE_THRESHOLD = 80


@dataclass(frozen=True)
class ProfileCompletion:
    percentage: int
    is_complete: bool
    score: int = 0
    missing_fields: tuple = ()


def _is_filled(value) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)


def _skill_count(candidate, skills: Optional[Iterable]) -> int:
    if skills is None:
        skills = getattr(candidate, 'skills', None)
    if skills is None:
        return 0
    # Related managers expose .all(); plain sequences do not.
    if hasattr(skills, 'all'):
        skills = skills.all()
    return len(list(skills))


def completion(
    candidate,
    skills: Optional[Iterable] = None,
    threshold: int = DEFAULT_COMPLETE_THRESHOLD,
) -> ProfileCompletion:
    """
    Score ``candidate``'s profile.

    ``skills`` overrides ``candidate.skills`` when the caller already has
    them loaded.
    """
    missing = [name for name in TRACKED_FIELDS if not _is_filled(getattr(candidate, name, None))]
    score = len(TRACKED_FIELDS) - len(missing)

    if _skill_count(candidate, skills) >= SKILLS_REQUIRED:
        score += SKILLS_POINTS
    else:
        missing.append('skills')

    percentage = round(100 * score / TOTAL_POINTS)
    return ProfileCompletion(
        percentage=percentage,
        is_complete=percentage >= threshold,
        score=score,
        missing_fields=tuple(missing),
    )
