"""
Base compatibility score between two profiles.
"""

from dataclasses import dataclass, field

from shared.models import Profile

TAG_OVERLAP_SCALE = 100.0
SAME_MAJOR_BONUS = 5.0
SAME_YEAR_BONUS = 5.0


@dataclass(frozen=True)
class BaseScore:
    """Tag-overlap score plus categorical bonuses, before any intent boost."""

    score: float
    common_tags: list[str] = field(default_factory=list)


def common_tags(requester: Profile, candidate: Profile) -> list[str]:
    """Tags both profiles share, in the requester's tag order."""
    candidate_tags = set(candidate.tags)
    return [tag for tag in requester.tags if tag in candidate_tags]


def tag_overlap(requester: Profile, candidate: Profile) -> float:
    """Jaccard overlap of the two tag sets, scaled to 0-100."""
    union = set(requester.tags) | set(candidate.tags)
    if not union:
        return 0.0
    shared = len(common_tags(requester, candidate))
    return shared / len(union) * TAG_OVERLAP_SCALE


def categorical_bonus(requester: Profile, candidate: Profile) -> float:
    """Bonus for an exact major and year match."""
    bonus = 0.0
    if requester.major == candidate.major:
        bonus += SAME_MAJOR_BONUS
    if requester.year == candidate.year:
        bonus += SAME_YEAR_BONUS
    return bonus


def base_score(requester: Profile, candidate: Profile) -> BaseScore:
    """
    Score a candidate against the requester.

    Not clamped; the result can exceed 100 only through the categorical
    bonuses and is capped after the intent boost.
    """
    return BaseScore(
        score=tag_overlap(requester, candidate) + categorical_bonus(requester, candidate),
        common_tags=common_tags(requester, candidate),
    )
