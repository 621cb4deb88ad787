"""
Intent boost: keyword hits against the candidate's profile text, a
category/looking-for cross bonus, then the category multiplier.
"""

from shared.models import Profile

from .intent import IntentCategory, IntentClassification

MAX_SCORE = 100.0
KEYWORD_WEIGHT = 10.0
CROSS_BONUS = 15.0

# Substrings of the candidate's looking-for text that earn the cross bonus
CROSS_BONUS_TRIGGERS: dict[IntentCategory, tuple[str, ...]] = {
    IntentCategory.TEAMMATE: ("study", "project"),
    IntentCategory.STUDY: ("study",),
    IntentCategory.FRIEND: ("friend", "social"),
    IntentCategory.HOBBY: ("hobby", "gaming"),
}


def profile_text(candidate: Profile) -> str:
    """Lower-cased looking-for, tags, bio and major joined by spaces."""
    parts = [*candidate.looking_for, *candidate.tags, candidate.bio, candidate.major]
    return " ".join(parts).lower()


def keyword_score(classification: IntentClassification, candidate: Profile) -> float:
    """10 points per keyword found in the profile text; repeats count again."""
    text = profile_text(candidate)
    hits = sum(1 for keyword in classification.keywords if keyword.lower() in text)
    return hits * KEYWORD_WEIGHT


def cross_bonus(classification: IntentClassification, candidate: Profile) -> float:
    """Bonus when the candidate is looking for what the intent category implies."""
    triggers = CROSS_BONUS_TRIGGERS.get(classification.category, ())
    looking_for = " ".join(candidate.looking_for).lower()
    if any(trigger in looking_for for trigger in triggers):
        return CROSS_BONUS
    return 0.0


def clamp_score(score: float) -> float:
    return min(score, MAX_SCORE)


def apply_boost(
    base: float,
    classification: IntentClassification,
    candidate: Profile,
) -> float:
    """
    Combine the base score with the intent signal.

    The multiplier applies to the sum of base, keyword and cross bonus,
    and the result is capped at 100.
    """
    additive = keyword_score(classification, candidate) + cross_bonus(
        classification, candidate
    )
    combined = (base + additive) * classification.boost_multiplier
    return clamp_score(combined)
