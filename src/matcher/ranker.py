"""
Ranks candidate profiles for a requester and an optional intent.
"""

from typing import Iterable, Optional

from loguru import logger

from shared.models import MatchResult, Profile

from .boost import apply_boost, clamp_score
from .intent import IntentAnalyzer, IntentClassification, classify
from .scoring import base_score


def has_intent(intent_text: Optional[str]) -> bool:
    """True when intent text carries anything besides whitespace."""
    return bool(intent_text and intent_text.strip())


def score_candidate(
    requester: Profile,
    candidate: Profile,
    classification: IntentClassification,
    boosted: bool,
) -> MatchResult:
    """Score one candidate; the boost is skipped entirely when not boosted."""
    base = base_score(requester, candidate)
    if boosted:
        final = apply_boost(base.score, classification, candidate)
    else:
        final = clamp_score(base.score)

    return MatchResult.from_profile(candidate, final, base.common_tags)


def rank(
    requester: Profile,
    candidates: Iterable[Profile],
    intent_text: Optional[str] = None,
    analyzer: Optional[IntentAnalyzer] = None,
) -> list[MatchResult]:
    """
    Rank candidates by match score.

    Args:
        requester: Profile of the user asking for matches
        candidates: Every other profile to consider
        intent_text: Free-text description of who the requester wants to meet
        analyzer: Intent analyzer to use (built-in rules if None)

    Returns:
        Results with a positive score, highest first. Equal scores keep
        the input candidate order.
    """
    classification = analyzer.classify(intent_text) if analyzer else classify(intent_text)
    boosted = has_intent(intent_text)

    results = [
        score_candidate(requester, candidate, classification, boosted)
        for candidate in candidates
    ]
    positive = [result for result in results if result.match_score > 0]

    # sorted() is stable, so ties keep candidate order
    ranked = sorted(positive, key=lambda result: result.match_score, reverse=True)

    logger.debug(
        f"Ranked {len(ranked)} of {len(results)} candidates "
        f"(intent: {classification.category.value})"
    )
    return ranked
