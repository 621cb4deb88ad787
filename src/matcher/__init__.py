"""
Matcher Service - intent-aware profile matching.

Scores every other student against a requester by tag overlap and
major/year similarity, boosted by a rule-based reading of free-text intent.
"""

from .boost import apply_boost
from .intent import (
    INTENT_RULES,
    IntentAnalyzer,
    IntentCategory,
    IntentClassification,
    IntentRule,
    classify,
)
from .ranker import rank
from .scoring import BaseScore, base_score
from .service import find_matches

__all__ = [
    "INTENT_RULES",
    "IntentAnalyzer",
    "IntentCategory",
    "IntentClassification",
    "IntentRule",
    "classify",
    "BaseScore",
    "base_score",
    "apply_boost",
    "rank",
    "find_matches",
]
