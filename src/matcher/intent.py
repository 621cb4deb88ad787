"""
Rule-based intent classification.
Maps free-text intent ("looking for hackathon teammates") to a category,
a keyword list and a score multiplier.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

import yaml
from loguru import logger


class IntentCategory(str, Enum):
    """Coarse intent buckets."""

    TEAMMATE = "teammate"
    STUDY = "study"
    FRIEND = "friend"
    HOBBY = "hobby"
    GENERAL = "general"


@dataclass(frozen=True)
class IntentRule:
    """A category with its trigger substrings and seed keywords."""

    category: IntentCategory
    triggers: tuple[str, ...]
    seed_keywords: tuple[str, ...] = ()
    boost_multiplier: float = 1.0

    def matches(self, text: str) -> bool:
        """True if any trigger is a substring of the lower-cased text."""
        return any(trigger in text for trigger in self.triggers)


@dataclass(frozen=True)
class IntentClassification:
    """Result of classifying an intent string."""

    category: IntentCategory = IntentCategory.GENERAL
    keywords: tuple[str, ...] = field(default_factory=tuple)
    boost_multiplier: float = 1.0


# Evaluated top-down, first match wins
INTENT_RULES: tuple[IntentRule, ...] = (
    IntentRule(
        category=IntentCategory.TEAMMATE,
        triggers=("teammate", "team", "project", "hackathon", "collaborat"),
        seed_keywords=("teammate", "team", "project", "collaboration", "hackathon"),
        boost_multiplier=1.5,
    ),
    IntentRule(
        category=IntentCategory.STUDY,
        triggers=("study", "homework", "class", "course"),
        seed_keywords=("study", "homework", "class", "course", "academic"),
        boost_multiplier=1.4,
    ),
    IntentRule(
        category=IntentCategory.FRIEND,
        triggers=("friend", "hangout", "social", "chat"),
        seed_keywords=("friend", "social", "hangout", "chat"),
        boost_multiplier=1.3,
    ),
    IntentRule(
        category=IntentCategory.HOBBY,
        triggers=("hobby", "gaming", "sport", "music", "gym", "fitness"),
        seed_keywords=("hobby", "gaming", "sport", "music", "gym", "fitness"),
        boost_multiplier=1.35,
    ),
)

STOP_WORDS = frozenset(
    {"looking", "for", "want", "need", "find", "seeking", "searching"}
)

MIN_KEYWORD_LENGTH = 4

GENERAL_INTENT = IntentClassification()


def extract_keywords(text: str) -> list[str]:
    """Content words of already lower-cased text, in order, duplicates kept."""
    return [
        word
        for word in text.split()
        if len(word) >= MIN_KEYWORD_LENGTH and word not in STOP_WORDS
    ]


class IntentAnalyzer:
    """Classifies intent text against an ordered rule list."""

    def __init__(
        self,
        rules: Optional[tuple[IntentRule, ...]] = None,
        rules_path: Optional[Path] = None,
    ):
        self.rules: tuple[IntentRule, ...] = rules if rules is not None else INTENT_RULES

        if rules_path:
            self.load_rules(rules_path)

    def load_rules(self, path: Path) -> None:
        """Load rules from YAML file. File order is priority order."""
        if not path.exists():
            logger.warning(f"Intent rules file not found: {path}")
            return

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        rules_data = data.get("rules", {}) if isinstance(data, dict) else None
        if not isinstance(rules_data, dict):
            raise ValueError(
                f"'rules' in {path} must be a mapping of category to rule"
            )

        rules = []
        for name, rule_data in rules_data.items():
            try:
                category = IntentCategory(name)
            except ValueError:
                raise ValueError(f"Unknown intent category in {path}: {name}") from None

            if not isinstance(rule_data, dict):
                raise ValueError(f"Rule '{name}' in {path} must be a mapping")

            if category is IntentCategory.GENERAL:
                raise ValueError(f"'general' is the fallback and cannot have a rule: {path}")

            triggers = tuple(t.lower() for t in rule_data.get("triggers", []))
            if not triggers:
                raise ValueError(f"Rule '{name}' in {path} has no triggers")

            multiplier = float(rule_data.get("boost_multiplier", 1.0))
            if multiplier < 1.0:
                raise ValueError(
                    f"Rule '{name}' in {path} has boost_multiplier {multiplier} < 1.0"
                )

            rules.append(
                IntentRule(
                    category=category,
                    triggers=triggers,
                    seed_keywords=tuple(
                        k.lower() for k in rule_data.get("seed_keywords", [])
                    ),
                    boost_multiplier=multiplier,
                )
            )

        self.rules = tuple(rules)
        logger.info(f"Loaded {len(self.rules)} intent rules")

    def classify(self, text: Optional[str]) -> IntentClassification:
        """
        Classify intent text.

        Args:
            text: Free-text intent, may be empty or None

        Returns:
            IntentClassification with category, keywords and multiplier
        """
        if not text or not text.strip():
            return GENERAL_INTENT

        lowered = text.lower()
        rule = next((r for r in self.rules if r.matches(lowered)), None)

        if rule is None:
            category = IntentCategory.GENERAL
            seeds: tuple[str, ...] = ()
            multiplier = 1.0
        else:
            category = rule.category
            seeds = rule.seed_keywords
            multiplier = rule.boost_multiplier

        keywords = seeds + tuple(extract_keywords(lowered))
        logger.debug(f"Classified intent as {category.value} with {len(keywords)} keywords")

        return IntentClassification(
            category=category,
            keywords=keywords,
            boost_multiplier=multiplier,
        )


_default_analyzer = IntentAnalyzer()


def classify(text: Optional[str]) -> IntentClassification:
    """Classify with the built-in rules."""
    return _default_analyzer.classify(text)
