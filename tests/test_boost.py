"""
Tests for the intent boost.
"""

import pytest

from matcher.boost import apply_boost, cross_bonus, keyword_score, profile_text
from matcher.intent import IntentCategory, IntentClassification, classify
from tests.helpers import make_profile


def classification(category, keywords=(), multiplier=1.0):
    return IntentClassification(
        category=category, keywords=tuple(keywords), boost_multiplier=multiplier
    )


class TestProfileText:

    def test_field_order(self):
        candidate = make_profile(
            "c",
            looking_for=["Study friends"],
            tags=["AI"],
            bio="Loves Chess",
            major="Math",
        )
        assert profile_text(candidate) == "study friends ai loves chess math"


class TestKeywordScore:
    """10 points per keyword found in the profile text."""

    def test_each_hit_counts(self):
        candidate = make_profile("c", bio="Hackathon regular")
        intent = classification(IntentCategory.GENERAL, ["hackathon", "chess"])
        assert keyword_score(intent, candidate) == 10

    def test_repeated_keyword_counts_twice(self):
        candidate = make_profile("c", tags=["Hackathon"])
        intent = classification(IntentCategory.GENERAL, ["hackathon", "hackathon"])
        assert keyword_score(intent, candidate) == 20

    def test_substring_match(self):
        candidate = make_profile("c", bio="Always looking for teammates")
        intent = classification(IntentCategory.TEAMMATE, ["team"])
        assert keyword_score(intent, candidate) == 10

    def test_no_keywords(self):
        candidate = make_profile("c", bio="anything")
        assert keyword_score(classification(IntentCategory.GENERAL), candidate) == 0


class TestCrossBonus:
    """+15 when looking-for lines up with the intent category."""

    @pytest.mark.parametrize(
        "category, looking_for, expected",
        [
            (IntentCategory.TEAMMATE, ["Study friends"], 15),
            (IntentCategory.TEAMMATE, ["Project partners"], 15),
            (IntentCategory.TEAMMATE, ["Gaming buddies"], 0),
            (IntentCategory.STUDY, ["Study friends"], 15),
            (IntentCategory.STUDY, ["Project partners"], 0),
            (IntentCategory.FRIEND, ["Best friends"], 15),
            (IntentCategory.FRIEND, ["Social events"], 15),
            (IntentCategory.HOBBY, ["Hobby groups"], 15),
            (IntentCategory.HOBBY, ["Gaming buddies"], 15),
            (IntentCategory.GENERAL, ["Study friends"], 0),
        ],
    )
    def test_category_triggers(self, category, looking_for, expected):
        candidate = make_profile("c", looking_for=looking_for)
        assert cross_bonus(classification(category), candidate) == expected

    def test_only_looking_for_counts(self):
        candidate = make_profile("c", bio="friend to everyone", tags=["Social"])
        assert cross_bonus(classification(IntentCategory.FRIEND), candidate) == 0

    def test_applies_once(self):
        candidate = make_profile("c", looking_for=["Study friends", "Project team"])
        assert cross_bonus(classification(IntentCategory.TEAMMATE), candidate) == 15


class TestApplyBoost:
    """(base + keywords + cross) * multiplier, capped at 100."""

    def test_combined(self):
        candidate = make_profile("c", looking_for=["Social events"], bio="Chess")
        intent = classification(IntentCategory.FRIEND, ["chess"], multiplier=1.3)
        assert apply_boost(10, intent, candidate) == pytest.approx(45.5)

    def test_multiplier_without_hits(self):
        candidate = make_profile("c", tags=["Chess"])
        intent = classification(IntentCategory.TEAMMATE, ["team"], multiplier=1.5)
        assert apply_boost(50, intent, candidate) == pytest.approx(75)

    def test_capped(self):
        candidate = make_profile("c", tags=["Hackathon"], looking_for=["Project"])
        intent = classify("hackathon teammates")
        assert apply_boost(90, intent, candidate) == 100

    def test_zero_base_can_be_lifted(self):
        candidate = make_profile("c", looking_for=["Study friends"])
        intent = classify("study buddies")
        assert apply_boost(0, intent, candidate) > 0
