"""Tests for coach assignment."""

import random

import pytest

from thryvin.core.coach import (
    COACH_POOL,
    CoachAssigner,
    CoachSelection,
    coach_profile,
)
from thryvin.core.exceptions import NoCoachAvailableError

ALL_NAMES = {
    name for by_style in COACH_POOL.values() for names in by_style.values() for name in names
}


class TestCandidates:
    """Tests for candidate pool resolution."""

    def test_gender_and_style_list(self):
        assigner = CoachAssigner()
        assert assigner.candidates("male", "technical") == COACH_POOL["male"]["technical"]

    def test_unknown_style_falls_back_to_balanced(self):
        assigner = CoachAssigner()
        assert assigner.candidates("female", "casual") == COACH_POOL["female"]["balanced"]

    def test_empty_style_falls_back_to_balanced(self):
        assigner = CoachAssigner()
        assert assigner.candidates("male", "") == COACH_POOL["male"]["balanced"]

    @pytest.mark.parametrize("gender", ["other", "", "prefer-not-to-say"])
    def test_other_gender_uses_full_union(self, gender):
        """Style is ignored for genders without their own pool."""
        assigner = CoachAssigner()
        names = assigner.candidates(gender, "disciplined")

        assert set(names) == ALL_NAMES
        assert len(names) == 32

    def test_explicit_empty_style_list_is_kept(self):
        pool = {"male": {"technical": [], "balanced": ["Ben Steady"]}}
        assert CoachAssigner(pool=pool).candidates("male", "technical") == []

    def test_pool_without_balanced_resolves_empty(self):
        pool = {"male": {"technical": ["Eli Vector"]}}
        assert CoachAssigner(pool=pool).candidates("male", "casual") == []


class TestAssign:
    """Tests for assign."""

    def test_male_technical_only_returns_male_technical(self):
        assigner = CoachAssigner(random.Random(7))
        for _ in range(50):
            coach = assigner.assign("male", "technical")
            assert coach.name in COACH_POOL["male"]["technical"]
            assert coach.style == "technical"

    def test_other_can_return_any_name(self):
        assigner = CoachAssigner(random.Random(3))
        seen = {assigner.assign("other", "disciplined").name for _ in range(2000)}

        assert seen <= ALL_NAMES
        assert seen & set(COACH_POOL["male"]["motivational"])
        assert seen & set(COACH_POOL["female"]["balanced"])

    def test_uses_injected_rng(self, first_choice_rng):
        assigner = CoachAssigner(first_choice_rng)

        coach = assigner.assign("female", "motivational")

        assert coach == CoachSelection(name="Luna Blaze", style="motivational")
        assert first_choice_rng.seen == [COACH_POOL["female"]["motivational"]]

    def test_seeded_draws_are_reproducible(self):
        first = CoachAssigner(random.Random(42)).assign("male", "balanced")
        second = CoachAssigner(random.Random(42)).assign("male", "balanced")
        assert first == second

    def test_unknown_style_reported_as_balanced(self, first_choice_rng):
        coach = CoachAssigner(first_choice_rng).assign("male", "casual")
        assert coach.style == "balanced"

    def test_empty_pool_raises_without_drawing(self, first_choice_rng):
        pool = {"male": {"technical": ["Eli Vector"]}}
        assigner = CoachAssigner(first_choice_rng, pool=pool)

        with pytest.raises(NoCoachAvailableError):
            assigner.assign("male", "casual")
        assert first_choice_rng.seen == []


class TestReroll:
    """Tests for reroll."""

    def test_never_returns_current_name(self):
        assigner = CoachAssigner(random.Random(11))
        for _ in range(200):
            coach = assigner.reroll("Zo Blaze", "male", "motivational")
            assert coach.name != "Zo Blaze"
            assert coach.name in COACH_POOL["male"]["motivational"]

    def test_excludes_current_before_drawing(self, first_choice_rng):
        CoachAssigner(first_choice_rng).reroll("Zo Blaze", "male", "motivational")
        assert first_choice_rng.seen == [["Max Ryder", "Chase Summit", "Kai Storm"]]

    def test_single_candidate_pool_keeps_current(self, first_choice_rng):
        pool = {"male": {"balanced": ["Solo Coach"]}}
        assigner = CoachAssigner(first_choice_rng, pool=pool)

        coach = assigner.reroll("Solo Coach", "male", "balanced")

        assert coach.name == "Solo Coach"
        assert first_choice_rng.seen == []

    def test_empty_pool_keeps_current(self, first_choice_rng):
        pool = {"male": {"technical": ["Eli Vector"]}}
        assigner = CoachAssigner(first_choice_rng, pool=pool)

        coach = assigner.reroll("Eli Vector", "male", "casual")

        assert coach.name == "Eli Vector"
        assert first_choice_rng.seen == []

    def test_current_not_in_pool_draws_from_whole_pool(self, first_choice_rng):
        CoachAssigner(first_choice_rng).reroll("Somebody Else", "female", "technical")
        assert first_choice_rng.seen == [COACH_POOL["female"]["technical"]]


class TestCoachProfile:
    """Tests for style display copy."""

    @pytest.mark.parametrize("style", ["motivational", "technical", "disciplined", "balanced"])
    def test_each_style_has_copy(self, style):
        profile = coach_profile(style)
        assert profile.style == style
        assert profile.personality
        assert profile.description

    def test_unknown_style_falls_back(self):
        assert coach_profile("casual") == coach_profile("balanced")
