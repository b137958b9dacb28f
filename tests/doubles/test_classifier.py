"""Tests for the test double decision procedure."""

from itertools import product

import pytest

from doubles.classification import DECISION_RULES, classify, explain
from doubles.core.schemas import Category, UsageProfile

TRAITS = UsageProfile.trait_names()

ALL_PROFILES = [
    UsageProfile(**dict(zip(TRAITS, combo))) for combo in product([False, True], repeat=5)
]


def _ids(profile: UsageProfile) -> str:
    return "+".join(profile.active_traits()) or "none"


class TestScenarios:
    """Concrete scenarios from the decision order."""

    def test_all_false_is_unclassified(self, profile) -> None:
        assert classify(profile()) == Category.UNCLASSIFIED

    def test_passed_but_unused_is_dummy(self, profile) -> None:
        assert classify(profile(is_passed_but_unused=True)) == Category.DUMMY

    def test_configured_returns_is_stub(self, profile) -> None:
        assert classify(profile(has_configured_returns=True)) == Category.STUB

    def test_fake_takes_precedence_over_tracking(self, profile) -> None:
        p = profile(is_simplified_real_implementation=True, tracks_invocations=True)
        assert classify(p) == Category.FAKE

    def test_tracking_wins_over_configured_returns(self, profile) -> None:
        p = profile(tracks_invocations=True, has_configured_returns=True)
        assert classify(p) == Category.SPY

    def test_preset_expectations_with_tracking_is_mock(self, profile) -> None:
        p = profile(has_preset_expectations_verified_at_end=True, tracks_invocations=True)
        assert classify(p) == Category.MOCK

    def test_everything_true_is_fake(self, profile) -> None:
        p = profile(**{name: True for name in TRAITS})
        assert classify(p) == Category.FAKE


class TestPrecedence:
    """Properties that hold over all 32 profiles."""

    @pytest.mark.parametrize("p", ALL_PROFILES, ids=_ids)
    def test_total(self, p: UsageProfile) -> None:
        assert classify(p) in set(Category)

    @pytest.mark.parametrize("p", ALL_PROFILES, ids=_ids)
    def test_idempotent(self, p: UsageProfile) -> None:
        assert classify(p) == classify(p)

    @pytest.mark.parametrize("p", ALL_PROFILES, ids=_ids)
    def test_explain_agrees_with_classify(self, p: UsageProfile) -> None:
        assert explain(p).category == classify(p)

    @pytest.mark.parametrize(
        "p", [p for p in ALL_PROFILES if p.is_simplified_real_implementation], ids=_ids
    )
    def test_simplified_implementation_is_always_fake(self, p: UsageProfile) -> None:
        assert classify(p) == Category.FAKE

    @pytest.mark.parametrize(
        "p",
        [
            p
            for p in ALL_PROFILES
            if not p.is_simplified_real_implementation
            and p.has_preset_expectations_verified_at_end
        ],
        ids=_ids,
    )
    def test_preset_expectations_without_fake_is_mock(self, p: UsageProfile) -> None:
        assert classify(p) == Category.MOCK

    @pytest.mark.parametrize(
        "p",
        [
            p
            for p in ALL_PROFILES
            if p.tracks_invocations
            and not p.is_simplified_real_implementation
            and not p.has_preset_expectations_verified_at_end
        ],
        ids=_ids,
    )
    def test_tracking_without_higher_traits_is_spy(self, p: UsageProfile) -> None:
        assert classify(p) == Category.SPY

    @pytest.mark.parametrize("dummy", [False, True])
    def test_configured_returns_alone_is_stub(self, profile, dummy: bool) -> None:
        p = profile(has_configured_returns=True, is_passed_but_unused=dummy)
        assert classify(p) == Category.STUB

    def test_unclassified_only_for_all_false(self) -> None:
        unclassified = [p for p in ALL_PROFILES if classify(p) == Category.UNCLASSIFIED]
        assert len(unclassified) == 1
        assert unclassified[0].active_traits() == []


class TestDecisionRules:
    """Tests for the ordered rule table."""

    def test_rule_order(self) -> None:
        assert [rule.category for rule in DECISION_RULES] == [
            Category.FAKE,
            Category.MOCK,
            Category.SPY,
            Category.STUB,
            Category.DUMMY,
        ]

    def test_every_trait_has_one_rule(self) -> None:
        assert sorted(rule.trait for rule in DECISION_RULES) == sorted(TRAITS)

    def test_questions_are_questions(self) -> None:
        for rule in DECISION_RULES:
            assert rule.question.endswith("?")


class TestExplain:
    """Tests for explained classifications."""

    def test_unclassified_has_no_decisive_check(self, profile) -> None:
        result = explain(profile())

        assert result.category == Category.UNCLASSIFIED
        assert result.matched_trait is None
        assert not result.is_classified
        assert not any(check.decisive for check in result.checks)
        assert result.secondary_roles == []
        assert "no meaningful interaction" in result.reason

    def test_checks_follow_rule_order(self, profile) -> None:
        result = explain(profile(has_configured_returns=True))

        assert [c.trait for c in result.checks] == [r.trait for r in DECISION_RULES]
        assert len(result.checks) == 5

    @pytest.mark.parametrize("p", ALL_PROFILES, ids=_ids)
    def test_at_most_one_decisive_check(self, p: UsageProfile) -> None:
        result = explain(p)
        decisive = [c for c in result.checks if c.decisive]

        if result.category == Category.UNCLASSIFIED:
            assert decisive == []
        else:
            assert len(decisive) == 1
            assert decisive[0].category == result.category
            assert decisive[0].trait == result.matched_trait

    def test_secondary_roles_in_priority_order(self, profile) -> None:
        p = profile(
            is_simplified_real_implementation=True,
            tracks_invocations=True,
            is_passed_but_unused=True,
        )
        result = explain(p)

        assert result.category == Category.FAKE
        assert result.secondary_roles == [Category.SPY, Category.DUMMY]
        assert result.is_ambiguous
        assert "takes precedence over spy, dummy" in result.reason

    def test_single_trait_is_not_ambiguous(self, profile) -> None:
        result = explain(profile(tracks_invocations=True))

        assert result.category == Category.SPY
        assert result.matched_trait == "tracks_invocations"
        assert not result.is_ambiguous
        assert result.reason.startswith("Spy:")

    def test_profile_is_kept(self, profile) -> None:
        p = profile(has_configured_returns=True)
        assert explain(p).profile == p

    def test_held_flags_match_profile(self, profile) -> None:
        p = profile(has_configured_returns=True, has_preset_expectations_verified_at_end=True)
        result = explain(p)

        held = {c.trait for c in result.checks if c.held}
        assert held == {"has_configured_returns", "has_preset_expectations_verified_at_end"}
