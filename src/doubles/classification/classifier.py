"""Decision procedure for classifying a test double.

Rules are checked in priority order and the first one whose trait holds
wins. More specific uses come first: a working simplified implementation
is a fake even if it also records calls, and preset expectations verified
at the end make a mock even if the double is also inspected afterwards.
"""

import logging
from dataclasses import dataclass

from doubles.core.schemas import Category, Classification, RuleCheck, UsageProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecisionRule:
    """One step of the decision order."""

    trait: str
    category: Category
    question: str
    because: str


DECISION_RULES: tuple[DecisionRule, ...] = (
    DecisionRule(
        trait="is_simplified_real_implementation",
        category=Category.FAKE,
        question="Does it re-implement the real logic in a simplified, working form?",
        because="it is a working, simplified implementation of the dependency",
    ),
    DecisionRule(
        trait="has_preset_expectations_verified_at_end",
        category=Category.MOCK,
        question="Were expectations set up front and verified together at the end?",
        because="its expectations were set before the exercise and verified as a unit",
    ),
    DecisionRule(
        trait="tracks_invocations",
        category=Category.SPY,
        question="Does the test assert on the calls it received afterwards?",
        because="the test inspects the calls it recorded",
    ),
    DecisionRule(
        trait="has_configured_returns",
        category=Category.STUB,
        question="Was it programmed to return canned values?",
        because="it answers calls with canned values",
    ),
    DecisionRule(
        trait="is_passed_but_unused",
        category=Category.DUMMY,
        question="Is it only passed along to satisfy a dependency?",
        because="it only fills a parameter and is never really used",
    ),
)


def classify(profile: UsageProfile) -> Category:
    """Classify a usage profile.

    Returns the category of the first rule whose trait holds, or
    ``Category.UNCLASSIFIED`` when none does. Never raises.
    """
    for rule in DECISION_RULES:
        if getattr(profile, rule.trait):
            return rule.category
    return Category.UNCLASSIFIED


def explain(profile: UsageProfile) -> Classification:
    """Classify a usage profile and record how the result was reached.

    Args:
        profile: Observations about how the double was used

    Returns:
        Classification with the deciding trait, a check per rule, and the
        lower-priority categories the double also resembles

    Example:
        result = explain(UsageProfile(tracks_invocations=True, ...))
        print(result.category, result.secondary_roles)
    """
    checks: list[RuleCheck] = []
    decided: DecisionRule | None = None
    secondary: list[Category] = []

    for rule in DECISION_RULES:
        held = bool(getattr(profile, rule.trait))
        decisive = held and decided is None
        checks.append(
            RuleCheck(trait=rule.trait, category=rule.category, held=held, decisive=decisive)
        )
        if decisive:
            decided = rule
        elif held:
            secondary.append(rule.category)

    if decided is None:
        logger.debug("No rule matched profile %s", profile.model_dump())
        return Classification(
            category=Category.UNCLASSIFIED,
            profile=profile,
            reason="No categorizing trait holds: the profile describes no "
            "meaningful interaction with the double",
            checks=checks,
        )

    logger.debug("Profile classified as %s by %s", decided.category.value, decided.trait)
    reason = f"{decided.category.label}: {decided.because}"
    if secondary:
        roles = ", ".join(c.value for c in secondary)
        reason += f" (takes precedence over {roles})"

    return Classification(
        category=decided.category,
        profile=profile,
        matched_trait=decided.trait,
        reason=reason,
        checks=checks,
        secondary_roles=secondary,
    )
