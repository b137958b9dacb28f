"""Pydantic schemas for usage profiles, categories and classifications."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictBool
from pydantic.alias_generators import to_camel


class Category(str, Enum):
    """Test double category.

    The five taxonomy members plus ``UNCLASSIFIED``, the explicit result
    for a profile that describes no meaningful interaction with the double.
    """

    DUMMY = "dummy"
    STUB = "stub"
    FAKE = "fake"
    SPY = "spy"
    MOCK = "mock"
    UNCLASSIFIED = "unclassified"

    @classmethod
    def doubles(cls) -> list["Category"]:
        """Return the five test double categories in reference table order."""
        return [cls.DUMMY, cls.STUB, cls.FAKE, cls.SPY, cls.MOCK]

    @property
    def is_double(self) -> bool:
        """Whether this is one of the five taxonomy categories."""
        return self is not Category.UNCLASSIFIED

    @property
    def label(self) -> str:
        return self.value.capitalize()


class UsageProfile(BaseModel):
    """Observations about how a test double was used in one test.

    All five fields are required and independent. No combination is
    invalid: the classifier resolves every one of the 32 possible
    profiles. Fields may be given by name or by camelCase alias
    (``isPassedButUnused``, ``hasConfiguredReturns`` and so on).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    is_passed_but_unused: StrictBool = Field(
        ...,
        description="Supplied only to satisfy a dependency; no call on it matters to the test",
    )
    has_configured_returns: StrictBool = Field(
        ..., description="Programmed to return canned values for specific calls"
    )
    is_simplified_real_implementation: StrictBool = Field(
        ...,
        description="Re-implements real logic in a simplified, stateful form",
    )
    tracks_invocations: StrictBool = Field(
        ..., description="The test asserts on calls made to it after the fact"
    )
    has_preset_expectations_verified_at_end: StrictBool = Field(
        ...,
        description="Expectations are set before exercising the system under test "
        "and checked as a unit at the end",
    )

    @classmethod
    def trait_names(cls) -> list[str]:
        """Field names in declaration order."""
        return list(cls.model_fields)

    def active_traits(self) -> list[str]:
        """Names of the fields set to true, in declaration order."""
        return [name for name in self.trait_names() if getattr(self, name)]


class CategoryDescription(BaseModel):
    """Reference table entry for one test double category."""

    model_config = ConfigDict(frozen=True)

    category: Category
    purpose: str = Field(..., min_length=1)
    advantages: list[str] = Field(..., min_length=1)
    disadvantages: list[str] = Field(..., min_length=1)
    example: str = ""


class RuleCheck(BaseModel):
    """Outcome of evaluating one decision rule against a profile.

    Attributes:
        trait: Profile field the rule inspects
        category: Category the rule assigns when it decides
        held: Whether the profile has the trait
        decisive: Whether this rule produced the result
    """

    model_config = ConfigDict(frozen=True)

    trait: str
    category: Category
    held: bool
    decisive: bool = False


class Classification(BaseModel):
    """Explained classification result.

    Attributes:
        category: The resulting category (possibly UNCLASSIFIED)
        profile: The profile that was classified
        matched_trait: Profile field that decided the result, if any
        reason: Human-readable explanation of the result
        checks: Every decision rule in priority order
        secondary_roles: Categories whose trait also held but lost on precedence
    """

    model_config = ConfigDict(frozen=True)

    category: Category
    profile: UsageProfile
    matched_trait: str | None = None
    reason: str
    checks: list[RuleCheck] = Field(default_factory=list)
    secondary_roles: list[Category] = Field(default_factory=list)

    @property
    def is_classified(self) -> bool:
        return self.category.is_double

    @property
    def is_ambiguous(self) -> bool:
        """Whether the double also plays lower-priority roles."""
        return bool(self.secondary_roles)
