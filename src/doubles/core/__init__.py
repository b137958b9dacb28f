"""Core value objects for the test double taxonomy."""

from doubles.core.schemas import (
    Category,
    CategoryDescription,
    Classification,
    RuleCheck,
    UsageProfile,
)

__all__ = [
    "Category",
    "CategoryDescription",
    "Classification",
    "RuleCheck",
    "UsageProfile",
]
