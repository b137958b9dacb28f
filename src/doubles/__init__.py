"""Doubles - classify test doubles.

Formalizes the taxonomy of test doubles (dummy, stub, fake, spy, mock)
into a pure decision procedure and a reference table.
"""

from doubles.classification import (
    DECISION_RULES,
    build_profile,
    classify,
    describe,
    describe_all,
    explain,
    load_profile,
    parse_category,
)
from doubles.core.schemas import (
    Category,
    CategoryDescription,
    Classification,
    RuleCheck,
    UsageProfile,
)
from doubles.exceptions import (
    CategoryError,
    CategoryNotDescribedError,
    ConfigurationError,
    DoublesError,
    IncompleteProfileError,
    InvalidArgumentError,
    InvalidConfigError,
    InvalidProfileError,
    ProfileError,
    ProfileFileNotFoundError,
    UnknownCategoryError,
)
from doubles.markdown import render_comparison_table, render_reference

__version__ = "0.1.0"

__all__ = [
    # Classification
    "DECISION_RULES",
    "classify",
    "explain",
    "build_profile",
    "load_profile",
    "describe",
    "describe_all",
    "parse_category",
    # Schemas
    "Category",
    "CategoryDescription",
    "Classification",
    "RuleCheck",
    "UsageProfile",
    # Rendering
    "render_comparison_table",
    "render_reference",
    # Base exception
    "DoublesError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigError",
    # Profile
    "ProfileError",
    "IncompleteProfileError",
    "InvalidProfileError",
    "ProfileFileNotFoundError",
    # Category
    "CategoryError",
    "UnknownCategoryError",
    "CategoryNotDescribedError",
    # Arguments
    "InvalidArgumentError",
]
