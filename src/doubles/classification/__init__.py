"""Classification of test doubles.

Provides the ordered decision procedure, the reference table of
categories and validation of profile input.
"""

from doubles.classification.classifier import (
    DECISION_RULES,
    DecisionRule,
    classify,
    explain,
)
from doubles.classification.profiles import build_profile, load_profile
from doubles.classification.reference import (
    describe,
    describe_all,
    load_reference_table,
    parse_category,
)

__all__ = [
    "DECISION_RULES",
    "DecisionRule",
    "classify",
    "explain",
    "build_profile",
    "load_profile",
    "describe",
    "describe_all",
    "load_reference_table",
    "parse_category",
]
