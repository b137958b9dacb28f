"""Reference table of test double categories.

The table ships with the package as ``reference.yaml`` and is loaded once,
validated with pydantic and cached. It is read-only.
"""

import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from doubles.core.schemas import Category, CategoryDescription
from doubles.exceptions import CategoryNotDescribedError, UnknownCategoryError

logger = logging.getLogger(__name__)

REFERENCE_PATH = Path(__file__).parent / "reference.yaml"


class ReferenceTable(BaseModel):
    """Parsed reference table."""

    categories: list[CategoryDescription] = Field(default_factory=list)


@lru_cache(maxsize=1)
def load_reference_table() -> dict[Category, CategoryDescription]:
    """Load and index the packaged reference table.

    Returns:
        Mapping from category to its description, in table order
    """
    logger.debug("Loading reference table from %s", REFERENCE_PATH)
    with open(REFERENCE_PATH, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    table = ReferenceTable.model_validate(data)
    entries = {entry.category: entry for entry in table.categories}

    missing = [c.value for c in Category.doubles() if c not in entries]
    if missing:
        raise ValueError(f"Reference table is missing categories: {', '.join(missing)}")

    return {category: entries[category] for category in Category.doubles()}


def describe(category: Category) -> CategoryDescription:
    """Return the purpose, advantages and disadvantages of a category.

    Raises:
        CategoryNotDescribedError: For Category.UNCLASSIFIED
    """
    table = load_reference_table()
    try:
        return table[category]
    except KeyError:
        raise CategoryNotDescribedError(Category(category).value) from None


def describe_all() -> list[CategoryDescription]:
    """Return every reference entry in table order."""
    return list(load_reference_table().values())


def parse_category(name: str) -> Category:
    """Resolve a user-supplied category name.

    Matching ignores case and surrounding whitespace.

    Raises:
        UnknownCategoryError: If the name matches no category
    """
    normalized = name.strip().lower()
    for category in Category:
        if category.value == normalized:
            return category
    raise UnknownCategoryError(name, [c.value for c in Category])
