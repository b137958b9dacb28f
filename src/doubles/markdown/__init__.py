"""Markdown generation for the test double reference.

Provides escape utilities, a table builder and Jinja2 rendering of the
comparison table, the decision order and individual classifications.
"""

from doubles.markdown.builders import Table, bullet_list
from doubles.markdown.escape import escape_pipe, escape_table_cell, slugify
from doubles.markdown.render import (
    render_classification,
    render_comparison_table,
    render_reference,
)

__all__ = [
    # Builders
    "Table",
    "bullet_list",
    # Render functions
    "render_classification",
    "render_comparison_table",
    "render_reference",
    # Escape utilities
    "escape_pipe",
    "escape_table_cell",
    "slugify",
]
