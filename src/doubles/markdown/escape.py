"""Markdown escaping utilities."""

import re


def escape_pipe(text: str) -> str:
    """Escape pipe characters for table cells."""
    return text.replace("|", "\\|")


def escape_table_cell(text: str) -> str:
    """Escape content for safe use in markdown table cells.

    Collapses whitespace (including newlines) and escapes pipes.
    ``<br>`` line breaks are preserved.
    """
    text = re.sub(r"\s+", " ", text)
    text = escape_pipe(text)
    return text.strip()


def slugify(text: str) -> str:
    """Convert a heading to its anchor slug."""
    slug = text.lower()
    slug = re.sub(r"[\s_]+", "-", slug)
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")
