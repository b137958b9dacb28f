"""Markdown builder classes."""

from __future__ import annotations

from doubles.markdown.escape import escape_table_cell


class Table:
    """Builder for markdown tables.

    Example:
        table = Table(["Category", "Purpose"])
        table.add_row("Stub", "Provides canned answers")
        print(table.render())
    """

    def __init__(self, headers: list[str]) -> None:
        self.headers = headers
        self.rows: list[list[str]] = []

    def add_row(self, *values: str) -> Table:
        """Add a row to the table."""
        if len(values) != len(self.headers):
            raise ValueError(f"Row has {len(values)} values, expected {len(self.headers)}")
        self.rows.append([escape_table_cell(str(v)) for v in values])
        return self

    def render(self) -> str:
        """Render the table to markdown."""
        if not self.headers:
            return ""

        lines = [
            "| " + " | ".join(self.headers) + " |",
            "| " + " | ".join("-" * len(h) for h in self.headers) + " |",
        ]
        for row in self.rows:
            lines.append("| " + " | ".join(row) + " |")

        return "\n".join(lines)


def bullet_list(items: list[str]) -> str:
    """Render items as a markdown bullet list."""
    return "\n".join(f"- {item}" for item in items)
