"""Rendering of the reference table and classifications as Markdown."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from doubles.classification.classifier import DECISION_RULES
from doubles.classification.reference import describe_all
from doubles.core.schemas import CategoryDescription, Classification
from doubles.markdown.builders import Table, bullet_list
from doubles.markdown.escape import slugify

TEMPLATES_DIR = Path(__file__).parent / "templates"


def get_jinja_env() -> Environment:
    """Get configured Jinja2 environment."""
    env = Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=select_autoescape(default=False),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["bullets"] = bullet_list
    env.filters["slugify"] = slugify
    return env


def render_comparison_table(descriptions: list[CategoryDescription] | None = None) -> str:
    """Render the comparison table, one row per category.

    Args:
        descriptions: Entries to render (defaults to the full reference table)

    Returns:
        Markdown table string
    """
    if descriptions is None:
        descriptions = describe_all()

    table = Table(["Type", "Purpose", "Advantages", "Disadvantages"])
    for entry in descriptions:
        table.add_row(
            entry.category.label,
            entry.purpose,
            "<br>".join(entry.advantages),
            "<br>".join(entry.disadvantages),
        )
    return table.render()


def render_reference() -> str:
    """Render the full reference document.

    Returns:
        Markdown string with the decision order, comparison table and a
        section per category (with trailing newline)
    """
    env = get_jinja_env()
    template = env.get_template("reference.md.j2")
    result: str = template.render(
        rules=DECISION_RULES,
        table=render_comparison_table(),
        descriptions=describe_all(),
    )
    if not result.endswith("\n"):
        result += "\n"
    return result


def render_classification(classification: Classification) -> str:
    """Render one explained classification as Markdown."""
    env = get_jinja_env()
    template = env.get_template("classification.md.j2")
    result: str = template.render(result=classification)
    if not result.endswith("\n"):
        result += "\n"
    return result
