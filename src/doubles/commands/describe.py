"""Describe command implementation."""

import typer

from doubles.classification import describe, parse_category
from doubles.config import DoublesConfig
from doubles.display import print_description, print_error
from doubles.exceptions import DoublesError
from doubles.markdown import render_comparison_table


def describe_command(name: str, config: DoublesConfig) -> None:
    """Show the reference entry for one category.

    This function contains the business logic for the describe command.
    """
    try:
        entry = describe(parse_category(name))
    except DoublesError as e:
        print_error(e.message)
        raise SystemExit(1) from None

    if config.output.format == "json":
        typer.echo(entry.model_dump_json(indent=2))
    elif config.output.format == "markdown":
        typer.echo(render_comparison_table([entry]))
    else:
        print_description(entry)
