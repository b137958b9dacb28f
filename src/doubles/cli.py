"""Doubles CLI - Main entry point.

Commands:
- classify: Deduce the category of a test double from how it is used
- describe: Show the reference entry for a category
- table: Print the comparison table or write the reference document
- init: Write an example configuration file
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer

from doubles import __version__
from doubles.commands import (
    classify_command,
    describe_command,
    init_command,
    table_command,
)
from doubles.config import DoublesConfig, load_config, merge_cli_overrides
from doubles.display import print_error
from doubles.exceptions import DoublesError

app = typer.Typer(
    help="Doubles - classify test doubles.\n\nDummy, stub, fake, spy or mock?",
    no_args_is_help=True,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class OutputFormatOption(str, Enum):
    RICH = "rich"
    JSON = "json"
    MARKDOWN = "markdown"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"doubles {__version__}")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Set up root logging for a CLI invocation."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())


def _config(ctx: typer.Context) -> DoublesConfig:
    if isinstance(ctx.obj, DoublesConfig):
        return ctx.obj
    return load_config()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-V", help="Enable debug logging.")
    ] = False,
) -> None:
    """Doubles - classify test doubles."""
    try:
        config = load_config()
    except DoublesError as e:
        print_error(e.message)
        raise typer.Exit(1) from None

    configure_logging("DEBUG" if verbose else config.logging.level)
    ctx.obj = config


@app.command()
def classify(
    ctx: typer.Context,
    unused: Annotated[
        bool, typer.Option("--unused", help="Passed only to satisfy a dependency")
    ] = False,
    returns: Annotated[
        bool, typer.Option("--returns", help="Programmed to return canned values")
    ] = False,
    fake: Annotated[
        bool, typer.Option("--fake", help="Simplified working implementation of the dependency")
    ] = False,
    tracks: Annotated[
        bool, typer.Option("--tracks", help="Test asserts on the calls it received")
    ] = False,
    expectations: Annotated[
        bool,
        typer.Option("--expectations", help="Expectations preset and verified at the end"),
    ] = False,
    interactive: Annotated[
        bool, typer.Option("--interactive", "-i", help="Answer the questions interactively")
    ] = False,
    profile_file: Annotated[
        Optional[Path],
        typer.Option("--file", "-f", help="Read answers from a YAML or JSON file"),
    ] = None,
    output_format: Annotated[
        Optional[OutputFormatOption],
        typer.Option("--format", help="Output format (rich, json, markdown)"),
    ] = None,
    describe: Annotated[
        Optional[bool],
        typer.Option("--describe/--no-describe", help="Print the category description"),
    ] = None,
    explain: Annotated[
        Optional[bool],
        typer.Option("--explain/--no-explain", help="Print the decision trace"),
    ] = None,
) -> None:
    """Classify a test double from how it is used.

    Examples:
        doubles classify --returns              # Stub
        doubles classify --returns --tracks     # Spy
        doubles classify --fake --tracks        # Fake
        doubles classify -i                     # Ask the questions
        doubles classify -f profile.yaml --format json
    """
    config = merge_cli_overrides(
        _config(ctx),
        output_format=output_format.value if output_format else None,
        describe=describe,
        explain=explain,
    )
    traits = {
        "is_passed_but_unused": unused,
        "has_configured_returns": returns,
        "is_simplified_real_implementation": fake,
        "tracks_invocations": tracks,
        "has_preset_expectations_verified_at_end": expectations,
    }
    classify_command(traits, config, interactive=interactive, profile_file=profile_file)


@app.command()
def describe(
    ctx: typer.Context,
    category: Annotated[str, typer.Argument(help="dummy, stub, fake, spy or mock")],
    output_format: Annotated[
        Optional[OutputFormatOption],
        typer.Option("--format", help="Output format (rich, json, markdown)"),
    ] = None,
) -> None:
    """Show purpose, advantages and disadvantages of a category.

    Examples:
        doubles describe mock
        doubles describe stub --format json
    """
    config = merge_cli_overrides(
        _config(ctx), output_format=output_format.value if output_format else None
    )
    describe_command(category, config)


@app.command()
def table(
    markdown: Annotated[
        bool, typer.Option("--markdown", "-m", help="Print the table as Markdown")
    ] = False,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the full Markdown reference to a file"),
    ] = None,
) -> None:
    """Print the comparison table of test doubles.

    Examples:
        doubles table
        doubles table --markdown
        doubles table -o TEST_DOUBLES.md
    """
    table_command(markdown, output)


@app.command()
def init() -> None:
    """Create .doubles/config.yaml with default settings."""
    init_command()


if __name__ == "__main__":
    app()
