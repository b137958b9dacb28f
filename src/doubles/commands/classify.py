"""Classify command implementation."""

import json
import logging
from pathlib import Path

import typer
from rich.prompt import Confirm

from doubles.classification import (
    DECISION_RULES,
    build_profile,
    describe,
    explain,
    load_profile,
)
from doubles.config import DoublesConfig
from doubles.core.schemas import UsageProfile
from doubles.display import (
    console,
    print_classification,
    print_description,
    print_error,
    print_info,
    print_trace,
)
from doubles.exceptions import DoublesError, InvalidArgumentError
from doubles.markdown import render_classification, render_comparison_table

logger = logging.getLogger(__name__)


def prompt_profile() -> UsageProfile:
    """Ask the yes/no questions of the decision order interactively."""
    console.print()
    console.print("[bold]Describe how the double is used in the test:[/]")
    console.print()

    answers = {rule.trait: Confirm.ask(rule.question, default=False) for rule in DECISION_RULES}
    return build_profile(answers)


def resolve_profile(
    traits: dict[str, bool],
    interactive: bool = False,
    profile_file: Path | None = None,
) -> UsageProfile:
    """Build the profile from flags, a file, or interactive answers.

    Args:
        traits: Trait flags given on the command line
        interactive: Ask the questions instead of reading flags
        profile_file: YAML/JSON file holding the answers

    Raises:
        InvalidArgumentError: If input sources are combined
    """
    if interactive and profile_file is not None:
        raise InvalidArgumentError("--interactive", "cannot be combined with --file")

    if (interactive or profile_file is not None) and any(traits.values()):
        source = "--interactive" if interactive else "--file"
        raise InvalidArgumentError(source, "cannot be combined with trait flags")

    if profile_file is not None:
        return load_profile(profile_file)
    if interactive:
        return prompt_profile()
    return build_profile(traits)


def classify_command(
    traits: dict[str, bool],
    config: DoublesConfig,
    interactive: bool = False,
    profile_file: Path | None = None,
) -> None:
    """Classify a test double and print the result.

    This function contains the business logic for the classify command.
    Every profile resolves, so the exit code is 0 unless the input itself
    could not be read.
    """
    try:
        profile = resolve_profile(traits, interactive, profile_file)
    except DoublesError as e:
        print_error(e.message)
        raise SystemExit(1) from None

    result = explain(profile)
    logger.info("Classified %s as %s", profile.active_traits(), result.category.value)

    output = config.output
    entry = describe(result.category) if output.describe and result.is_classified else None

    if output.format == "json":
        payload = {
            "classification": result.model_dump(mode="json"),
            "description": entry.model_dump(mode="json") if entry else None,
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    if output.format == "markdown":
        text = render_classification(result)
        if entry:
            text += "\n" + render_comparison_table([entry]) + "\n"
        typer.echo(text, nl=False)
        return

    print_classification(result)
    if output.explain:
        print_trace(result)
    if entry:
        print_description(entry)
    elif not result.is_classified:
        print_info("None of the five test double categories applies to this usage.")
