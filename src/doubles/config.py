"""Doubles configuration schema and loading."""

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from doubles.exceptions import InvalidConfigError

logger = logging.getLogger(__name__)

OutputFormat = Literal["rich", "json", "markdown"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

CONFIG_DIR = ".doubles"
CONFIG_FILE = "config.yaml"


class OutputConfig(BaseModel):
    """How classification results are printed."""

    format: OutputFormat = Field(default="rich", description="Output format")
    describe: bool = Field(
        default=True, description="Print the category description after classifying"
    )
    explain: bool = Field(default=False, description="Print the rule-by-rule trace")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default="WARNING", description="Root log level")


class DoublesConfig(BaseModel):
    """Complete doubles configuration.

    Loaded from .doubles/config.yaml under the 'doubles:' section.
    CLI flags override config values with precedence:
    1. CLI flags (highest)
    2. .doubles/config.yaml
    3. Defaults (lowest)
    """

    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(project_root: Path | None = None) -> DoublesConfig:
    """Load configuration from .doubles/config.yaml.

    Args:
        project_root: Directory containing .doubles/. Defaults to cwd.

    Returns:
        DoublesConfig with values from file or defaults

    Raises:
        InvalidConfigError: If the file is not valid YAML or fails validation
    """
    if project_root is None:
        project_root = Path.cwd()

    config_path = project_root / CONFIG_DIR / CONFIG_FILE

    if not config_path.exists():
        return DoublesConfig()

    logger.debug("Loading config from %s", config_path)
    try:
        with open(config_path) as f:
            raw_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise InvalidConfigError(config_path, f"invalid YAML: {e}") from e

    if not isinstance(raw_config, dict):
        raise InvalidConfigError(config_path, "expected a mapping at top level")

    section = raw_config.get("doubles") or {}

    try:
        return DoublesConfig.model_validate(section)
    except ValidationError as e:
        raise InvalidConfigError(config_path, str(e)) from e


def merge_cli_overrides(
    config: DoublesConfig,
    output_format: OutputFormat | None = None,
    describe: bool | None = None,
    explain: bool | None = None,
) -> DoublesConfig:
    """Merge CLI flag overrides into config.

    Args:
        config: Base configuration from file
        output_format: CLI override for the output format
        describe: CLI override for printing descriptions
        explain: CLI override for printing the rule trace

    Returns:
        New DoublesConfig with overrides applied

    Example:
        config = load_config()
        config = merge_cli_overrides(config, output_format="json")
    """
    updated = config.model_copy(deep=True)

    if output_format is not None:
        updated.output.format = output_format

    if describe is not None:
        updated.output.describe = describe

    if explain is not None:
        updated.output.explain = explain

    return updated


def save_example_config(output_path: Path) -> None:
    """Save an example configuration file.

    Args:
        output_path: Path to write example config.yaml
    """
    example = {
        "doubles": {
            "output": {
                "format": "rich",
                "describe": True,
                "explain": False,
            },
            "logging": {
                "level": "WARNING",
            },
        }
    }

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        yaml.dump(example, f, default_flow_style=False, sort_keys=False)
