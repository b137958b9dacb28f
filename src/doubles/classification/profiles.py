"""Building usage profiles from untrusted input.

The classifier accepts any UsageProfile. Input that cannot become one
(missing answers, non-boolean values, unknown keys, unreadable files) is
rejected here, before classification.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from doubles.core.schemas import UsageProfile
from doubles.exceptions import (
    IncompleteProfileError,
    InvalidProfileError,
    ProfileFileNotFoundError,
)

logger = logging.getLogger(__name__)


def _field_name(key: Any) -> str:
    """Map a camelCase alias back to its field name."""
    aliases = {to_camel(name): name for name in UsageProfile.trait_names()}
    return aliases.get(str(key), str(key))


def build_profile(data: Mapping[str, Any]) -> UsageProfile:
    """Validate a mapping of answers into a UsageProfile.

    Keys may be field names (``tracks_invocations``) or camelCase aliases
    (``tracksInvocations``). Values must be booleans.

    Args:
        data: Mapping of profile answers

    Returns:
        Validated UsageProfile

    Raises:
        IncompleteProfileError: If any of the five answers is missing
        InvalidProfileError: For non-boolean values or unknown keys
    """
    if not isinstance(data, Mapping):
        raise InvalidProfileError(f"expected a mapping, got {type(data).__name__}")

    try:
        return UsageProfile.model_validate(dict(data))
    except PydanticValidationError as e:
        errors = e.errors()

    missing = [_field_name(err["loc"][0]) for err in errors if err["type"] == "missing"]
    if missing:
        order = UsageProfile.trait_names()
        raise IncompleteProfileError(sorted(set(missing), key=order.index))

    problems = []
    for err in errors:
        field = ".".join(str(part) for part in err["loc"])
        if err["type"] == "extra_forbidden":
            problems.append(f"unknown field '{field}'")
        else:
            problems.append(f"'{_field_name(field)}' must be true or false")
    raise InvalidProfileError("; ".join(problems))


def load_profile(path: Path | str) -> UsageProfile:
    """Load a usage profile from a YAML or JSON file.

    Example file:
        isPassedButUnused: false
        hasConfiguredReturns: true
        isSimplifiedRealImplementation: false
        tracksInvocations: true
        hasPresetExpectationsVerifiedAtEnd: false

    Raises:
        ProfileFileNotFoundError: If the file does not exist
        InvalidProfileError: If the file is not a YAML/JSON mapping
        IncompleteProfileError: If answers are missing
    """
    path = Path(path)
    if not path.is_file():
        raise ProfileFileNotFoundError(path)

    logger.debug("Loading profile from %s", path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise InvalidProfileError(f"could not parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidProfileError(f"{path} must contain a mapping of answers")

    return build_profile(data)
