"""Doubles exception hierarchy.

The classifier itself never raises: every usage profile resolves to a
category (or the explicit ``unclassified`` sentinel). These exceptions
cover the boundaries around it: configuration files, profile input and
category lookups.

Usage:
    from doubles.exceptions import IncompleteProfileError, UnknownCategoryError

    try:
        profile = load_profile(path)
    except IncompleteProfileError as e:
        print(f"Missing answers: {', '.join(e.missing)}")
    except DoublesError as e:
        print(f"Error: {e}")
"""

from pathlib import Path


class DoublesError(Exception):
    """Base exception for all doubles errors.

    All doubles-specific exceptions inherit from this class, allowing
    callers to catch them with a single except clause.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# Configuration Errors


class ConfigurationError(DoublesError):
    """Error in doubles configuration."""

    pass


class InvalidConfigError(ConfigurationError):
    """Configuration file could not be parsed or validated.

    Raised when .doubles/config.yaml is not valid YAML or does not
    match the configuration schema.
    """

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Invalid config in {self.path}: {reason}")


# Profile Errors


class ProfileError(DoublesError):
    """Base class for usage profile errors."""

    pass


class IncompleteProfileError(ProfileError):
    """Usage profile is missing one or more answers.

    Every profile field is a required boolean; a partial description of
    how a double is used is rejected before it reaches the classifier.
    """

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Incomplete profile, missing: {', '.join(self.missing)}")


class InvalidProfileError(ProfileError):
    """Usage profile input is malformed.

    Raised for non-boolean values, unknown keys or documents that are
    not a mapping.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid profile: {reason}")


class ProfileFileNotFoundError(ProfileError):
    """Profile file does not exist."""

    def __init__(self, path: Path | str) -> None:
        self.path = str(path)
        super().__init__(f"Profile file not found: {self.path}")


# Category Errors


class CategoryError(DoublesError):
    """Base class for category lookup errors."""

    pass


class UnknownCategoryError(CategoryError):
    """Category name doesn't match any known category."""

    def __init__(self, name: str, valid: list[str]) -> None:
        self.name = name
        self.valid = list(valid)
        super().__init__(
            f"Unknown category: {name!r} (expected one of: {', '.join(self.valid)})"
        )


class CategoryNotDescribedError(CategoryError):
    """Category has no entry in the reference table.

    Only the five test double categories are described; the
    ``unclassified`` sentinel is not.
    """

    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(f"No reference entry for category: {category}")


# Argument Errors


class InvalidArgumentError(DoublesError):
    """Invalid command argument.

    Raised when CLI options are combined in a way that has no meaning.
    """

    def __init__(self, argument: str, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid argument '{argument}': {reason}")
