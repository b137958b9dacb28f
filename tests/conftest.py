"""Shared pytest fixtures for doubles tests.

Provides profile builders and an isolated working directory for CLI runs.
"""

from pathlib import Path
from typing import Callable

import pytest
from typer.testing import CliRunner

from doubles.core.schemas import UsageProfile

TRAITS = UsageProfile.trait_names()


def make_profile(**traits: bool) -> UsageProfile:
    """Build a profile where every trait not given is False."""
    values = {name: False for name in TRAITS}
    values.update(traits)
    return UsageProfile(**values)


@pytest.fixture
def profile() -> Callable[..., UsageProfile]:
    """Fixture returning the make_profile builder."""
    return make_profile


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty project directory.

    Yields:
        Path of the temporary project root
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path
