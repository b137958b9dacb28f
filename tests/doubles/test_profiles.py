"""Tests for building usage profiles from input."""

import json
from pathlib import Path

import pytest

from doubles.classification import build_profile, load_profile
from doubles.exceptions import (
    IncompleteProfileError,
    InvalidProfileError,
    ProfileError,
    ProfileFileNotFoundError,
)

FULL_ANSWERS = {
    "is_passed_but_unused": False,
    "has_configured_returns": True,
    "is_simplified_real_implementation": False,
    "tracks_invocations": True,
    "has_preset_expectations_verified_at_end": False,
}


class TestBuildProfile:
    """Tests for build_profile."""

    def test_snake_case_keys(self) -> None:
        p = build_profile(FULL_ANSWERS)
        assert p.active_traits() == ["has_configured_returns", "tracks_invocations"]

    def test_camel_case_keys(self) -> None:
        p = build_profile(
            {
                "isPassedButUnused": True,
                "hasConfiguredReturns": False,
                "isSimplifiedRealImplementation": False,
                "tracksInvocations": False,
                "hasPresetExpectationsVerifiedAtEnd": False,
            }
        )
        assert p.is_passed_but_unused is True

    def test_missing_fields_are_named(self) -> None:
        answers = dict(FULL_ANSWERS)
        del answers["tracks_invocations"]
        del answers["is_passed_but_unused"]

        with pytest.raises(IncompleteProfileError) as exc_info:
            build_profile(answers)

        assert exc_info.value.missing == ["is_passed_but_unused", "tracks_invocations"]
        assert "Incomplete profile" in str(exc_info.value)

    def test_empty_mapping_is_incomplete(self) -> None:
        with pytest.raises(IncompleteProfileError) as exc_info:
            build_profile({})
        assert len(exc_info.value.missing) == 5

    def test_string_value_rejected(self) -> None:
        answers = dict(FULL_ANSWERS, tracks_invocations="yes")

        with pytest.raises(InvalidProfileError, match="tracks_invocations"):
            build_profile(answers)

    def test_integer_value_rejected(self) -> None:
        answers = dict(FULL_ANSWERS, has_configured_returns=1)

        with pytest.raises(InvalidProfileError, match="must be true or false"):
            build_profile(answers)

    def test_unknown_key_rejected(self) -> None:
        answers = dict(FULL_ANSWERS, is_mockito_mock=True)

        with pytest.raises(InvalidProfileError, match="unknown field 'is_mockito_mock'"):
            build_profile(answers)

    def test_non_mapping_rejected(self) -> None:
        with pytest.raises(InvalidProfileError, match="expected a mapping"):
            build_profile([True, False])  # type: ignore[arg-type]

    def test_errors_share_base_class(self) -> None:
        with pytest.raises(ProfileError):
            build_profile({})


class TestLoadProfile:
    """Tests for load_profile."""

    def test_load_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        path.write_text(
            "isPassedButUnused: false\n"
            "hasConfiguredReturns: false\n"
            "isSimplifiedRealImplementation: true\n"
            "tracksInvocations: false\n"
            "hasPresetExpectationsVerifiedAtEnd: false\n"
        )

        p = load_profile(path)
        assert p.is_simplified_real_implementation is True

    def test_load_json(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.json"
        path.write_text(json.dumps(FULL_ANSWERS))

        p = load_profile(str(path))
        assert p.tracks_invocations is True

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ProfileFileNotFoundError) as exc_info:
            load_profile(tmp_path / "nope.yaml")
        assert "nope.yaml" in exc_info.value.path

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        path.write_text("tracksInvocations: [unclosed\n")

        with pytest.raises(InvalidProfileError, match="could not parse"):
            load_profile(path)

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        path.write_text("- true\n- false\n")

        with pytest.raises(InvalidProfileError, match="must contain a mapping"):
            load_profile(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        path.write_text("")

        with pytest.raises(InvalidProfileError):
            load_profile(path)

    def test_incomplete_file(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        path.write_text("tracksInvocations: true\n")

        with pytest.raises(IncompleteProfileError) as exc_info:
            load_profile(path)
        assert "tracks_invocations" not in exc_info.value.missing
        assert len(exc_info.value.missing) == 4
