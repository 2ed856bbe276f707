"""
Tests for the Result[P] envelope.

Validates:
    - Generic payloads
    - Frozen immutability
    - Default warnings and has_warning()
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pymobr.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResultConstruction:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "test"},
            timing=None,
            backend_name="cpu",
        )
        assert result.params.value == 42.0
        assert result.info == {"method": "test"}
        assert result.timing is None
        assert result.backend_name == "cpu"

    def test_default_warnings_empty(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert result.warnings == ()


class TestImmutability:

    def test_cannot_reassign_params(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(2.0)

    def test_cannot_reassign_warnings(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new",)


class TestHasWarning:

    def test_substring_match(self):
        result = Result(
            params=FakeParams(1.0), info={}, timing=None, backend_name="cpu",
            warnings=("There are 2 plots with less than 10 individuals.",),
        )
        assert result.has_warning("less than 10")
        assert not result.has_warning("without any individuals")
