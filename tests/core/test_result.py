"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings factory and has_warning()
    - readonly() marks factor arrays non-writeable
"""

from dataclasses import FrozenInstanceError, dataclass

import numpy as np
import pytest

from pydecomp.core.result import Result, readonly


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResultConstruction:
    """Result can be created with any payload type."""

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "householder", "rank": 5},
            timing={"total_seconds": 0.01},
            backend_name="cpu_householder",
        )
        assert result.params.value == 42.0
        assert result.info["rank"] == 5
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_householder"

    def test_timing_none(self):
        result = Result(params=FakeParams(value=1.0), info={}, timing=None, backend_name="cpu")
        assert result.timing is None


class TestWarnings:
    """Default empty warnings and substring lookup."""

    def test_warnings_default_empty(self):
        result = Result(params=FakeParams(value=1.0), info={}, timing=None, backend_name="cpu")
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_has_warning(self):
        result = Result(
            params=FakeParams(value=1.0),
            info={},
            timing=None,
            backend_name="cpu_crout",
            warnings=("LUP: zero pivot in columns [1]",),
        )
        assert result.has_warning("zero pivot")
        assert not result.has_warning("dependent")


class TestImmutability:
    """Result is frozen and factor arrays can be locked."""

    def test_cannot_set_params(self):
        result = Result(params=FakeParams(value=1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_warnings(self):
        result = Result(params=FakeParams(value=1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new warning",)

    def test_readonly_array(self):
        arr = readonly(np.zeros((2, 2)))
        assert not arr.flags.writeable
        with pytest.raises(ValueError):
            arr[0, 0] = 1.0
