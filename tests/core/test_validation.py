"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, rejection of bad data
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d / check_2d / check_square: shape checks
    - check_consistent_length: multi-array length matching
    - check_matrix: the combined boundary check
"""

import numpy as np
import pytest

from pydecomp.core.exceptions import DimensionError, ValidationError
from pydecomp.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_matrix,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to a fresh float64 ndarray."""

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "A")
        assert result.shape == (2, 2)
        assert result.dtype == np.float64

    def test_int_array_promoted_to_float(self):
        result = check_array(np.array([1, 2, 3], dtype=np.int32), "x")
        assert result.dtype == np.float64

    def test_returns_copy(self):
        arr = np.array([[1.0, 2.0], [3.0, 4.0]])
        result = check_array(arr, "A")
        result[0, 0] = 99.0
        assert arr[0, 0] == 1.0

    def test_rejects_ragged_rows(self):
        with pytest.raises(ValidationError, match="A"):
            check_array([[1.0, 2.0], [3.0]], "A")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([["a", "b"], ["c", "d"]], "A")

    def test_rejects_object_dtype(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "x")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([[1 + 1j, 0], [0, 1]], "A")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:
    """check_finite rejects NaN and Inf with counts in the message."""

    def test_finite_passes(self):
        check_finite(np.array([1.0, -2.0]), "x")

    def test_nan_and_inf_counted(self):
        with pytest.raises(ValidationError, match=r"1 NaN, 1 Inf"):
            check_finite(np.array([np.nan, np.inf, 1.0]), "x")


# ═══════════════════════════════════════════════════════════════════════
# shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:
    """Dimensionality and squareness checks raise DimensionError."""

    def test_check_1d(self):
        check_1d(np.zeros(3), "x")
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((3, 1)), "x")

    def test_check_2d(self):
        check_2d(np.zeros((3, 2)), "A")
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "A")

    def test_check_square(self):
        check_square(np.zeros((3, 3)), "A")
        with pytest.raises(DimensionError, match=r"\(3, 2\)"):
            check_square(np.zeros((3, 2)), "A")

    def test_consistent_length(self):
        check_consistent_length(np.zeros((3, 2)), np.zeros(3), names=("A", "b"))
        with pytest.raises(DimensionError, match="A=3, b=4"):
            check_consistent_length(np.zeros((3, 2)), np.zeros(4), names=("A", "b"))

    def test_consistent_length_name_count(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.zeros(3), names=("a",))


class TestCheckMatrix:
    """check_matrix combines conversion, 2D and finiteness checks."""

    def test_valid(self):
        result = check_matrix([[1, 0], [0, 1]], "A")
        assert result.dtype == np.float64

    def test_empty_rows_allowed(self):
        assert check_matrix(np.zeros((0, 3)), "A").shape == (0, 3)

    def test_rejects_1d(self):
        with pytest.raises(DimensionError):
            check_matrix([1.0, 2.0], "A")

    def test_rejects_nan(self):
        with pytest.raises(ValidationError, match="non-finite"):
            check_matrix([[1.0, np.nan], [0.0, 1.0]], "A")
