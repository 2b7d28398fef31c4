"""
Tests for the BLAS-like vector/matrix primitives.
"""

import numpy as np
import pytest

from pydecomp import gemm
from pydecomp.core.exceptions import DimensionError
from pydecomp.core.compute.linalg import (
    axpy,
    dot,
    gemv_t,
    identity,
    matrix_size,
    scal,
    transpose,
)


class TestVectorOps:
    """dot, axpy and scal on 1D arrays."""

    def test_dot(self):
        assert dot(np.array([1.0, 2.0, 3.0]), np.array([4.0, -5.0, 6.0])) == 12.0

    def test_dot_returns_float(self):
        assert isinstance(dot(np.ones(2), np.ones(2)), float)

    def test_dot_length_mismatch(self):
        with pytest.raises(DimensionError, match="x=2, y=3"):
            dot(np.ones(2), np.ones(3))

    def test_axpy_in_place(self):
        y = np.array([1.0, 1.0, 1.0])
        out = axpy(2.0, np.array([1.0, 2.0, 3.0]), y)
        assert out is None
        np.testing.assert_array_equal(y, [3.0, 5.0, 7.0])

    def test_axpy_length_mismatch(self):
        with pytest.raises(DimensionError):
            axpy(1.0, np.ones(2), np.ones(3))

    def test_scal_new_vector(self):
        x = np.array([1.0, -2.0])
        y = scal(3.0, x)
        np.testing.assert_array_equal(y, [3.0, -6.0])
        np.testing.assert_array_equal(x, [1.0, -2.0])


class TestMatrixOps:
    """gemm, gemv_t, transpose and matrix_size."""

    def test_gemm(self):
        X = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        Y = np.array([[1.0, 0.0, 2.0], [0.0, 1.0, -1.0]])
        expected = np.array([[1.0, 2.0, 0.0], [3.0, 4.0, 2.0], [5.0, 6.0, 4.0]])
        np.testing.assert_array_equal(gemm(X, Y), expected)

    def test_gemm_inner_dimension_mismatch(self):
        with pytest.raises(DimensionError, match="inner dimensions"):
            gemm(np.ones((2, 3)), np.ones((2, 3)))

    def test_gemm_rejects_vectors(self):
        with pytest.raises(DimensionError):
            gemm(np.ones(3), np.ones((3, 1)))

    def test_gemm_identity(self, matrix_5x5):
        np.testing.assert_array_equal(gemm(identity(5), matrix_5x5), matrix_5x5)

    def test_gemv_t(self, rng):
        A = rng.standard_normal((4, 3))
        x = rng.standard_normal(4)
        np.testing.assert_allclose(gemv_t(A, x), A.T @ x, rtol=1e-12)

    def test_gemv_t_mismatch(self):
        with pytest.raises(DimensionError):
            gemv_t(np.ones((4, 3)), np.ones(3))

    def test_transpose_twice(self, matrix_6x5):
        np.testing.assert_array_equal(transpose(transpose(matrix_6x5)), matrix_6x5)

    def test_transpose_shape(self, matrix_6x5):
        assert transpose(matrix_6x5).shape == (5, 6)

    def test_transpose_no_aliasing(self, matrix_5x5):
        original = matrix_5x5.copy()
        t = transpose(matrix_5x5)
        t[0, 1] = 100.0
        np.testing.assert_array_equal(matrix_5x5, original)
        assert not np.shares_memory(t, matrix_5x5)

    def test_matrix_size(self, matrix_6x5):
        assert matrix_size(matrix_6x5) == (6, 5)

    def test_matrix_size_zero_rows(self):
        assert matrix_size(np.zeros((0, 4))) == (0, 0)

    def test_matrix_size_zero_cols(self):
        assert matrix_size(np.zeros((3, 0))) == (3, 0)
