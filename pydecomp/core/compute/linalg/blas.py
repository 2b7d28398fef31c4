"""
BLAS-like vector and matrix primitives.

Pure functions over dense float64 arrays. Every decomposition kernel is
built on these; external callers use gemm() to verify Q @ R == A or
P @ A == L @ U.

Conventions:
    - Inputs are trusted to be 1D (vectors) or 2D (matrices) numpy arrays;
      shape mismatches raise DimensionError, never truncate or pad
    - Only axpy() mutates its argument; everything else returns a new array
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydecomp.core.exceptions import DimensionError


def matrix_size(a: NDArray[np.floating[Any]]) -> tuple[int, int]:
    """
    Size of a matrix as (rows, cols).

    A matrix with zero rows reports zero columns, whatever its nominal
    second dimension.
    """
    m = len(a)
    n = 0 if m == 0 else len(a[0])
    return m, n


def dot(x: NDArray[np.floating[Any]], y: NDArray[np.floating[Any]]) -> float:
    """
    Dot product of two vectors.

    Raises:
        DimensionError: If x and y differ in length
    """
    if len(x) != len(y):
        raise DimensionError(f"dot: length mismatch, x={len(x)}, y={len(y)}")
    return float(np.dot(x, y))


def axpy(
    alpha: float,
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
) -> None:
    """
    In-place update y := alpha * x + y.

    Raises:
        DimensionError: If x and y differ in length
    """
    if len(x) != len(y):
        raise DimensionError(f"axpy: length mismatch, x={len(x)}, y={len(y)}")
    y += alpha * x


def scal(alpha: float, x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Return alpha * x as a new vector."""
    return alpha * np.asarray(x, dtype=np.float64)


def gemv_t(
    a: NDArray[np.floating[Any]],
    x: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Compute a' x by accumulating x[i] * a[i] over the rows of a.

    Raises:
        DimensionError: If len(x) != number of rows of a
    """
    m, n = matrix_size(a)
    if m != len(x):
        raise DimensionError(f"gemv_t: a has {m} rows, x has length {len(x)}")
    y = np.zeros(n, dtype=np.float64)
    for a_i, x_i in zip(a, x):
        axpy(x_i, a_i, y)
    return y


def gemm(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Matrix product of an (m x k) and a (k x n) matrix.

    Args:
        x: Left operand (m x k)
        y: Right operand (k x n)

    Returns:
        New (m x n) matrix with element (i, j) = sum_l x[i, l] * y[l, j]

    Raises:
        DimensionError: If the inner dimensions differ
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    if x.ndim != 2 or y.ndim != 2:
        raise DimensionError(
            f"gemm: expected 2D operands, got {x.ndim}D and {y.ndim}D"
        )
    if x.shape[1] != y.shape[0]:
        raise DimensionError(
            f"gemm: inner dimensions differ, x is {x.shape}, y is {y.shape}"
        )
    return x @ y


def transpose(a: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Return a' as a new contiguous matrix sharing no memory with a."""
    return np.array(np.asarray(a, dtype=np.float64).T, copy=True, order='C')


def identity(n: int) -> NDArray[np.floating[Any]]:
    """n x n identity matrix."""
    return np.eye(n, dtype=np.float64)
