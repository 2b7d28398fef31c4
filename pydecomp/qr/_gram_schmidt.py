"""
QR decomposition by classical Gram-Schmidt orthonormalization.

Column i of Q is column i of A minus its projections onto q_0 .. q_{i-1},
normalized. Every projection coefficient is taken against the ORIGINAL
column (classical, not modified, Gram-Schmidt), so orthogonality degrades
on ill-conditioned input; use Householder QR there.

A column whose squared norm after projection is at most
GRAM_SCHMIDT_NORM_TOL is treated as linearly dependent on its predecessors
and contributes a zero basis vector.
"""

from __future__ import annotations

import math
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydecomp.core.compute.linalg.blas import axpy, dot, gemm, matrix_size, scal, transpose
from pydecomp.core.compute.tolerances import GRAM_SCHMIDT_NORM_TOL


def orthonormalize(
    a: NDArray[np.floating[Any]],
    norm_tol: float = GRAM_SCHMIDT_NORM_TOL,
) -> tuple[NDArray[np.floating[Any]], tuple[int, ...]]:
    """
    Orthonormal basis for the columns of a square matrix.

    Args:
        a: Square (n x n) matrix. Not modified.
        norm_tol: Squared-norm threshold for declaring a column dependent

    Returns:
        (Q, dependent_columns): Q is n x n with orthonormal or zero columns;
        dependent_columns lists the indices that were zeroed.
    """
    at = transpose(a)
    n, _ = matrix_size(at)
    qt = np.zeros((n, n), dtype=np.float64)
    dependent: list[int] = []

    for i in range(n):
        x = at[i]
        qi = x.copy()
        for j in range(i):
            axpy(-dot(x, qt[j]), qt[j], qi)
        nrm = dot(qi, qi)
        if nrm > norm_tol:
            qt[i] = scal(1.0 / math.sqrt(nrm), qi)
        else:
            dependent.append(i)

    return transpose(qt), tuple(dependent)


def calc_r(
    a: NDArray[np.floating[Any]],
    q: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """Right triangular factor R[i, j] = q_i . a_j for j >= i, zero below."""
    return np.triu(gemm(transpose(q), a))

