"""
Solver dispatch for LUP decomposition.

This module provides lup() (public API) and the helpers that turn its
compact output into explicit matrices.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydecomp.core.exceptions import ValidationError
from pydecomp.core.validation import check_1d, check_2d, check_array
from pydecomp.lup._crout import permutation_matrix, split_lu
from pydecomp.lup.design import LUPDesign
from pydecomp.lup.solution import LUPSolution
from pydecomp.lup.backends.cpu import CPUCroutBackend


def lup(A: ArrayLike, *, check_singular: bool = False) -> LUPSolution:
    """
    LUP decomposition by Crout's method with partial pivoting.

    At each of the r = min(m, n) pivot columns the row with the
    largest-magnitude partially eliminated entry is swapped into place
    (ties go to the first row). Wide matrices (m < n) get their remaining
    upper trapezoidal columns without further pivoting.

    Args:
        A: Matrix to decompose (m x n). Any array-like; never modified.
        check_singular: If True, raise SingularMatrixError on a zero pivot.
            If False (default), the decomposition completes, the affected
            column of L holds inf/nan, and a RuntimeWarning is issued.

    Returns:
        LUPSolution with permutation indices p and packed LU such that
        P @ A == L @ U, where P = make_p(p) and (L, U) = make_lu(LU)

    Raises:
        ValidationError: If A is non-numeric or contains NaN/Inf
        DimensionError: If A is not 2D
        SingularMatrixError: If check_singular=True and a pivot is zero

    Example:
        >>> p, LU = lup(A)
        >>> L, U = make_lu(LU)
        >>> np.allclose(make_p(p) @ A, L @ U)
        True
    """
    design = LUPDesign.from_array(A)

    result = CPUCroutBackend(check_singular=check_singular).solve(design)
    return LUPSolution(_result=result, _design=design)


def make_lu(
    LU: ArrayLike,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Split a packed LU matrix into unit lower L (m x r) and upper U (r x n).

    The diagonal of L is forced to 1; the diagonal of LU belongs to U.
    Non-finite entries (from a zero pivot) are passed through.
    """
    LU_arr = check_array(LU, 'LU')
    check_2d(LU_arr, 'LU')
    return split_lu(LU_arr)


def make_p(p: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Expand permutation indices into a 0/1 permutation matrix.

    Returns P with P[i, p[i]] = 1, so that P @ A == A[p].

    Raises:
        ValidationError: If p is not a permutation of 0..m-1
        DimensionError: If p is not 1D
    """
    p_arr = check_array(p, 'p')
    check_1d(p_arr, 'p')
    m = len(p_arr)
    if not np.all(p_arr == np.round(p_arr)):
        raise ValidationError("p: permutation indices must be integers")
    idx = p_arr.astype(np.intp)
    if not np.array_equal(np.sort(idx), np.arange(m)):
        raise ValidationError(
            f"p: not a permutation of 0..{m - 1}: {idx.tolist()}"
        )
    return permutation_matrix(idx)
