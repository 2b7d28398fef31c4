"""
LUP decomposition by Crout's method with partial pivoting.

For an m x n matrix A and r = min(m, n), finds a row permutation p,
a unit lower trapezoidal L (m x r) and an upper trapezoidal U (r x n) with

    A[p] = L U

L and U are packed into a single m x n matrix LU (the unit diagonal of L
is implicit). Column j is produced in three moves:

    U[i, j] = a[i, j] - sum_{k<i} L[i, k] U[k, j]          i < j
    c_i     = a[i, j] - sum_{k<j} L[i, k] U[k, j]          i >= j
    pivot on the largest |c_i|, then U[j, j] = c_j, L[i, j] = c_i / c_j

A zero pivot is not guarded here: the division runs under np.errstate and
yields inf/nan in the rows below. The column index is reported so callers
can decide whether to raise.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydecomp.core.compute.linalg.blas import dot


@dataclass
class CroutFactors:
    """Raw output of crout_lup()."""
    permutation: NDArray[np.intp]
    LU: NDArray[np.floating[Any]]
    zero_pivots: list[int] = field(default_factory=list)
    n_swaps: int = 0


def argmax_abs(values: NDArray[np.floating[Any]]) -> int:
    """
    Index of the largest |value|; ties go to the first occurrence.

    NaN entries never win, so a column poisoned by an earlier zero pivot
    keeps its current row.
    """
    best = 0
    best_val = -math.inf
    for idx, v in enumerate(np.abs(values)):
        if best_val < v:
            best, best_val = idx, v
    return best


def _swap_rows(x: NDArray[Any], i: int, j: int) -> None:
    x[[i, j]] = x[[j, i]]


def crout_lup(a0: NDArray[np.floating[Any]]) -> CroutFactors:
    """
    Crout LUP of a validated (m x n) matrix.

    Args:
        a0: Input matrix. Not modified; rows are swapped on a private copy.

    Returns:
        CroutFactors with the permutation indices and the packed LU matrix
    """
    a = a0.copy()
    m, n = a.shape
    r = min(m, n)
    p = np.arange(m)
    lu = np.zeros((m, n), dtype=np.float64)
    factors = CroutFactors(permutation=p, LU=lu)

    def aux(i: int, j: int, q: int) -> float:
        # a[i, j] - sum_{k=0..q} LU[i, k] * LU[k, j]
        return a[i, j] - dot(lu[i, :q + 1], lu[:q + 1, j])

    for j in range(r):
        for i in range(j):
            lu[i, j] = aux(i, j, i - 1)

        candidates = a[j:, j] - lu[j:, :j] @ lu[:j, j]
        i_star = j + argmax_abs(candidates)
        if i_star != j:
            _swap_rows(p, j, i_star)
            _swap_rows(a, j, i_star)
            _swap_rows(lu, j, i_star)
            _swap_rows(candidates, 0, i_star - j)
            factors.n_swaps += 1

        pivot = candidates[0]
        lu[j, j] = pivot
        if pivot == 0.0:
            factors.zero_pivots.append(j)
        with np.errstate(divide='ignore', invalid='ignore'):
            lu[j + 1:, j] = candidates[1:] / pivot

    # Wide matrix: the remaining columns of U need no further pivoting
    if m < n:
        for j in range(r, n):
            for i in range(r):
                lu[i, j] = aux(i, j, i - 1)

    return factors


def split_lu(
    lu: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Split a packed LU matrix into L (m x r, unit diagonal) and U (r x n).
    """
    m, n = lu.shape
    r = min(m, n)
    L = np.tril(lu[:, :r], -1) + np.eye(m, r, dtype=np.float64)
    U = np.triu(lu[:r, :])
    return L, U


def permutation_matrix(p: NDArray[np.intp]) -> NDArray[np.floating[Any]]:
    """
    Permutation matrix P with P[i, p[i]] = 1, so that P @ A == A[p].
    """
    m = len(p)
    P = np.zeros((m, m), dtype=np.float64)
    P[np.arange(m), p] = 1.0
    return P
