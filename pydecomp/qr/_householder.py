"""
QR decomposition by Householder reflection.

The matrix is transposed into a working buffer W so that the columns of A
become rows of W; each step reflects the active tail of one column onto
a multiple of e_1 and applies the same reflector to the remaining rows and
to the accumulated orthogonal factor.

    A = Q R,   Q = H_0 H_1 ... H_{r-1},   r = min(m, n)

The reflector for tail x targets y = (-sign(x_0) ||x||, 0, ..., 0). Picking
the sign opposite to x_0 keeps ||x - y|| away from zero when x is already
close to a multiple of e_1.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydecomp.core.compute.linalg.blas import dot, identity, transpose


@dataclass
class HouseholderFactors:
    """Raw output of householder_factor() before it is wrapped for users."""
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    n_reflectors: int
    n_identity_reflectors: int


def householder(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Householder matrix H with H x = y and H y = x.

    H = I - (2 / ||x - y||^2) (x - y)(x - y)'

    When x == y there is nothing to reflect and the identity is returned.
    """
    z = x - y
    zz = dot(z, z)
    h = identity(len(z))
    if zz == 0.0:
        return h
    h -= (2.0 / zz) * np.outer(z, z)
    return h


def apply_reflector(
    k: int,
    rows: NDArray[np.floating[Any]],
    h: NDArray[np.floating[Any]],
) -> None:
    """
    Multiply every row of `rows` by the step-k reflector, in place.

    Only columns k: are touched; h is (t x t) with t = rows.shape[1] - k.
    """
    if rows.shape[0] == 0:
        return
    rows[:, k:] = rows[:, k:] @ h


def householder_factor(a: NDArray[np.floating[Any]]) -> HouseholderFactors:
    """
    Householder QR of a rectangular (m x n) matrix.

    Args:
        a: Validated float64 matrix. Not modified.

    Returns:
        HouseholderFactors with Q (m x m, orthogonal) and R (m x n, upper
        trapezoidal).
    """
    m, n = a.shape
    w = transpose(a)
    q: NDArray[np.floating[Any]] | None = None
    n_identity = 0
    steps = min(m, n)

    for k in range(steps):
        x = w[k, k:].copy()
        y = np.zeros_like(x)
        y[0] = math.copysign(math.sqrt(dot(x, x)), -x[0])
        h = householder(x, y)
        if not np.any(x - y):
            n_identity += 1

        if k == 0:
            q = h
        else:
            apply_reflector(k, q, h)

        w[k, k] = y[0]
        apply_reflector(k, w[k + 1:], h)

    if q is None:
        q = identity(m)

    # R[i, j] = W[j, i] on and above the diagonal
    r = np.triu(w.T)

    return HouseholderFactors(
        Q=q,
        R=np.ascontiguousarray(r),
        n_reflectors=steps,
        n_identity_reflectors=n_identity,
    )
