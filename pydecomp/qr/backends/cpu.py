"""
CPU backends for QR decomposition.

Two independent strategies with different stability behavior:
    CPUHouseholderBackend: product of reflectors, any m x n input
    CPUGramSchmidtBackend: classical Gram-Schmidt, square input only,
        zero basis vectors for numerically dependent columns
"""

import warnings
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydecomp.core.result import Result, readonly
from pydecomp.core.compute.timing import Timer
from pydecomp.core.compute.tolerances import RANK_TOL_FACTOR
from pydecomp.qr._gram_schmidt import calc_r, orthonormalize
from pydecomp.qr._householder import householder_factor
from pydecomp.qr.design import QRDesign
from pydecomp.qr.solution import QRParams


def numerical_rank(R: NDArray[np.floating[Any]]) -> int:
    """Count of |R| diagonal entries above RANK_TOL_FACTOR * max(m, n) * max|diag(R)|."""
    diag_R = np.abs(np.diag(R))
    if len(diag_R) == 0 or diag_R.max() == 0:
        return 0
    tol = RANK_TOL_FACTOR * max(R.shape) * diag_R.max()
    return int(np.sum(diag_R > tol))


class CPUHouseholderBackend:
    """
    CPU backend using Householder reflections.

    Implements the Backend protocol for QRDesign -> QRParams.
    Q is m x m orthogonal, R is m x n upper trapezoidal.
    """

    @property
    def name(self) -> str:
        return 'cpu_householder'

    def solve(self, design: QRDesign) -> Result[QRParams]:
        """
        Factor A = QR by Householder reflection.

        Algorithm:
            1. W = A' (working copy)
            2. For k < min(m, n): reflect the tail of column k onto e_1,
               accumulate Q <- Q H_k, update the remaining rows of W
            3. Read R off the upper triangle of W'
        """
        timer = Timer()
        timer.start()

        with timer.section('decomposition'):
            factors = householder_factor(design.A)

        with timer.section('rank'):
            rank = numerical_rank(factors.R)

        timer.stop()

        params = QRParams(
            Q=readonly(factors.Q),
            R=readonly(factors.R),
            rank=rank,
            dependent_columns=(),
        )

        info: dict[str, Any] = {
            'method': 'householder',
            'shape': design.shape,
            'rank': rank,
            'n_reflectors': factors.n_reflectors,
            'n_identity_reflectors': factors.n_identity_reflectors,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )


class CPUGramSchmidtBackend:
    """
    CPU backend using classical Gram-Schmidt orthonormalization.

    Implements the Backend protocol for QRDesign -> QRParams.
    Rank-deficient input is not an error: dependent columns become zero
    columns of Q and are reported through warnings.
    """

    @property
    def name(self) -> str:
        return 'cpu_gram_schmidt'

    def solve(self, design: QRDesign) -> Result[QRParams]:
        """
        Factor A = QR by classical Gram-Schmidt.

        Algorithm:
            1. Orthonormalize the columns of A in order, zeroing dependent ones
            2. R = triu(Q' A)
        """
        timer = Timer()
        timer.start()

        with timer.section('decomposition'):
            Q, dependent = orthonormalize(design.A)

        with timer.section('triangular_factor'):
            R = calc_r(design.A, Q)

        timer.stop()

        rank = design.n - len(dependent)

        messages: tuple[str, ...] = ()
        if dependent:
            msg = (
                f"Gram-Schmidt: columns {list(dependent)} are numerically dependent "
                f"on earlier columns; Q has zero columns at those indices"
            )
            warnings.warn(msg, RuntimeWarning, stacklevel=2)
            messages = (msg,)

        params = QRParams(
            Q=readonly(Q),
            R=readonly(R),
            rank=rank,
            dependent_columns=dependent,
        )

        info: dict[str, Any] = {
            'method': 'gram_schmidt',
            'shape': design.shape,
            'rank': rank,
            'dependent_columns': list(dependent),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=messages,
        )
