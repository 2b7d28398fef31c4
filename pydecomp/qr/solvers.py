"""
Solver dispatch for QR decomposition.

This module provides the public entry points. Gram-Schmidt and Householder
are separate strategies with different stability and degeneracy behavior,
so each has its own function; qr() only forwards to one of them and
requires the caller to name which.
"""

from typing import Literal
from numpy.typing import ArrayLike

from pydecomp.qr.design import QRDesign
from pydecomp.qr.solution import QRSolution
from pydecomp.qr.backends.cpu import CPUGramSchmidtBackend, CPUHouseholderBackend


# Type alias for method selection
QRMethod = Literal['householder', 'gram_schmidt']


def householder_qr(A: ArrayLike) -> QRSolution:
    """
    QR decomposition by Householder reflection.

    Numerically preferred: works on any real m x n matrix, including
    rank-deficient and non-square ones, with no special-casing.

    Args:
        A: Matrix to decompose (m x n). Any array-like; never modified.

    Returns:
        QRSolution with Q (m x m, orthogonal) and R (m x n, upper
        trapezoidal) such that Q @ R == A to rounding

    Raises:
        ValidationError: If A is non-numeric or contains NaN/Inf
        DimensionError: If A is not 2D

    Example:
        >>> Q, R = householder_qr([[3., 5.], [0., 2.], [-1., 1.]])
        >>> Q.shape, R.shape
        ((3, 3), (3, 2))
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    design = QRDesign.from_array(A)

    result = CPUHouseholderBackend().solve(design)
    return QRSolution(_result=result, _design=design)


def gram_schmidt_qr(A: ArrayLike) -> QRSolution:
    """
    QR decomposition by classical Gram-Schmidt orthonormalization.

    Columns whose squared norm after removing earlier projections is at
    most 1e-6 are treated as dependent: the matching column of Q is zero,
    a RuntimeWarning is issued, and the index is listed in
    ``solution.dependent_columns``. This is not an error.

    Args:
        A: Square matrix to decompose (n x n). Never modified.

    Returns:
        QRSolution with Q (n x n) and right triangular R (n x n)

    Raises:
        ValidationError: If A is non-numeric or contains NaN/Inf
        DimensionError: If A is not a square 2D matrix
    """
    design = QRDesign.from_array(A, square=True)

    result = CPUGramSchmidtBackend().solve(design)
    return QRSolution(_result=result, _design=design)


def qr(A: ArrayLike, *, method: QRMethod) -> QRSolution:
    """
    QR decomposition with an explicitly chosen strategy.

    Args:
        A: Matrix to decompose
        method: 'householder' or 'gram_schmidt' (required)

    Returns:
        QRSolution; ``solution.method`` records the strategy used

    Raises:
        ValueError: If method is unknown
    """
    if method == 'householder':
        return householder_qr(A)
    elif method == 'gram_schmidt':
        return gram_schmidt_qr(A)
    else:
        raise ValueError(f"Unknown QR method: {method!r}")
