"""
QR decomposition.

Two strategies, kept as separate entry points because they behave
differently on ill-conditioned and rank-deficient input:

Public API:
    householder_qr(A) -> QRSolution    any m x n matrix
    gram_schmidt_qr(A) -> QRSolution   square matrices only
    qr(A, method=...) -> QRSolution    explicit strategy selection

Example:
    >>> from pydecomp.qr import householder_qr
    >>> solution = householder_qr(A)
    >>> Q, R = solution
    >>> print(solution.summary())
"""

from pydecomp.qr.design import QRDesign
from pydecomp.qr.solution import QRSolution, QRParams
from pydecomp.qr.solvers import gram_schmidt_qr, householder_qr, qr

__all__ = [
    "qr",
    "householder_qr",
    "gram_schmidt_qr",
    "QRDesign",
    "QRSolution",
    "QRParams",
]
