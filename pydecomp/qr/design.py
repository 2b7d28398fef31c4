"""
QR Design.

Design wraps the validated input matrix for a QR decomposition. It owns a
private float64 copy, so backends are free to read it without worrying
about the caller mutating the original afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydecomp.core.result import readonly
from pydecomp.core.validation import check_matrix, check_square


@dataclass(frozen=True)
class QRDesign:
    """
    QR input specification.

    Immutable after construction.

    Construction:
        QRDesign.from_array(A)               # any m x n matrix (Householder)
        QRDesign.from_array(A, square=True)  # n x n only (Gram-Schmidt)
    """
    _A: NDArray[np.floating[Any]]
    _m: int
    _n: int

    @classmethod
    def from_array(cls, A: ArrayLike, *, square: bool = False) -> QRDesign:
        """
        Build a design from any array-like.

        Args:
            A: Matrix to decompose
            square: If True, reject non-square input

        Raises:
            ValidationError: If A is non-numeric or non-finite
            DimensionError: If A is not 2D, or not square when required
        """
        A_arr = check_matrix(A, 'A')
        if square:
            check_square(A_arr, 'A')
        m, n = A_arr.shape
        return cls(_A=readonly(A_arr), _m=m, _n=n)

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Input matrix (m x n), read-only."""
        return self._A

    @property
    def m(self) -> int:
        """Number of rows."""
        return self._m

    @property
    def n(self) -> int:
        """Number of columns."""
        return self._n

    @property
    def shape(self) -> tuple[int, int]:
        return (self._m, self._n)
