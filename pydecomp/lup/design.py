"""
LUP Design.

Design wraps the validated input matrix for an LUP decomposition. Any
m x n shape is accepted; square shape is only required later, by solve().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydecomp.core.result import readonly
from pydecomp.core.validation import check_matrix


@dataclass(frozen=True)
class LUPDesign:
    """
    LUP input specification.

    Immutable after construction.
    """
    _A: NDArray[np.floating[Any]]
    _m: int
    _n: int

    @classmethod
    def from_array(cls, A: ArrayLike) -> LUPDesign:
        """
        Build a design from any array-like.

        Raises:
            ValidationError: If A is non-numeric or non-finite
            DimensionError: If A is not 2D
        """
        A_arr = check_matrix(A, 'A')
        m, n = A_arr.shape
        return cls(_A=readonly(A_arr), _m=m, _n=n)

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Input matrix (m x n), read-only."""
        return self._A

    @property
    def m(self) -> int:
        return self._m

    @property
    def n(self) -> int:
        return self._n

    @property
    def r(self) -> int:
        """Number of pivot columns, min(m, n)."""
        return min(self._m, self._n)

    @property
    def shape(self) -> tuple[int, int]:
        return (self._m, self._n)
