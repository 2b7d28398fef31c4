"""
LUP solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydecomp.core.exceptions import DimensionError, SingularMatrixError
from pydecomp.core.result import Result, readonly
from pydecomp.core.formatting import format_matrix
from pydecomp.core.compute.linalg.blas import gemm, transpose
from pydecomp.core.validation import check_array, check_finite, check_consistent_length
from pydecomp.lup._crout import permutation_matrix, split_lu

if TYPE_CHECKING:
    from pydecomp.lup.design import LUPDesign


@dataclass(frozen=True)
class LUPParams:
    """
    Parameter payload for LUP decomposition.

    The permutation index array is the canonical form; the 0/1 matrix is
    derived on demand.
    """
    permutation: NDArray[np.intp]
    LU: NDArray[np.floating[Any]]
    zero_pivots: tuple[int, ...]


@dataclass
class LUPSolution:
    """
    User-facing LUP results.

    Iterating yields (permutation, LU), mirroring lup(A) -> (P, LU).
    """
    _result: Result[LUPParams]
    _design: 'LUPDesign'

    # Cached computations
    _L: NDArray[np.floating[Any]] | None = None
    _U: NDArray[np.floating[Any]] | None = None

    @property
    def permutation(self) -> NDArray[np.intp]:
        """Row i of L @ U is row permutation[i] of A."""
        return self._result.params.permutation

    @property
    def LU(self) -> NDArray[np.floating[Any]]:
        """Packed factors: strict lower part is L, upper part is U."""
        return self._result.params.LU

    @property
    def L(self) -> NDArray[np.floating[Any]]:
        """Unit lower trapezoidal factor (m x r)."""
        if self._L is None:
            self._split()
        return self._L

    @property
    def U(self) -> NDArray[np.floating[Any]]:
        """Upper trapezoidal factor (r x n)."""
        if self._U is None:
            self._split()
        return self._U

    def _split(self) -> None:
        L, U = split_lu(self.LU)
        self._L, self._U = readonly(L), readonly(U)

    @property
    def P(self) -> NDArray[np.floating[Any]]:
        """Permutation matrix with P @ A == L @ U."""
        return permutation_matrix(self.permutation)

    @property
    def zero_pivots(self) -> tuple[int, ...]:
        return self._result.params.zero_pivots

    @property
    def is_singular(self) -> bool:
        return len(self.zero_pivots) > 0

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __iter__(self) -> Iterator[NDArray[Any]]:
        return iter((self.permutation, self.LU))

    def reconstruct(self) -> NDArray[np.floating[Any]]:
        """P' @ L @ U, which equals the input up to rounding."""
        return gemm(transpose(self.P), gemm(self.L, self.U))

    def solve(self, b: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Solve A x = b for square A.

        Forward substitution with the unit lower factor on b[p], then back
        substitution with U.

        Args:
            b: Right-hand side, shape (n,) or (n, k)

        Returns:
            x with the same shape as b

        Raises:
            DimensionError: If A is not square or b has the wrong length
            SingularMatrixError: If any pivot is zero
        """
        from scipy.linalg import solve_triangular

        m, n = self._design.shape
        if m != n:
            raise DimensionError(
                f"solve: A is {m} x {n}; LUP solve requires a square matrix"
            )
        if self.is_singular:
            raise SingularMatrixError(
                f"A is singular: zero pivot in columns {list(self.zero_pivots)}",
                matrix_name='A',
                rank=n - len(self.zero_pivots),
                expected_rank=n,
                pivot_index=self.zero_pivots[0],
            )

        b_arr = check_array(b, 'b')
        check_finite(b_arr, 'b')
        if b_arr.ndim not in (1, 2):
            raise DimensionError(
                f"b: expected 1D or 2D array, got {b_arr.ndim}D with shape {b_arr.shape}"
            )
        check_consistent_length(self.LU, b_arr, names=('A', 'b'))

        y = solve_triangular(self.L, b_arr[self.permutation], lower=True, unit_diagonal=True)
        return solve_triangular(self.U, y, lower=False)

    def summary(self) -> str:
        """Plain-text report of the factors."""
        m, n = self._design.shape
        lines = [
            "LUP Decomposition (Crout)",
            "=" * 60,
            f"Shape: {m} x {n}",
            f"Row swaps: {self.info['swaps']}",
            f"Permutation: {self.permutation.tolist()}",
        ]
        if self.is_singular:
            lines.append(f"Zero pivots: {list(self.zero_pivots)}")
        lines.append("-" * 60)
        lines.extend(format_matrix("L", self.L))
        lines.extend(format_matrix("U", self.U))
        lines.extend(format_matrix("P", self.P))
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        m, n = self._design.shape
        return (
            f"LUPSolution(m={m}, n={n}, swaps={self.info['swaps']}, "
            f"singular={self.is_singular})"
        )
