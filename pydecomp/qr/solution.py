"""
QR solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydecomp.core.exceptions import DimensionError, SingularMatrixError
from pydecomp.core.result import Result
from pydecomp.core.formatting import format_matrix
from pydecomp.core.compute.linalg.blas import gemm, gemv_t, transpose
from pydecomp.core.validation import check_array, check_finite, check_consistent_length

if TYPE_CHECKING:
    from pydecomp.qr.design import QRDesign


@dataclass(frozen=True)
class QRParams:
    """
    Parameter payload for QR decomposition.

    This is the immutable data computed by backends.
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int
    dependent_columns: tuple[int, ...]


@dataclass
class QRSolution:
    """
    User-facing QR results.

    Wraps the backend Result and provides the factors, a reconstruction
    check, and a linear/least-squares solve. Iterating yields (Q, R), so

        Q, R = householder_qr(A)

    works as a plain function-call contract.
    """
    _result: Result[QRParams]
    _design: 'QRDesign'

    @property
    def Q(self) -> NDArray[np.floating[Any]]:
        return self._result.params.Q

    @property
    def R(self) -> NDArray[np.floating[Any]]:
        return self._result.params.R

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def dependent_columns(self) -> tuple[int, ...]:
        """Columns zeroed by Gram-Schmidt; always empty for Householder."""
        return self._result.params.dependent_columns

    @property
    def method(self) -> str:
        return self._result.info['method']

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

    def __iter__(self) -> Iterator[NDArray[np.floating[Any]]]:
        return iter((self.Q, self.R))

    def reconstruct(self) -> NDArray[np.floating[Any]]:
        """Q @ R, which equals the input up to rounding."""
        return gemm(self.Q, self.R)

    def solve(self, b: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Solve A x = b (least squares when A is tall) through R x = Q'b.

        Args:
            b: Right-hand side, shape (m,) or (m, k)

        Returns:
            x with shape (n,) or (n, k)

        Raises:
            DimensionError: If A is wide (m < n) or b has the wrong length
            SingularMatrixError: If A is numerically rank-deficient
                (rank < n)
        """
        from scipy.linalg import solve_triangular

        m, n = self._design.shape
        if m < n:
            raise DimensionError(
                f"solve: A is {m} x {n}; QR solve requires m >= n"
            )

        b_arr = check_array(b, 'b')
        check_finite(b_arr, 'b')
        if b_arr.ndim not in (1, 2):
            raise DimensionError(
                f"b: expected 1D or 2D array, got {b_arr.ndim}D with shape {b_arr.shape}"
            )
        check_consistent_length(self.Q, b_arr, names=('Q', 'b'))

        R_sq = self.R[:n, :n]
        if self.rank < n:
            # Smallest |R_ii| (the first exact zero, if any) names the culprit
            weakest = int(np.argmin(np.abs(np.diag(R_sq))))
            raise SingularMatrixError(
                f"A is rank-deficient: rank={self.rank}, expected={n}; "
                f"smallest |R_ii| at index {weakest}",
                matrix_name='R',
                rank=self.rank,
                expected_rank=n,
                pivot_index=weakest,
            )

        # x = R^-1 Q'b, using only the first n rows of Q'b
        if b_arr.ndim == 1:
            Qtb = gemv_t(self.Q, b_arr)
        else:
            Qtb = gemm(transpose(self.Q), b_arr)
        return solve_triangular(R_sq, Qtb[:n], lower=False)

    def summary(self) -> str:
        """Plain-text report of the factors."""
        m, n = self._design.shape
        lines = [
            "QR Decomposition",
            "=" * 60,
            f"Method: {self.method}",
            f"Shape: {m} x {n}",
            f"Rank: {self.rank}",
        ]
        if self.dependent_columns:
            lines.append(f"Dependent columns: {list(self.dependent_columns)}")
        lines.append("-" * 60)
        lines.extend(format_matrix("Q", self.Q, "8.4f"))
        lines.extend(format_matrix("R", self.R, "8.4f"))
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        m, n = self._design.shape
        return (
            f"QRSolution(method={self.method!r}, m={m}, n={n}, rank={self.rank})"
        )
