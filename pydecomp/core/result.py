"""
Generic result container for all PyDecomp computations.

The Result class provides a standardized envelope that every decomposition
uses. This enables shared tooling for timing, diagnostics and reporting
while allowing each decomposition to define its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, rank, pivot swaps)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True); factor arrays inside are marked read-only
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any
import numpy as np
from numpy.typing import NDArray

P = TypeVar('P')  # Parameter payload type


def readonly(array: NDArray[Any]) -> NDArray[Any]:
    """Mark a freshly computed factor read-only before it leaves a backend."""
    array.setflags(write=False)
    return array


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix decompositions.

    Type Parameters:
        P: The decomposition-specific parameter payload type

    Attributes:
        params: Decomposition factors (Q and R, permutation and LU, ...)
        info: Structured metadata (method, shape, rank, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=QRParams(Q=Q, R=R, rank=5, dependent_columns=()),
        ...     info={'method': 'householder', 'shape': (5, 5)},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_householder'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
