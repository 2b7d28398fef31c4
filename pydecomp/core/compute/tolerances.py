"""
Tolerance tiers and numerical thresholds.

Defines precision expectations for the decomposition kernels:
- CPU FP64 (reference): reconstruction to near machine precision
- CPU FP64, ill-conditioned: relaxed for near-dependent columns

Also holds the fixed thresholds the algorithms themselves rely on.
Used by the kernels, the solution wrappers and the test suite.
"""

from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Householder / LUP on well-conditioned input
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, reconstruction to machine precision',
)

# Gram-Schmidt, or any method on ill-conditioned problems (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)

# Squared column norm below which classical Gram-Schmidt treats the
# projected column as linearly dependent and emits a zero basis vector.
GRAM_SCHMIDT_NORM_TOL = 1e-6

# Scale of the numerical-rank cutoff: a diagonal entry of R counts toward
# the rank when |R_ii| > RANK_TOL_FACTOR * max(m, n) * max|R_jj|.
RANK_TOL_FACTOR = float(np.finfo(np.float64).eps)


def select_tolerance(
    backend_name: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a given backend."""
    if is_ill_conditioned or 'gram_schmidt' in backend_name:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
