"""
Shared compute infrastructure for PyDecomp.

This module provides timing utilities, tolerance tiers and the vector/matrix
primitives that are shared across the decomposition backends.

IMPORTANT: This is NOT where decomposition algorithms live. Those go in
{qr,lup}/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical tolerance tiers and algorithm thresholds
    linalg: BLAS-like primitives (dot, axpy, gemm, transpose, ...)
"""

from pydecomp.core.compute.timing import Timer, timed

__all__ = [
    # Timing
    "Timer",
    "timed",
]
