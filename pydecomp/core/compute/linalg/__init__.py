"""
Vector/matrix primitives for PyDecomp.

All functions follow these conventions:
    - Operate on dense float64 NumPy arrays
    - Return new arrays (axpy is the single in-place exception)
    - Dimension mismatches raise DimensionError immediately

Submodules:
    blas: dot, axpy, scal, gemv_t, gemm, transpose, matrix_size, identity
"""

from pydecomp.core.compute.linalg.blas import (
    axpy,
    dot,
    gemm,
    gemv_t,
    identity,
    matrix_size,
    scal,
    transpose,
)

__all__ = [
    "axpy",
    "dot",
    "gemm",
    "gemv_t",
    "identity",
    "matrix_size",
    "scal",
    "transpose",
]
