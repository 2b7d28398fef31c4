"""
PyDecomp: dense matrix decompositions for Python.

QR decomposition (Householder reflection and classical Gram-Schmidt) and
LUP decomposition with partial pivoting (Crout's method), written out on
top of a small set of BLAS-like primitives.

Submodules:
    qr: householder_qr, gram_schmidt_qr, qr
    lup: lup, make_lu, make_p
    core: exceptions, validation, result envelope, primitives
"""

__version__ = "0.1.0"

from pydecomp import qr
from pydecomp import lup
from pydecomp.core.compute.linalg.blas import gemm

__all__ = [
    "__version__",
    "qr",
    "lup",
    "gemm",
]
