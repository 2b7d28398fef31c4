"""
QR backends.

Available backends:
    CPUHouseholderBackend: Householder reflections, any m x n input
    CPUGramSchmidtBackend: classical Gram-Schmidt, square input
"""

from pydecomp.qr.backends.cpu import CPUGramSchmidtBackend, CPUHouseholderBackend

__all__ = [
    "CPUGramSchmidtBackend",
    "CPUHouseholderBackend",
]
