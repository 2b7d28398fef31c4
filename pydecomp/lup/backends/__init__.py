"""
LUP backends.

Available backends:
    CPUCroutBackend: Crout's method with partial pivoting
"""

from pydecomp.lup.backends.cpu import CPUCroutBackend

__all__ = [
    "CPUCroutBackend",
]
