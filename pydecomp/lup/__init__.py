"""
LUP decomposition.

Public API:
    lup(A, check_singular=False) -> LUPSolution
    make_lu(LU) -> (L, U)
    make_p(p) -> P

The permutation index array is the primary output; make_p() expands it
into a 0/1 matrix with P @ A == L @ U.

Example:
    >>> from pydecomp.lup import lup
    >>> solution = lup(A)
    >>> x = solution.solve(b)
    >>> print(solution.summary())
"""

from pydecomp.lup.design import LUPDesign
from pydecomp.lup.solution import LUPSolution, LUPParams
from pydecomp.lup.solvers import lup, make_lu, make_p

__all__ = [
    "lup",
    "make_lu",
    "make_p",
    "LUPDesign",
    "LUPSolution",
    "LUPParams",
]
