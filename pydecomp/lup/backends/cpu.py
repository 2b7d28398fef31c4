"""
CPU backend for LUP decomposition (Crout's method).
"""

import warnings
from typing import Any

from pydecomp.core.exceptions import SingularMatrixError
from pydecomp.core.result import Result, readonly
from pydecomp.core.compute.timing import Timer
from pydecomp.lup._crout import crout_lup
from pydecomp.lup.design import LUPDesign
from pydecomp.lup.solution import LUPParams


class CPUCroutBackend:
    """
    CPU backend using Crout's method with partial pivoting.

    Implements the Backend protocol for LUPDesign -> LUPParams.

    A zero pivot either raises (check_singular=True) or is let through,
    leaving inf/nan in the subdiagonal of that column and below; in the
    latter case it is reported through warnings.
    """

    def __init__(self, check_singular: bool = False):
        self._check_singular = check_singular

    @property
    def name(self) -> str:
        return 'cpu_crout'

    def solve(self, design: LUPDesign) -> Result[LUPParams]:
        """
        Factor A[p] = L U.

        Raises:
            SingularMatrixError: If a pivot is exactly zero and
                check_singular was requested
        """
        timer = Timer()
        timer.start()

        with timer.section('decomposition'):
            factors = crout_lup(design.A)

        timer.stop()

        zero_pivots = tuple(factors.zero_pivots)
        messages: tuple[str, ...] = ()
        if zero_pivots:
            msg = (
                f"LUP: zero pivot in columns {list(zero_pivots)}; "
                f"A is singular and L contains non-finite entries"
            )
            if self._check_singular:
                raise SingularMatrixError(
                    msg,
                    matrix_name='A',
                    rank=design.r - len(zero_pivots),
                    expected_rank=design.r,
                    pivot_index=zero_pivots[0],
                )
            warnings.warn(msg, RuntimeWarning, stacklevel=2)
            messages = (msg,)

        params = LUPParams(
            permutation=readonly(factors.permutation),
            LU=readonly(factors.LU),
            zero_pivots=zero_pivots,
        )

        info: dict[str, Any] = {
            'method': 'crout',
            'shape': design.shape,
            'n_pivots': design.r,
            'swaps': factors.n_swaps,
            'zero_pivots': list(zero_pivots),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=messages,
        )
