"""
Core protocols for PyDecomp.

These define structural interfaces that decomposition backends must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so a
backend is anything with a name and a solve() method.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pydecomp.core.result import Result

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a validated design (a matrix plus its
    shape) and produce a decomposition payload wrapped in a Result.

    Backends are stateless: all configuration is passed at construction
    time. Every call works on its own private copy of the input, so a single
    backend instance may be shared between threads.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_householder', 'cpu_gram_schmidt', 'cpu_crout'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the decomposition.

        Args:
            design: Validated design wrapping the input matrix

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If numerical issues prevent a decomposition
            ValidationError: If design is invalid for this backend
        """
        ...
