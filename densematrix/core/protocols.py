"""
Core protocols for densematrix.

Backends are matched structurally (Protocol) rather than by inheritance,
so a backend only has to provide a name and a solve() method.
"""

from typing import Protocol, TypeVar, runtime_checkable

from densematrix.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)  # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    A backend takes a validated design and produces a Result envelope.
    Backends hold only device configuration; everything about the problem
    arrives through the design.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}[_{precision}]'
        Example: 'cpu_gauss_jordan'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Raises:
            NumericalError: If numerical issues prevent a solution
        """
        ...
