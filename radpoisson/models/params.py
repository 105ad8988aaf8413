# radpoisson/models/params.py
"""
Run parameters of the core/shell radial Poisson problem.

    output   : output file prefix
    b, R     : core radius and outer radius [m], 0 < b < R
    V0       : potential at r = R [V]
    p        : quadrature blend, 1 = trapezoidal, 0 = midpoint
    trivial  : uniform eps_r = rho_lib = 1 test medium
    a0       : core charge amplitude, rho_lib(0) = a0 [V/m^2]
    N1, N2   : intervals in the core and in the shell (>= 1)
"""

from __future__ import annotations

from dataclasses import dataclass, replace

__all__ = ["RadialParams"]


@dataclass(frozen=True, slots=True)
class RadialParams:
    """Immutable configuration record handed to the numeric core."""
    b: float
    R: float
    V0: float
    p: float
    a0: float
    N1: int
    N2: int
    trivial: bool = False
    output: str = "output"

    def __post_init__(self) -> None:
        if not (0.0 < self.b < self.R):
            raise ValueError(f"need 0 < b < R (got b={self.b}, R={self.R})")
        if int(self.N1) < 1 or int(self.N2) < 1:
            raise ValueError(f"need N1 >= 1 and N2 >= 1 (got N1={self.N1}, N2={self.N2})")
        if not (0.0 <= self.p <= 1.0):
            raise ValueError(f"p must lie in [0, 1] (got {self.p})")

    @property
    def npoints(self) -> int:
        return int(self.N1) + int(self.N2) + 1

    def with_updates(self, **changes) -> "RadialParams":
        """Copy with some fields replaced (re-validated)."""
        return replace(self, **changes)
