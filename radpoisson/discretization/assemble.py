# radpoisson/discretization/assemble.py
# PEP-8, numpy only. Galerkin P1 assembly of the radial Poisson problem
#
#     -d/dr( r eps_r(r) dphi/dr ) = r rho_lib(r)      on (0, R)
#
# into a tridiagonal system. Quadrature on every interval is a convex blend of
# the trapezoidal (endpoint) rule, weight p, and the midpoint rule, weight 1-p.
#
# Boundary rows
# -------------
# - Row 0 (axis): no explicit condition; the r weight makes the natural
#   condition r eps dphi/dr -> 0 at r = 0 part of the weak form.
# - Last row: Dirichlet phi(R) = V0, see apply_outer_dirichlet().

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from radpoisson.geometry.builder import RadialMesh

__all__ = [
    "TridiagonalSystem",
    "assemble_fem_system",
    "apply_outer_dirichlet",
    "assemble_system",
]


@dataclass(frozen=True, slots=True)
class TridiagonalSystem:
    """Bands + right-hand side, in the layout of ``solve_tridiagonal``.

    diag  : (npoints,)
    lower : (ninters,)  lower[k] couples row k+1 to unknown k
    upper : (ninters,)  upper[k] couples row k to unknown k+1
    rhs   : (npoints,)
    """
    diag: np.ndarray
    lower: np.ndarray
    upper: np.ndarray
    rhs: np.ndarray

    @property
    def size(self) -> int:
        return int(self.diag.size)

    def as_dense(self) -> np.ndarray:
        """Dense matrix (for debugging and tests on small systems)."""
        return (
            np.diag(self.diag)
            + np.diag(self.lower, k=-1)
            + np.diag(self.upper, k=+1)
        )


def _check_weight(p: float) -> float:
    p = float(p)
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"quadrature weight p must lie in [0, 1], got {p}")
    return p


def assemble_fem_system(
    mesh: RadialMesh,
    eps: Callable,
    rho: Callable,
    p: float,
) -> TridiagonalSystem:
    """
    Stiffness bands and load vector, before any boundary row is imposed.

    Every interval k is evaluated on one side of the permittivity jump:
    ``left = k < N1``. Interval N1-1 touches r = b from the core and interval
    N1 from the shell, so each sees its own one-sided limit of eps_r(b).
    """
    p = _check_weight(p)
    r = mesh.r
    h = mesh.h
    r0 = r[:-1]
    r1 = r[1:]
    rm = 0.5 * (r0 + r1)
    left = mesh.inner_intervals

    # stiffness: (1/h^2) * int_{r0}^{r1} eps r dr, with the integral blended
    integral = (
        p * (eps(r0, left) * r0 + eps(r1, left) * r1)
        + (1.0 - p) * eps(rm, left) * (r0 + r1)
    ) / (2.0 * h)

    diag = np.zeros(mesh.npoints, dtype=np.float64)
    diag[:-1] += integral
    diag[1:] += integral
    lower = -integral
    upper = -integral.copy()

    # load: int rho r phi_i dr, half of the interval to each endpoint row
    mid_part = (1.0 - p) * rho(rm) * (r0 + r1) / 4.0
    rhs = np.zeros(mesh.npoints, dtype=np.float64)
    rhs[:-1] += (p * rho(r0) * 0.5 * r0 + mid_part) * h
    rhs[1:] += (p * rho(r1) * 0.5 * r1 + mid_part) * h

    return TridiagonalSystem(diag=diag, lower=lower, upper=upper, rhs=rhs)


def apply_outer_dirichlet(system: TridiagonalSystem, V0: float) -> TridiagonalSystem:
    """Return a copy whose last row reads phi[-1] = V0."""
    diag = system.diag.copy()
    lower = system.lower.copy()
    rhs = system.rhs.copy()

    rhs[-1] = float(V0)
    diag[-1] = 1.0
    lower[-1] = 0.0
    return TridiagonalSystem(diag=diag, lower=lower, upper=system.upper.copy(), rhs=rhs)


def assemble_system(
    mesh: RadialMesh,
    eps: Callable,
    rho: Callable,
    p: float,
    V0: float,
) -> TridiagonalSystem:
    """Full system: FEM assembly followed by the outer Dirichlet row."""
    return apply_outer_dirichlet(assemble_fem_system(mesh, eps, rho, p), V0)
