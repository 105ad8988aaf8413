# radpoisson/physics/poisson.py
"""
Radial Poisson driver (core | shell medium, axisymmetric 1-D).

This module is *sequencing only*:
- builds the two-region mesh
- binds eps_r and rho_lib to the run parameters
- assembles the FEM tridiagonal system (Dirichlet phi(R) = V0)
- solves it with the tridiagonal Gauss elimination
- derives E_r, D_r and their divergences

Strong form:
    -1/r d/dr( r eps_r(r) dphi/dr ) = rho_lib(r),   rho_lib = rho / eps0
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from radpoisson.models.params import RadialParams
from radpoisson.geometry.builder import RadialMesh, build_mesh_from_params
from radpoisson.physics.profiles import build_profiles
from radpoisson.discretization.assemble import TridiagonalSystem, assemble_system
from radpoisson.solver.tridiagonal import solve_tridiagonal
from radpoisson.postprocess.fields import (
    DivergenceProfile,
    FieldProfile,
    compute_divergence,
    compute_fields,
)
from radpoisson.utils import logger
from radpoisson.utils.diagnostics import (
    check_gauss_law,
    log_state_summary,
    log_system_summary,
)

__all__ = ["RadialPoissonResult", "solve_radial_poisson"]


# ----------------------------- Data containers ----------------------------- #
@dataclass(frozen=True, slots=True)
class RadialPoissonResult:
    """Everything one run produces (float64 arrays)."""
    params: RadialParams
    mesh: RadialMesh
    system: TridiagonalSystem
    phi: np.ndarray
    fields: FieldProfile
    divergence: DivergenceProfile

    def phi_table(self) -> np.ndarray:
        """Columns (r, phi), one row per node."""
        return np.column_stack((self.mesh.r, self.phi))

    def field_table(self) -> np.ndarray:
        """Columns (rmid, Er, Dr), one row per interval."""
        f = self.fields
        return np.column_stack((f.rmid, f.Er, f.Dr))

    def divergence_table(self) -> np.ndarray:
        """Columns (rmidmid, rho_lib, div_Er, div_Dr)."""
        d = self.divergence
        return np.column_stack((d.rmidmid, d.rho_lib, d.div_Er, d.div_Dr))


# --------------------------------- Driver ---------------------------------- #
def solve_radial_poisson(params: RadialParams, *, debug: bool = False) -> RadialPoissonResult:
    """Run mesh → assembly → solve → post-processing for one parameter set."""
    debug = debug or logger.debug_enabled()

    mesh = build_mesh_from_params(params)
    eps, rho = build_profiles(params)
    if debug:
        logger.info(
            f"[Poisson] N1={mesh.N1}, N2={mesh.N2}, b={mesh.b:.6g}, R={mesh.R:.6g}, "
            f"p={params.p}, trivial={params.trivial}, V0={params.V0}"
        )

    system = assemble_system(mesh, eps, rho, params.p, params.V0)
    if debug:
        log_system_summary(diag=system.diag, lower=system.lower, upper=system.upper,
                           prefix="[Poisson]")

    phi = solve_tridiagonal(system.diag, system.lower, system.upper, system.rhs)
    phi.setflags(write=False)
    if not np.all(np.isfinite(phi)):
        logger.warn("non-finite potential: the assembled system lost diagonal dominance")

    fields = compute_fields(mesh, phi, eps)
    divergence = compute_divergence(fields, rho)
    if debug:
        log_state_summary(phi=phi, Er=fields.Er, Dr=fields.Dr, prefix="[Poisson]")
        check_gauss_law(
            rmidmid=divergence.rmidmid,
            div_Dr=divergence.div_Dr,
            rho_lib=divergence.rho_lib,
            r_split=mesh.b,
            prefix="[Poisson]",
        )

    return RadialPoissonResult(
        params=params,
        mesh=mesh,
        system=system,
        phi=phi,
        fields=fields,
        divergence=divergence,
    )
