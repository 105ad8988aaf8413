# radpoisson/postprocess/fields.py
"""
Derived fields from the nodal potential.

- E_r  at interval midpoints:          (phi[i] - phi[i+1]) / h[i]
- D_r  at interval midpoints:          eps_r(rmid) * E_r       (D_r / eps0)
- div F at midpoints of midpoints:     1/r d(r F)/dr, central differences

The divergences are diagnostics for Gauss's law: div(D_r) should follow
rho_lib wherever the mesh resolves the solution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from radpoisson.geometry.builder import RadialMesh

__all__ = [
    "FieldProfile",
    "DivergenceProfile",
    "compute_fields",
    "cylindrical_divergence",
    "compute_divergence",
    "gauss_residual",
]


@dataclass(frozen=True, slots=True)
class FieldProfile:
    rmid: np.ndarray  # (ninters,)
    Er: np.ndarray    # (ninters,)
    Dr: np.ndarray    # (ninters,)


@dataclass(frozen=True, slots=True)
class DivergenceProfile:
    rmidmid: np.ndarray  # (ninters-1,)
    rho_lib: np.ndarray  # (ninters-1,)
    div_Er: np.ndarray   # (ninters-1,)
    div_Dr: np.ndarray   # (ninters-1,)


def compute_fields(mesh: RadialMesh, phi: np.ndarray, eps: Callable) -> FieldProfile:
    """E_r and D_r at the midpoints of every interval."""
    phi = np.asarray(phi, dtype=np.float64)
    if phi.shape != mesh.r.shape:
        raise ValueError(f"phi has shape {phi.shape}, expected {mesh.r.shape}")

    rmid = mesh.rmid
    Er = (phi[:-1] - phi[1:]) / mesh.h
    # midpoints never sit on r = b; the side follows the midpoint position
    Dr = eps(rmid, rmid < mesh.b) * Er
    return FieldProfile(rmid=rmid, Er=Er, Dr=np.asarray(Dr, dtype=np.float64))


def cylindrical_divergence(rmid: np.ndarray, F: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    (1/r) d(r F)/dr for samples F at ``rmid``.

    Returns
    -------
    rmidmid, div : (M-1,) ndarrays
        Midpoints of ``rmid`` and the divergence there, computed as
        (F[i+1] + F[i]) / (2 rmidmid[i]) + (F[i+1] - F[i]) / (rmid[i+1] - rmid[i]).
    """
    rmid = np.asarray(rmid, dtype=np.float64)
    F = np.asarray(F, dtype=np.float64)
    rmidmid = 0.5 * rmid[:-1] + 0.5 * rmid[1:]
    div = (F[1:] + F[:-1]) / (2.0 * rmidmid) + (F[1:] - F[:-1]) / np.diff(rmid)
    return rmidmid, div


def compute_divergence(fields: FieldProfile, rho: Callable) -> DivergenceProfile:
    rmidmid, div_Er = cylindrical_divergence(fields.rmid, fields.Er)
    _, div_Dr = cylindrical_divergence(fields.rmid, fields.Dr)
    rho_lib = np.asarray(rho(rmidmid), dtype=np.float64)
    return DivergenceProfile(rmidmid=rmidmid, rho_lib=rho_lib, div_Er=div_Er, div_Dr=div_Dr)


def gauss_residual(div: DivergenceProfile) -> np.ndarray:
    """div(D_r) - rho_lib at the midpoints of midpoints."""
    return div.div_Dr - div.rho_lib
