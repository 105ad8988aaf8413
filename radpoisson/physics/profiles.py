# radpoisson/physics/profiles.py
"""
Material and source profiles of the two-region radial medium.

- eps_r(r): relative permittivity, discontinuous at r = b
    core  (r < b):   1.0
    shell (r > b):   8.0 - 6.0 (r - b)/(R - b)   (8.0 at b+, 2.0 at R)
  At r = b the caller picks the one-sided limit with ``left``.
- rho_lib(r): free charge density normalized by eps0
    core:  a0 (1 - (r/b)^2)
    shell: 0

``trivial=True`` replaces both by 1.0 everywhere (uniform test medium).

Both profiles accept scalars (return float) or numpy arrays (return float64
arrays); ``left`` broadcasts against ``r``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

__all__ = [
    "PermittivityProfile",
    "ChargeDensityProfile",
    "build_profiles",
]

# relative tolerance used to decide that r sits on the core/shell boundary
_BOUNDARY_RTOL = 1e-12


def _scalar_or_array(out: np.ndarray) -> float | np.ndarray:
    return float(out) if out.ndim == 0 else out


@dataclass(frozen=True, slots=True)
class PermittivityProfile:
    """eps_r(r, left) of the core/shell medium."""
    b: float
    R: float
    trivial: bool = False

    eps_core: float = 1.0
    eps_shell_inner: float = 8.0
    eps_shell_outer: float = 2.0

    def __call__(self, r, left=True) -> float | np.ndarray:
        r = np.asarray(r, dtype=np.float64)
        if self.trivial:
            return _scalar_or_array(np.ones_like(r))

        left = np.asarray(left, dtype=bool)
        tol = _BOUNDARY_RTOL * self.b
        in_core = (r <= self.b - tol) | ((np.abs(r - self.b) <= tol) & left)
        shell = self.eps_shell_inner - (self.eps_shell_inner - self.eps_shell_outer) * (
            (r - self.b) / (self.R - self.b)
        )
        return _scalar_or_array(np.where(in_core, self.eps_core, shell))


@dataclass(frozen=True, slots=True)
class ChargeDensityProfile:
    """rho_lib(r) = rho(r)/eps0, parabolic in the core, zero in the shell."""
    b: float
    a0: float
    trivial: bool = False

    def __call__(self, r) -> float | np.ndarray:
        r = np.asarray(r, dtype=np.float64)
        if self.trivial:
            return _scalar_or_array(np.ones_like(r))
        core = self.a0 * (1.0 - (r / self.b) ** 2)
        return _scalar_or_array(np.where(r > self.b, 0.0, core))


def build_profiles(params) -> Tuple[PermittivityProfile, ChargeDensityProfile]:
    """Profiles bound to a :class:`radpoisson.models.params.RadialParams`."""
    eps = PermittivityProfile(b=params.b, R=params.R, trivial=params.trivial)
    rho = ChargeDensityProfile(b=params.b, a0=params.a0, trivial=params.trivial)
    return eps, rho
