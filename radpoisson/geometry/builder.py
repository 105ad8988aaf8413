# radpoisson/geometry/builder.py
"""
1D radial mesh builder for the two-region (core | shell) medium.

- Node-based grid on [0, R] made of two uniform sub-grids:
    core  [0, b]: N1 intervals, step h1 = b / N1
    shell [b, R]: N2 intervals, step h2 = (R - b) / N2
- The node at index N1 is exactly ``b`` (no accumulated round-off), so the
  permittivity discontinuity always falls on a node.

Public API:
    RadialMesh
    build_radial_mesh(b, R, N1, N2) -> RadialMesh
    build_mesh_from_params(params) -> RadialMesh

Notes
-----
- No physics here: only coordinates and interval metrics.
- Inputs are expected to be validated upstream (N1, N2 >= 1, 0 < b < R);
  see ``radpoisson.models.params``.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

__all__ = ["RadialMesh", "build_radial_mesh", "build_mesh_from_params"]


def _frozen_c64(a: np.ndarray) -> np.ndarray:
    out = np.ascontiguousarray(a, dtype=np.float64)
    out.setflags(write=False)
    return out


@dataclass(frozen=True, slots=True)
class RadialMesh:
    """
    Radial mesh (arrays are float64 and read-only).

    Attributes
    ----------
    r : (N1+N2+1,) ndarray
        Node radii, strictly increasing, r[0] = 0, r[N1] = b, r[-1] = R.
    h : (N1+N2,) ndarray
        Interval widths, h[i] = r[i+1] - r[i].
    """
    r: np.ndarray
    h: np.ndarray
    b: float
    R: float
    N1: int
    N2: int

    @property
    def npoints(self) -> int:
        return self.N1 + self.N2 + 1

    @property
    def ninters(self) -> int:
        return self.N1 + self.N2

    @property
    def rmid(self) -> np.ndarray:
        """Interval midpoints."""
        return 0.5 * self.r[:-1] + 0.5 * self.r[1:]

    @property
    def inner_intervals(self) -> np.ndarray:
        """Boolean mask of intervals lying in the core (k < N1)."""
        return np.arange(self.ninters) < self.N1


def build_radial_mesh(b: float, R: float, N1: int, N2: int) -> RadialMesh:
    """Construct the two-region radial mesh."""
    N1 = int(N1)
    N2 = int(N2)
    h1 = b / N1
    h2 = (R - b) / N2

    r = np.empty(N1 + N2 + 1, dtype=np.float64)
    r[:N1] = np.arange(N1) * h1
    r[N1:] = b + np.arange(N2 + 1) * h2
    h = np.diff(r)

    return RadialMesh(
        r=_frozen_c64(r),
        h=_frozen_c64(h),
        b=float(b),
        R=float(R),
        N1=N1,
        N2=N2,
    )


def build_mesh_from_params(params) -> RadialMesh:
    return build_radial_mesh(params.b, params.R, params.N1, params.N2)
