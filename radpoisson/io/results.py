# -*- coding: utf-8 -*-
"""
Results IO helpers.

Write, for an output prefix ``<out>``:
  * <out>_phi.out                 (r, phi)
  * <out>_Er_Dr.out               (rmid, Er, Dr)
  * <out>_rholib_divEr_divDr.out  (rmidmid, rho_lib, div_Er, div_Dr)
  * metrics.json                  (scalar run summary, optional)

Tables are whitespace-separated, 15 significant digits, no header, so they
load directly with ``numpy.loadtxt``.
"""
from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, List

import numpy as np

from radpoisson.postprocess.fields import gauss_residual

__all__ = ["TABLE_SUFFIXES", "write_tables", "write_metrics", "summary_metrics"]

TABLE_SUFFIXES = ("_phi.out", "_Er_Dr.out", "_rholib_divEr_divDr.out")
_FMT = "%.15g"


def write_tables(result, prefix: str | Path) -> List[Path]:
    """Write the three result tables of a :class:`RadialPoissonResult`."""
    prefix = str(prefix)
    tables = (result.phi_table(), result.field_table(), result.divergence_table())
    paths = [Path(prefix + suffix) for suffix in TABLE_SUFFIXES]
    for path, arr in zip(paths, tables):
        path.parent.mkdir(parents=True, exist_ok=True)
        np.savetxt(path, arr, fmt=_FMT, delimiter=" ")
    return paths


def write_metrics(path: Path, metrics: Dict[str, Any]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(metrics, f, indent=2, sort_keys=True)
    return path


def summary_metrics(result) -> Dict[str, Any]:
    """Scalar KPIs of one run (plain floats/ints, JSON-ready)."""
    mesh = result.mesh
    phi = result.phi
    resid = gauss_residual(result.divergence)
    return {
        "npoints": int(mesh.npoints),
        "phi_axis": float(phi[0]),
        "phi_interface": float(phi[mesh.N1]),
        "phi_outer": float(phi[-1]),
        "max_abs_Er": float(np.max(np.abs(result.fields.Er))),
        "max_abs_Dr": float(np.max(np.abs(result.fields.Dr))),
        "gauss_residual_inf": float(np.max(np.abs(resid))) if resid.size else 0.0,
    }
