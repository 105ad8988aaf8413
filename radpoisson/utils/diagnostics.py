"""
radpoisson/utils/diagnostics.py

Low-noise diagnostics for a radial Poisson run.
Import and call these from the driver/workflows when debug=True.
"""

from __future__ import annotations

from typing import Optional

import numpy as np


def _fmt_range(x: np.ndarray, name: str) -> str:
    if x.size == 0:
        return f"{name}: (empty)"
    return f"{name}∈[{np.min(x):+.3e},{np.max(x):+.3e}]"


def log_state_summary(
    *,
    phi: np.ndarray,
    Er: Optional[np.ndarray] = None,
    Dr: Optional[np.ndarray] = None,
    prefix: str = "[diag]",
) -> None:
    """Print compact ranges for the potential and the fields."""
    msg = [prefix, _fmt_range(phi, "φ")]
    if Er is not None:
        msg.append(_fmt_range(Er, "Er"))
    if Dr is not None:
        msg.append(_fmt_range(Dr, "Dr"))
    print(" | ".join(msg))


def log_system_summary(
    *,
    diag: np.ndarray,
    lower: np.ndarray,
    upper: np.ndarray,
    prefix: str = "[diag]",
) -> None:
    """
    Report the diagonal-dominance margin min_i(|d_i| - |l_{i-1}| - |u_i|).
    A negative margin means the no-pivot elimination is not guaranteed safe.
    """
    off = np.zeros_like(diag)
    off[1:] += np.abs(lower)
    off[:-1] += np.abs(upper)
    margin = np.abs(diag) - off
    print(f"{prefix} system n={diag.size} | min|diag|={float(np.min(np.abs(diag))):.3e} | "
          f"dominance margin min={float(np.min(margin)):+.3e}")


def check_gauss_law(
    *,
    rmidmid: np.ndarray,
    div_Dr: np.ndarray,
    rho_lib: np.ndarray,
    r_split: Optional[float] = None,
    prefix: str = "[diag]",
) -> float:
    """
    Report max|div(D_r) - rho_lib| (overall, and per side of ``r_split`` if given).
    Returns the overall infinity norm.
    """
    resid = np.abs(div_Dr - rho_lib)
    total = float(np.max(resid)) if resid.size else 0.0
    msg = f"{prefix} Gauss audit: max|divD - rho|={total:.3e}"
    if r_split is not None and resid.size:
        inner = resid[rmidmid < r_split]
        outer = resid[rmidmid >= r_split]
        if inner.size:
            msg += f" | core={float(np.max(inner)):.3e}"
        if outer.size:
            msg += f" | shell={float(np.max(outer)):.3e}"
    print(msg)
    return total
