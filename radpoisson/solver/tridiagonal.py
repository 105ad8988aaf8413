"""
radpoisson/solver/tridiagonal.py

Gauss elimination for tridiagonal systems (Thomas algorithm):

    lower[i-1] * x[i-1] + diag[i] * x[i] + upper[i] * x[i+1] = rhs[i]

Precondition
------------
The matrix must be diagonally dominant enough that no pivot vanishes.
There is no pivoting and no zero-pivot check; a violated precondition shows up
as inf/nan in the returned vector. The FEM systems built by
``radpoisson.discretization.assemble`` satisfy it as long as the permittivity
is positive and the mesh widths are positive.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

__all__ = ["solve_tridiagonal"]


def _c64_copy(x: Sequence[float] | np.ndarray) -> np.ndarray:
    return np.array(x, dtype=np.float64, copy=True)


def solve_tridiagonal(
    diag: Sequence[float] | np.ndarray,
    lower: Sequence[float] | np.ndarray,
    upper: Sequence[float] | np.ndarray,
    rhs: Sequence[float] | np.ndarray,
) -> np.ndarray:
    """
    Solve a tridiagonal system by forward elimination + back substitution.

    Parameters
    ----------
    diag : (n,) array_like
        Main diagonal.
    lower : (n-1,) array_like
        Sub-diagonal; ``lower[i-1]`` multiplies ``x[i-1]`` in row ``i``.
    upper : (n-1,) array_like
        Super-diagonal; ``upper[i]`` multiplies ``x[i+1]`` in row ``i``.
    rhs : (n,) array_like
        Right-hand side.

    Returns
    -------
    x : (n,) float64 ndarray
        Fresh solution array. The input sequences are left untouched.
    """
    d = _c64_copy(diag)
    b = _c64_copy(rhs)
    lo = np.asarray(lower, dtype=np.float64)
    up = np.asarray(upper, dtype=np.float64)

    n = d.size
    if n == 0:
        raise ValueError("empty system")
    if b.size != n:
        raise ValueError(f"rhs has length {b.size}, expected {n}")
    if lo.size != n - 1 or up.size != n - 1:
        raise ValueError(
            f"off-diagonal bands must have length {n - 1} "
            f"(got lower={lo.size}, upper={up.size})"
        )

    # forward elimination (uses the already-updated diagonal of row i-1)
    for i in range(1, n):
        m = lo[i - 1] / d[i - 1]
        d[i] -= m * up[i - 1]
        b[i] -= m * b[i - 1]

    x = np.empty(n, dtype=np.float64)
    x[-1] = b[-1] / d[-1]
    for i in range(n - 2, -1, -1):
        x[i] = (b[i] - up[i] * x[i + 1]) / d[i]
    return x
