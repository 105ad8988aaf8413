# radpoisson/postprocess/visualization.py
"""
Lightweight plotting helpers for radial Poisson results.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
import matplotlib.pyplot as plt

__all__ = ["plot_potential", "plot_fields", "plot_gauss_check", "plot_summary"]


def _axes(ax: plt.Axes | None, figsize=(6.0, 3.2)) -> Tuple[plt.Figure, plt.Axes]:
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize, constrained_layout=True)
    else:
        fig = ax.figure
    return fig, ax


def _mark_boundary(ax: plt.Axes, b: float) -> None:
    ax.axvline(b, color="0.4", linestyle="--", linewidth=1.0)


def plot_potential(result, *, ax: plt.Axes | None = None,
                   title: str | None = "Potential") -> Tuple[plt.Figure, plt.Axes]:
    """phi(r) at the nodes, with the core/shell boundary dashed."""
    fig, ax = _axes(ax)
    ax.plot(result.mesh.r, result.phi, marker=".", linewidth=1.6, label=r"$\phi$")
    _mark_boundary(ax, result.mesh.b)
    ax.set_xlabel("r (m)")
    ax.set_ylabel(r"$\phi$ (V)")
    if title:
        ax.set_title(title)
    ax.grid(True, which="both", linestyle=":", linewidth=0.6)
    return fig, ax


def plot_fields(result, *, ax: plt.Axes | None = None,
                title: str | None = "Fields") -> Tuple[plt.Figure, plt.Axes]:
    """E_r and D_r/eps0 at the interval midpoints."""
    fig, ax = _axes(ax)
    f = result.fields
    ax.plot(f.rmid, f.Er, linewidth=1.6, label=r"$E_r$")
    ax.plot(f.rmid, f.Dr, linewidth=1.6, linestyle="--", label=r"$D_r/\epsilon_0$")
    _mark_boundary(ax, result.mesh.b)
    ax.set_xlabel("r (m)")
    ax.set_ylabel("field (V/m)")
    if title:
        ax.set_title(title)
    ax.grid(True, which="both", linestyle=":", linewidth=0.6)
    ax.legend(frameon=False, loc="best")
    return fig, ax


def plot_gauss_check(result, *, ax: plt.Axes | None = None,
                     title: str | None = "Gauss law") -> Tuple[plt.Figure, plt.Axes]:
    """div(E_r), div(D_r) against rho_lib at the midpoints of midpoints."""
    fig, ax = _axes(ax)
    d = result.divergence
    ax.plot(d.rmidmid, d.rho_lib, color="k", linewidth=2.0, label=r"$\rho_{lib}/\epsilon_0$")
    ax.plot(d.rmidmid, d.div_Er, linewidth=1.2, label=r"$\nabla\cdot E_r$")
    ax.plot(d.rmidmid, d.div_Dr, linewidth=1.2, linestyle="--",
            label=r"$\nabla\cdot D_r/\epsilon_0$")
    _mark_boundary(ax, result.mesh.b)
    ax.set_xlabel("r (m)")
    ax.set_ylabel(r"(V/m$^2$)")
    if title:
        ax.set_title(title)
    ax.grid(True, which="both", linestyle=":", linewidth=0.6)
    ax.legend(frameon=False, loc="best")
    return fig, ax


def plot_summary(result) -> Tuple[plt.Figure, np.ndarray]:
    """Three stacked panels: potential, fields, Gauss-law check."""
    fig, axes = plt.subplots(3, 1, figsize=(6.5, 8.0), sharex=True, constrained_layout=True)
    plot_potential(result, ax=axes[0])
    plot_fields(result, ax=axes[1])
    plot_gauss_check(result, ax=axes[2])
    for ax in axes[:-1]:
        ax.set_xlabel("")
    return fig, axes
