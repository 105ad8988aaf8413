# radpoisson/tests/test_poisson_radial.py
"""End-to-end checks of the radial Poisson pipeline.
Run with:  pytest -q
"""
from __future__ import annotations

import numpy as np
import pytest

from radpoisson.models.params import RadialParams
from radpoisson.physics.poisson import solve_radial_poisson
from radpoisson.postprocess.fields import cylindrical_divergence, gauss_residual


def _trivial(N1=40, N2=40, b=1.0, R=2.0, V0=0.0, p=0.5):
    return RadialParams(b=b, R=R, V0=V0, p=p, a0=0.0, N1=N1, N2=N2, trivial=True)


def _core_shell(N1=100, N2=100, b=1.0, R=2.0, V0=0.0, p=0.0, a0=1.0):
    return RadialParams(b=b, R=R, V0=V0, p=p, a0=a0, N1=N1, N2=N2, trivial=False)


def test_small_trivial_case_by_hand():
    # N1 = N2 = 2, b = 1, R = 2, V0 = 5, p = 1: stiffness I_k = r_k + r_{k+1},
    # load 0.5 r_k per interior row; solved by hand from the outer row inwards
    out = solve_radial_poisson(_trivial(N1=2, N2=2, V0=5.0, p=1.0))
    phi = out.phi
    phi3 = 5.0 + 3.0 / 7.0
    phi2 = phi3 + 0.3
    phi1 = phi2 + 1.0 / 6.0
    assert np.allclose(phi, [phi1, phi1, phi2, phi3, 5.0], rtol=1e-12)
    # monotonic and smooth across r = b (uniform permittivity)
    assert np.all(np.diff(phi) <= 0.0)
    assert phi[0] > phi[-1]


def test_single_interval_per_region():
    V0 = -1.75
    out = solve_radial_poisson(
        RadialParams(b=0.5, R=1.0, V0=V0, p=0.5, a0=3.0, N1=1, N2=1)
    )
    assert out.phi.shape == (3,)
    assert out.phi[-1] == V0
    assert np.all(np.isfinite(out.phi))
    assert out.fields.Er.shape == (2,)
    assert out.divergence.div_Dr.shape == (1,)


@pytest.mark.parametrize("p", [0.0, 0.5, 1.0])
def test_trivial_converges_to_analytic_solution(p):
    # -1/r (r phi')' = 1, phi'(0) = 0, phi(R) = V0  ->  phi = V0 + (R^2 - r^2)/4
    params = _trivial(V0=2.0, p=p)
    out = solve_radial_poisson(params)
    exact = params.V0 + (params.R ** 2 - out.mesh.r ** 2) / 4.0
    assert np.max(np.abs(out.phi - exact)) < 5e-3


def test_refinement_reduces_error():
    errs = []
    for n in (10, 40):
        params = _trivial(N1=n, N2=n, p=1.0)
        out = solve_radial_poisson(params)
        exact = (params.R ** 2 - out.mesh.r ** 2) / 4.0
        errs.append(np.max(np.abs(out.phi - exact)))
    assert errs[1] < errs[0] / 4.0


def test_trivial_divergence_follows_density():
    out = solve_radial_poisson(_trivial(p=0.5))
    d = out.divergence
    away = d.rmidmid > 0.2
    assert np.allclose(d.div_Dr[away], d.rho_lib[away], atol=0.05)
    # uniform permittivity: D_r = E_r
    assert np.allclose(out.fields.Dr, out.fields.Er)


def test_shell_displacement_is_divergence_free():
    # midpoint quadrature makes r * D_r constant over the charge-free shell
    out = solve_radial_poisson(_core_shell(N1=20, N2=30, p=0.0, a0=4.0))
    N1 = out.mesh.N1
    rD = out.fields.rmid * out.fields.Dr
    assert np.allclose(rD[N1:], rD[N1], rtol=1e-10)

    d = out.divergence
    scale = float(np.max(np.abs(out.fields.Dr / out.fields.rmid)))
    assert np.max(np.abs(d.div_Dr[N1:])) < 1e-9 * scale


def test_core_gauss_law_with_parabolic_charge():
    out = solve_radial_poisson(_core_shell(p=0.5, a0=1.0))
    d = out.divergence
    b = out.mesh.b
    core = (d.rmidmid > 0.2 * b) & (d.rmidmid < 0.8 * b)
    assert np.max(np.abs(gauss_residual(d)[core])) < 0.02


def test_permittivity_jump_in_fields():
    # E_r jumps by ~8 across r = b while D_r stays continuous
    out = solve_radial_poisson(_core_shell(N1=200, N2=200, p=0.5, a0=1.0))
    N1 = out.mesh.N1
    Er, Dr = out.fields.Er, out.fields.Dr
    assert Er[N1 - 1] / Er[N1] == pytest.approx(8.0, rel=0.05)
    assert Dr[N1] == pytest.approx(Dr[N1 - 1], rel=0.05)


def test_result_tables_shapes():
    out = solve_radial_poisson(_core_shell(N1=5, N2=7))
    n = out.mesh.ninters
    assert out.phi_table().shape == (n + 1, 2)
    assert out.field_table().shape == (n, 3)
    assert out.divergence_table().shape == (n - 1, 4)
    assert np.array_equal(out.phi_table()[:, 0], out.mesh.r)


def test_cylindrical_divergence_of_linear_field():
    # F = r / 2  ->  (1/r) d(r F)/dr = 1 exactly for the central formula
    rmid = np.linspace(0.05, 1.0, 30)
    rmm, div = cylindrical_divergence(rmid, rmid / 2.0)
    assert rmm.shape == (29,)
    assert np.allclose(div, 1.0, rtol=1e-12)


def test_params_validation():
    with pytest.raises(ValueError):
        RadialParams(b=2.0, R=1.0, V0=0.0, p=0.5, a0=1.0, N1=2, N2=2)
    with pytest.raises(ValueError):
        RadialParams(b=0.0, R=1.0, V0=0.0, p=0.5, a0=1.0, N1=2, N2=2)
    with pytest.raises(ValueError):
        RadialParams(b=0.5, R=1.0, V0=0.0, p=0.5, a0=1.0, N1=0, N2=2)
    with pytest.raises(ValueError):
        RadialParams(b=0.5, R=1.0, V0=0.0, p=1.2, a0=1.0, N1=2, N2=2)
