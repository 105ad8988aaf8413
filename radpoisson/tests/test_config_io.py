# radpoisson/tests/test_config_io.py
"""
Config loading (YAML and key = value), overrides, and result writers.
"""
from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pytest

from radpoisson.io.config import apply_overrides, build_params, load_config
from radpoisson.io.results import summary_metrics, write_metrics, write_tables
from radpoisson.models.params import RadialParams
from radpoisson.physics.poisson import solve_radial_poisson

YAML_CFG = """\
output: run1
b: 0.05
R: 0.1
V0: 0.0
p: 1.0
trivial: false
a0: 1.0e4
N1: 10
N2: 20
"""

IN_CFG = """\
// core/shell dielectric
output = demo
b  = 0.05      // core radius
R  = 0.1
V0 = 2
p  = 0.5       % quadrature mix
trivial = true # uniform medium
a0 = 1e4
N1 = 4
N2 = 6
"""


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text)
    return path


def test_yaml_config_to_params(tmp_path):
    cfg = load_config(_write(tmp_path, "c.yaml", YAML_CFG))
    params = build_params(cfg)
    assert params == RadialParams(
        output="run1", b=0.05, R=0.1, V0=0.0, p=1.0,
        trivial=False, a0=1.0e4, N1=10, N2=20,
    )


def test_key_value_config_and_comments(tmp_path):
    params = build_params(load_config(_write(tmp_path, "configuration.in", IN_CFG)))
    assert params.output == "demo"
    assert params.b == 0.05 and params.R == 0.1
    assert params.V0 == 2.0 and params.p == 0.5
    assert params.trivial is True
    assert params.a0 == 1.0e4       # "1e4" is a YAML string; coerced here
    assert (params.N1, params.N2) == (4, 6)


def test_overrides_win_over_file(tmp_path):
    cfg = load_config(_write(tmp_path, "c.yaml", YAML_CFG))
    apply_overrides(cfg, ["N1=40", "p = 0", "trivial=1", "output=out/x"])
    params = build_params(cfg)
    assert params.N1 == 40
    assert params.p == 0.0
    assert params.trivial is True
    assert params.output == "out/x"


def test_missing_key_is_reported(tmp_path):
    cfg = load_config(_write(tmp_path, "c.yaml", YAML_CFG.replace("N2: 20\n", "")))
    with pytest.raises(ValueError, match="N2"):
        build_params(cfg)


@pytest.mark.parametrize("override", ["b=0.2", "N1=0", "N2=2.5", "p=2", "trivial=maybe"])
def test_invalid_values_rejected(tmp_path, override):
    cfg = apply_overrides(load_config(_write(tmp_path, "c.yaml", YAML_CFG)), [override])
    with pytest.raises(ValueError):
        build_params(cfg)


def test_malformed_inputs(tmp_path):
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, "bad.yaml", "- 1\n- 2\n"))
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, "bad.in", "b 0.05\n"))
    cfg = load_config(_write(tmp_path, "c.yaml", YAML_CFG))
    with pytest.raises(ValueError):
        apply_overrides(cfg, ["N1"])


def test_write_tables_round_trip(tmp_path):
    params = RadialParams(b=1.0, R=2.0, V0=1.0, p=0.5, a0=3.0, N1=3, N2=4)
    out = solve_radial_poisson(params)
    paths = write_tables(out, tmp_path / "sub" / "res")
    names = [p.name for p in paths]
    assert names == ["res_phi.out", "res_Er_Dr.out", "res_rholib_divEr_divDr.out"]

    phi_tab = np.loadtxt(paths[0])
    assert phi_tab.shape == (8, 2)
    assert np.allclose(phi_tab, out.phi_table(), rtol=1e-14, atol=0.0)
    assert np.loadtxt(paths[1]).shape == (7, 3)
    assert np.loadtxt(paths[2]).shape == (6, 4)

    # 15 significant digits, whitespace separated
    first = paths[1].read_text().splitlines()[0].split(" ")
    assert len(first) == 3
    assert float(first[1]) == pytest.approx(out.fields.Er[0], rel=1e-14)


def test_metrics_json(tmp_path):
    params = RadialParams(b=1.0, R=2.0, V0=1.5, p=1.0, a0=0.0, N1=2, N2=2, trivial=True)
    out = solve_radial_poisson(params)
    metrics = summary_metrics(out)
    assert metrics["npoints"] == 5
    assert metrics["phi_outer"] == 1.5
    assert metrics["phi_interface"] == pytest.approx(out.phi[2])
    path = write_metrics(tmp_path / "m" / "metrics.json", metrics)
    assert json.loads(path.read_text()) == metrics
