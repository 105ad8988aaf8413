# -*- coding: utf-8 -*-
"""
Parameter scan.

Re-runs the solver with one config key stepped through a list of values
(e.g. N1 for a convergence study of phi(0), or p to compare quadratures)
and collects the run KPIs in a pandas DataFrame.
"""
from __future__ import annotations
from pathlib import Path
from typing import Iterable, Sequence

import pandas as pd

from radpoisson.io.config import RunConfig, build_params, parse_scalar
from radpoisson.io.results import summary_metrics
from radpoisson.physics.poisson import solve_radial_poisson
from radpoisson.utils import logger


def run_sweep(cfg: RunConfig, key: str, values: Sequence) -> pd.DataFrame:
    base = dict(cfg.raw)
    logger.info(f"[sweep] base={cfg.path}, {key} over {len(values)} values")

    rows = []
    for value in values:
        params = build_params(RunConfig(raw={**base, key: value}, path=cfg.path))
        result = solve_radial_poisson(params)
        row = {key: value, "N1": params.N1, "N2": params.N2}
        row.update(summary_metrics(result))
        rows.append(row)
        logger.debug(f"[sweep] {key}={value}: phi(0)={row['phi_axis']:.15g}")
    return pd.DataFrame(rows)


def write_sweep_csv(df: pd.DataFrame, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False, float_format="%.15g")
    return path


def parse_values(tokens: Iterable[str]) -> list:
    """Sweep values from CLI tokens, typed like config values."""
    return [parse_scalar(str(t)) for t in tokens]
