# -*- coding: utf-8 -*-
"""
Single-run workflow wiring config → mesh/assembly/solve → output tables.
"""
from __future__ import annotations
from pathlib import Path
from typing import Iterable, Optional

from radpoisson.io.config import load_config, apply_overrides, build_params
from radpoisson.io.results import write_tables, write_metrics, summary_metrics
from radpoisson.physics.poisson import RadialPoissonResult, solve_radial_poisson
from radpoisson.utils import logger


def run_from_config(
    cfg_path: Path,
    overrides: Iterable[str] = (),
    *,
    output: Optional[str] = None,
    metrics_path: Optional[Path] = None,
    png_path: Optional[Path] = None,
    debug: bool = False,
) -> RadialPoissonResult:
    cfg = apply_overrides(load_config(cfg_path), overrides)
    params = build_params(cfg)
    if output is not None:
        params = params.with_updates(output=str(output))

    result = solve_radial_poisson(params, debug=debug)

    for path in write_tables(result, params.output):
        logger.info(f"[run] wrote {path}")
    if metrics_path is not None:
        write_metrics(Path(metrics_path), summary_metrics(result))
        logger.info(f"[run] wrote {metrics_path}")
    if png_path is not None:
        # matplotlib is only needed when a figure is requested
        from radpoisson.postprocess.visualization import plot_summary
        import matplotlib.pyplot as plt

        fig, _ = plot_summary(result)
        fig.savefig(png_path, dpi=180)
        plt.close(fig)
        logger.info(f"[run] wrote {png_path}")
    return result
