# radpoisson/main.py
"""
radpoisson main entrypoint.

Default subcommand: run
Usage examples:
    python -m radpoisson
    python -m radpoisson run configuration.yaml
    python -m radpoisson run configuration.in N1=200 p=0 --png summary.png
    python -m radpoisson sweep configuration.yaml --key N1 --values 10 20 40 80
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
import argparse
import sys

from .io.config import load_config, apply_overrides
from .utils import logger
from .workflows.run import run_from_config
from .workflows.sweep import run_sweep, write_sweep_csv, parse_values

__all__ = ["main"]

DEFAULT_CONFIG = "configuration.yaml"


# ------------------------------ run subcommand ------------------------------


@dataclass(slots=True)
class _RunArgs:
    config: Path
    overrides: List[str] = field(default_factory=list)
    output: Optional[str] = None
    png_out: Optional[Path] = None
    metrics_out: Optional[Path] = None
    debug: bool = False


def _add_run_subparser(
    subparsers: argparse._SubParsersAction,
) -> argparse.ArgumentParser:
    p = subparsers.add_parser(
        "run", help="Solve one configuration and write the three result tables"
    )
    p.add_argument(
        "config", nargs="?", default=DEFAULT_CONFIG,
        help="Config file (.yaml/.yml or key = value text)",
    )
    p.add_argument(
        "overrides", nargs="*", metavar="key=value",
        help="Config overrides, e.g. N1=200 p=0",
    )
    p.add_argument("--output", default=None, help="Output prefix (overrides 'output')")
    p.add_argument("--png", default=None, help="Write a summary figure to this PNG")
    p.add_argument("--metrics", default=None, help="Write run KPIs to this JSON file")
    p.add_argument("--debug", action="store_true", help="Verbose solver prints")
    p.set_defaults(cmd="run")
    return p


def _run(args: _RunArgs) -> None:
    result = run_from_config(
        args.config,
        args.overrides,
        output=args.output,
        metrics_path=args.metrics_out,
        png_path=args.png_out,
        debug=args.debug,
    )
    print(
        f"[ok] phi(0)={result.phi[0]:.15g}  phi(b)={result.phi[result.mesh.N1]:.15g}  "
        f"npoints={result.mesh.npoints}"
    )


# ----------------------------- sweep subcommand -----------------------------


@dataclass(slots=True)
class _SweepArgs:
    config: Path
    key: str
    values: list
    overrides: List[str] = field(default_factory=list)
    csv_out: Path = Path("sweep.csv")
    debug: bool = False


def _add_sweep_subparser(
    subparsers: argparse._SubParsersAction,
) -> argparse.ArgumentParser:
    p = subparsers.add_parser(
        "sweep", help="Scan one config key and tabulate the run KPIs"
    )
    p.add_argument("config", help="Base config file")
    p.add_argument(
        "overrides", nargs="*", metavar="key=value",
        help="Overrides applied to the base config before scanning",
    )
    p.add_argument("--key", required=True, help="Config key to scan, e.g. N1")
    p.add_argument("--values", nargs="+", required=True, help="Values of the key")
    p.add_argument("--csv", default="sweep.csv", help="CSV output path")
    p.add_argument("--debug", action="store_true", help="Per-run prints")
    p.set_defaults(cmd="sweep")
    return p


def _sweep(args: _SweepArgs) -> None:
    cfg = apply_overrides(load_config(args.config), args.overrides)
    df = run_sweep(cfg, args.key, args.values)
    out = write_sweep_csv(df, args.csv_out)
    print(f"[ok] wrote {out}  ({len(df)} runs)")


# --------------------------------- main() ------------------------------------


def _run_args_from(ns: argparse.Namespace) -> _RunArgs:
    return _RunArgs(
        config=Path(ns.config),
        overrides=list(ns.overrides),
        output=ns.output,
        png_out=Path(ns.png) if ns.png else None,
        metrics_out=Path(ns.metrics) if ns.metrics else None,
        debug=bool(ns.debug),
    )


def main(argv: Optional[List[str]] = None) -> None:
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = argparse.ArgumentParser(
        description="radpoisson — FEM Poisson solver for a radial core/shell dielectric"
    )
    sub = parser.add_subparsers(dest="cmd")

    run_parser = _add_run_subparser(sub)
    _add_sweep_subparser(sub)

    # If no subcommand given, default to 'run' on the default config
    if not argv:
        ns = run_parser.parse_args([])
    else:
        ns = parser.parse_args(argv)

    logger.set_debug(bool(getattr(ns, "debug", False)))
    try:
        if getattr(ns, "cmd", "run") == "run":
            _run(_run_args_from(ns))
            return
        if ns.cmd == "sweep":
            _sweep(
                _SweepArgs(
                    config=Path(ns.config),
                    key=str(ns.key),
                    values=parse_values(ns.values),
                    overrides=list(ns.overrides),
                    csv_out=Path(ns.csv),
                    debug=bool(ns.debug),
                )
            )
            return
    except (ValueError, OSError) as exc:
        logger.error(str(exc))
        parser.exit(2)

    parser.error("Unknown command (try: run, sweep)")


if __name__ == "__main__":
    main()
