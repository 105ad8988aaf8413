# radpoisson/io/config.py
# -*- coding: utf-8 -*-
"""
Config file → RadialParams helpers.

Two on-disk formats are accepted.

YAML (``.yaml`` / ``.yml``):

    output: run1
    b: 0.05
    R: 0.1
    V0: 0.0
    p: 1.0
    trivial: false
    a0: 1.0e4
    N1: 50
    N2: 50

Classic ``key = value`` text (``configuration.in`` and any other suffix),
one assignment per line; ``//``, ``#`` and ``%`` start a comment:

    b  = 0.05     // core radius
    N1 = 50

Command-line overrides use the same ``key=value`` syntax and win over the
file, e.g. ``python -m radpoisson run configuration.in N1=200 p=0``.
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

import yaml

from radpoisson.models.params import RadialParams

__all__ = ["RunConfig", "load_config", "apply_overrides", "build_params", "parse_scalar"]

_REQUIRED = ("b", "R", "V0", "p", "a0", "N1", "N2")
_COMMENT_MARKERS = ("//", "#", "%")


@dataclass
class RunConfig:
    raw: dict
    path: Path


def load_config(path: Path) -> RunConfig:
    path = Path(path)
    text = path.read_text()
    if path.suffix.lower() in (".yaml", ".yml"):
        data = yaml.safe_load(text)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("Top-level YAML must be a mapping")
    else:
        data = _parse_key_values(text.splitlines(), source=str(path))
    return RunConfig(raw=dict(data), path=path)


def apply_overrides(cfg: RunConfig, overrides: Iterable[str]) -> RunConfig:
    """Apply ``key=value`` tokens in order (in place; also returned)."""
    for token in overrides:
        key, value = _split_assignment(token, source="override")
        cfg.raw[key] = value
    return cfg


def build_params(cfg: RunConfig) -> RadialParams:
    raw = cfg.raw
    _validate_minimum(raw)
    try:
        return RadialParams(
            output=str(raw.get("output", "output")),
            b=float(raw["b"]),
            R=float(raw["R"]),
            V0=float(raw["V0"]),
            p=float(raw["p"]),
            trivial=_as_bool(raw.get("trivial", False)),
            a0=float(raw["a0"]),
            N1=_as_int(raw["N1"], "N1"),
            N2=_as_int(raw["N2"], "N2"),
        )
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{cfg.path}: {exc}") from exc


# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------

def _strip_comment(line: str) -> str:
    cut = len(line)
    for marker in _COMMENT_MARKERS:
        i = line.find(marker)
        if i != -1:
            cut = min(cut, i)
    return line[:cut].strip()


def _split_assignment(text: str, *, source: str) -> tuple[str, Any]:
    if "=" not in text:
        raise ValueError(f"{source}: expected 'key=value', got {text!r}")
    key, value = text.split("=", 1)
    key = key.strip()
    if not key:
        raise ValueError(f"{source}: empty key in {text!r}")
    return key, parse_scalar(value.strip())


def _parse_key_values(lines: Iterable[str], *, source: str) -> dict:
    data: dict = {}
    for lineno, line in enumerate(lines, start=1):
        body = _strip_comment(line)
        if not body:
            continue
        key, value = _split_assignment(body, source=f"{source}:{lineno}")
        data[key] = value
    return data


def parse_scalar(text: str) -> Any:
    # YAML 1.1 scalars ("true", "50", "0.05"); anything else stays a string
    try:
        value = yaml.safe_load(text) if text else ""
    except yaml.YAMLError:
        return text
    if isinstance(value, (dict, list)):
        return text
    return value


def _as_bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return v != 0
    s = str(v).strip().lower()
    if s in ("true", "yes", "on", "1"):
        return True
    if s in ("false", "no", "off", "0", ""):
        return False
    raise ValueError(f"cannot interpret {v!r} as a boolean")


def _as_int(v: Any, name: str) -> int:
    f = float(v)
    if not f.is_integer():
        raise ValueError(f"{name} must be an integer, got {v!r}")
    return int(f)


def _validate_minimum(raw: dict) -> None:
    for key in _REQUIRED:
        if key not in raw:
            raise ValueError(f"Missing config key: {key}")
