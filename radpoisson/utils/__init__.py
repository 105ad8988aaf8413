# radpoisson/utils/__init__.py
from __future__ import annotations
from .logger import debug, info, warn, error, set_debug

__all__ = ["debug", "info", "warn", "error", "set_debug"]
