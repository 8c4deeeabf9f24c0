# Copyright (c) 2025
# MIT License
# -----------------------------------------------------------------------------
# config.py
# -----------------------------------------------------------------------------
# Purpose:
#   Load the YAML run configuration, merge scenario overrides on top of it,
#   and validate the queue parameters the engine is built from.
#
# Design notes:
#   - Bad user input raises ConfigError (a ValueError). Engine invariant
#     violations are assertions elsewhere and never surface through here.
#   - Times and durations are plain ints; floats and bools are rejected so
#     ordering stays exact.
#
# Usage:
#   from queuesim.config import load_cfg, apply_overrides, queue_params
# -----------------------------------------------------------------------------

from __future__ import annotations
import copy, os
from typing import Dict, Optional, Tuple
import yaml
from .errors import ConfigError, check_count

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_CFG = os.path.join(ROOT, "config", "baseline.yaml")


def load_cfg(path: Optional[str] = None) -> Dict:
    with open(path or DEFAULT_CFG, "r") as f:
        cfg = yaml.safe_load(f)
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ConfigError(f"top level of {path or DEFAULT_CFG} must be a mapping")
    return cfg


def apply_overrides(cfg: Dict, overrides: Dict) -> Dict:
    """Apply scenario overrides (recursive merge) on top of the base config."""
    new = copy.deepcopy(cfg)

    def _merge(dst: Dict, src: Dict):
        for key, val in src.items():
            if isinstance(val, dict) and isinstance(dst.get(key), dict):
                _merge(dst[key], val)
            else:
                dst[key] = copy.deepcopy(val)

    _merge(new, overrides)
    return new


def queue_params(cfg: Dict) -> Tuple[int, int, int]:
    """
    Extract (buffer_capacity, server_capacity, server_duration) from the
    ``queue`` section of a parsed config.

    Raises
    ------
    ConfigError
        If the section or any key is missing, or a value is not a
        non-negative integer.
    """
    q = cfg.get("queue")
    if not isinstance(q, dict):
        raise ConfigError("config is missing the 'queue' section")
    out = []
    for key in ("buffer_capacity", "server_capacity", "server_duration"):
        if key not in q:
            raise ConfigError(f"queue.{key} is required")
        out.append(check_count(f"queue.{key}", q[key]))
    return out[0], out[1], out[2]
