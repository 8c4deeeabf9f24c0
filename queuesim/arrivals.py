# Copyright (c) 2025
# MIT License
# -----------------------------------------------------------------------------
# arrivals.py
# -----------------------------------------------------------------------------
# Purpose:
#   Turn the ``arrivals`` config section into the initial batch of ARRIVE
#   messages that seeds a run.
#
# Design notes:
#   - Two deterministic forms: an explicit ``times`` list, or a
#     ``start``/``end``/``interval`` grid (end exclusive). No random draws.
#   - Times are pushed in the order given, so duplicate times keep their
#     listed order in the queue.
#
# Usage:
#   schedule_arrivals(queue, cfg)
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import Dict, Iterable, List
from .errors import ConfigError, check_count
from .messages import EventMessage, Time


def arrival_times(cfg: Dict) -> List[Time]:
    """
    Resolve the configured arrival instants.

    Parameters
    ----------
    cfg : dict
        Parsed config; only the ``arrivals`` section is read. A missing
        section means no arrivals.

    Returns
    -------
    list[int]
        Arrival times in the order they should be seeded.
    """
    arr = cfg.get("arrivals") or {}
    if not isinstance(arr, dict):
        raise ConfigError("'arrivals' must be a mapping")
    if "times" in arr:
        times = arr["times"] or []
        if not isinstance(times, list):
            raise ConfigError("arrivals.times must be a list")
        return [check_count("arrival time", t) for t in times]
    if "end" not in arr:
        return []
    start = check_count("arrivals.start", arr.get("start", 0))
    end = check_count("arrivals.end", arr["end"])
    step = check_count("arrivals.interval", arr.get("interval", 1))
    if step == 0:
        raise ConfigError("arrivals.interval must be positive")
    return list(range(start, end, step))


def seed_arrivals(queue, times: Iterable[Time]) -> int:
    """Push one ARRIVE per time onto queue; return how many were pushed."""
    n = 0
    for t in times:
        queue.push(EventMessage.arrive(check_count("arrival time", t)))
        n += 1
    return n


def schedule_arrivals(queue, cfg: Dict) -> int:
    return seed_arrivals(queue, arrival_times(cfg))
