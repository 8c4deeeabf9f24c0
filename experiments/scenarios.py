"""
experiments/scenarios.py

Holds scenario definitions (queue parameters and arrival schedules) to run
during experiments. Each scenario's overrides are merged on top of
config/baseline.yaml; an explicit ``arrivals.times`` list takes precedence
over the baseline's arrival grid.
"""

from __future__ import annotations

BASELINE = {
    "name": "baseline",
    "overrides": {},  # override config keys here per scenario
}

SINGLE_ITEM = {
    "name": "single_item",
    "overrides": {
        "queue": {
            "buffer_capacity": 1,
            "server_capacity": 1,
            "server_duration": 10,
        },
        "arrivals": {"times": [0]},
    },
}

NO_BUFFER = {
    "name": "no_buffer",
    "overrides": {
        "queue": {"buffer_capacity": 0},
        "arrivals": {"times": [0]},
    },
}

BURST = {
    "name": "burst",
    "overrides": {
        "queue": {
            "buffer_capacity": 3,
            "server_capacity": 1,
            "server_duration": 4,
        },
        "arrivals": {"times": [0, 0, 0, 0, 0, 12, 12]},
    },
}

SCENARIOS = [BASELINE, SINGLE_ITEM, NO_BUFFER, BURST]
