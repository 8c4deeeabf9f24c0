# Copyright (c) 2025
# MIT License
# -----------------------------------------------------------------------------
# metrics.py
# -----------------------------------------------------------------------------
# Purpose:
#   Summarize a finished run from its event log: counts of admitted, lost and
#   served items, time-averaged occupancy, and server utilization.
#
# Design notes:
#   - Purely post-hoc; the engine never consults metrics while running.
#   - Occupancy is piecewise constant between events, so areas are
#     integrated the same way a busy-time counter would be.
#   - Summaries return JSON-serializable dicts for easy tabulation.
#
# Usage:
#   M = Metrics(state, log, arrivals=10); M.summary()
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import Dict, Any
from .events import EventKind, EventLog
from .state import State

_DELTAS = {
    EventKind.INC_BUFFER: (1, 0),
    EventKind.DEC_BUFFER: (-1, 0),
    EventKind.INC_SERVER: (0, 1),
    EventKind.DEC_SERVER: (0, -1),
}


class Metrics:
    def __init__(self, state: State, log: EventLog, arrivals: int):
        self.state = state
        self.log = log
        self.arrivals = arrivals
        self.end_time = state.time
        self.buffer_area = 0.0   # integral of buffer_count dt
        self.busy_time = 0.0     # integral of server_count dt
        self.max_buffer = 0
        self.max_server = 0
        self._integrate()

    def _integrate(self):
        buf = srv = 0
        last = 0
        for ev in self.log:
            dt = ev.time - last
            if dt > 0:
                self.buffer_area += buf * dt
                self.busy_time += srv * dt
                last = ev.time
            db, ds = _DELTAS[ev.kind]
            buf += db
            srv += ds
            self.max_buffer = max(self.max_buffer, buf)
            self.max_server = max(self.max_server, srv)
        # Tail segment up to the final clock value
        dt = self.end_time - last
        if dt > 0:
            self.buffer_area += buf * dt
            self.busy_time += srv * dt

    @property
    def admitted(self) -> int:
        return self.log.count(EventKind.INC_BUFFER)

    @property
    def discarded(self) -> int:
        return self.arrivals - self.admitted

    @property
    def served(self) -> int:
        return self.log.count(EventKind.INC_SERVER)

    @property
    def completed(self) -> int:
        return self.log.count(EventKind.DEC_SERVER)

    def avg_buffer(self) -> float:
        return self.buffer_area / self.end_time if self.end_time > 0 else 0.0

    def avg_server(self) -> float:
        return self.busy_time / self.end_time if self.end_time > 0 else 0.0

    def utilization(self) -> float:
        """Busy server-time over available server-time; 0 for an empty horizon."""
        denom = self.end_time * self.state.server_capacity
        return self.busy_time / denom if denom > 0 else 0.0

    def summary(self) -> Dict[str, Any]:
        return {
            "arrivals": self.arrivals,
            "admitted": self.admitted,
            "discarded": self.discarded,
            "served": self.served,
            "completed": self.completed,
            "end_time": self.end_time,
            "avg_buffer": self.avg_buffer(),
            "avg_server": self.avg_server(),
            "server_utilization": self.utilization(),
            "max_buffer": self.max_buffer,
            "max_server": self.max_server,
            "loss_rate": self.discarded / self.arrivals if self.arrivals else 0.0,
        }
