# Copyright (c) 2025
# MIT License
# -----------------------------------------------------------------------------
# state.py
# -----------------------------------------------------------------------------
# Purpose:
#   The system state of a single buffered queue: clock, buffer and server
#   occupancy, plus the fixed buffer/server capacities and service duration.
#
# Design notes:
#   - Capacities and duration are read-only after construction.
#   - Counts only change through the inc_*/dec_* mutators, which the
#     transition function calls after checking can_buffer()/can_serve().
#     Over/underflow there is an engine bug, so the mutators assert instead
#     of raising a user-facing error.
#
# Usage:
#   from queuesim.state import State
#   state = State(buffer_capacity=5, server_capacity=2, server_duration=10)
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import Tuple
from .errors import check_count
from .messages import Time


class State:
    """Mutable state of one simulation run.

    Parameters
    ----------
    buffer_capacity : int
        Maximum number of items waiting in the buffer (0 disables buffering,
        so every arrival is lost).
    server_capacity : int
        Number of parallel servers.
    server_duration : int
        Fixed service time added to the start-of-service instant.
    """
    __slots__ = ("time", "buffer_count", "server_count",
                 "_buffer_capacity", "_server_capacity", "_server_duration")

    def __init__(self, buffer_capacity: int, server_capacity: int, server_duration: int):
        self._buffer_capacity = check_count("buffer_capacity", buffer_capacity)
        self._server_capacity = check_count("server_capacity", server_capacity)
        self._server_duration = check_count("server_duration", server_duration)
        self.time: Time = 0
        self.buffer_count: int = 0
        self.server_count: int = 0

    @property
    def buffer_capacity(self) -> int:
        return self._buffer_capacity

    @property
    def server_capacity(self) -> int:
        return self._server_capacity

    @property
    def server_duration(self) -> int:
        return self._server_duration

    # Guards
    def can_buffer(self) -> bool:
        return self.buffer_count < self._buffer_capacity

    def can_serve(self) -> bool:
        """The buffer must be occupied and a server must be free."""
        return self.buffer_count > 0 and self.server_count < self._server_capacity

    # Mutators
    def set_time(self, time: Time):
        assert time >= self.time, f"clock moved backward: {self.time} -> {time}"
        self.time = time

    def inc_buffer(self):
        assert self.buffer_count < self._buffer_capacity, "buffer overflow"
        self.buffer_count += 1

    def dec_buffer(self):
        assert self.buffer_count > 0, "buffer underflow"
        self.buffer_count -= 1

    def inc_server(self):
        assert self.server_count < self._server_capacity, "server overflow"
        self.server_count += 1

    def dec_server(self):
        assert self.server_count > 0, "server underflow"
        self.server_count -= 1

    def snapshot(self) -> Tuple[Time, int, int]:
        return (self.time, self.buffer_count, self.server_count)

    def __repr__(self) -> str:
        return (
            f"State(time={self.time}, buffer={self.buffer_count}/{self._buffer_capacity}, "
            f"server={self.server_count}/{self._server_capacity}, duration={self._server_duration})"
        )
