# Copyright (c) 2025
# MIT License
# -----------------------------------------------------------------------------
# simulation.py
# -----------------------------------------------------------------------------
# Purpose:
#   Advance a run one message at a time (step), loop until the queue drains
#   (run), and simulate a whole configured run end to end (run_from_config).
#
# Design notes:
#   - The clock jumps to the popped message's time even when its guard
#     fails, so a no-op SERVE still advances time.
#   - No rendering here; callers observe through on_step or the returned
#     trajectory and log. Only debug/info log records are emitted.
#
# Usage:
#   from queuesim.simulation import run_from_config
#   results = run_from_config(cfg)
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
from typing import Callable, Dict, List, Optional, Tuple
from .arrivals import schedule_arrivals
from .config import queue_params
from .events import EventLog
from .metrics import Metrics
from .queues import MessageQueue
from .state import State
from .transitions import handle_message

log = logging.getLogger(__name__)

Snapshot = Tuple[int, int, int]


def step(queue: MessageQueue, state: State, event_log: EventLog
         ) -> Optional[Tuple[MessageQueue, State, EventLog]]:
    """Handle the next message; return None once the queue is empty."""
    message = queue.pop()
    if message is None:
        return None
    follow_ups, events = handle_message(message, state)
    state.set_time(message.time)
    for m in follow_ups:
        queue.push(m)
    for e in events:
        event_log.push(e)
    log.debug("t=%d %s -> buffer=%d server=%d (+%d msgs, +%d events)",
              message.time, message.kind.value, state.buffer_count,
              state.server_count, len(follow_ups), len(events))
    return queue, state, event_log


def run(queue: MessageQueue, state: State, event_log: EventLog,
        on_step: Optional[Callable[[State], None]] = None) -> List[Snapshot]:
    """
    Call step() until the queue drains.

    Parameters
    ----------
    on_step : callable, optional
        Invoked with the state after every step (e.g. to print a table row).

    Returns
    -------
    list[tuple[int, int, int]]
        (time, buffer_count, server_count) after each step.
    """
    trajectory: List[Snapshot] = []
    while step(queue, state, event_log) is not None:
        trajectory.append(state.snapshot())
        if on_step is not None:
            on_step(state)
    log.info("run finished at t=%d after %d steps, %d events",
             state.time, len(trajectory), event_log.size)
    return trajectory


def run_from_config(cfg: Dict, on_step: Optional[Callable[[State], None]] = None) -> Dict:
    buffer_capacity, server_capacity, server_duration = queue_params(cfg)
    state = State(buffer_capacity, server_capacity, server_duration)
    queue = MessageQueue()
    event_log = EventLog()

    # Seed exogenous arrivals then run
    n_arrivals = schedule_arrivals(queue, cfg)
    log.info("seeded %d arrivals into %r", n_arrivals, state)
    trajectory = run(queue, state, event_log, on_step=on_step)

    results = Metrics(state, event_log, n_arrivals).summary()
    results["trajectory"] = trajectory
    results["events"] = [e.as_tuple() for e in event_log]
    results["final_state"] = state.snapshot()
    return results
