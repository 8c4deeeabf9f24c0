# Copyright (c) 2025
# MIT License
# -----------------------------------------------------------------------------
# transitions.py
# -----------------------------------------------------------------------------
# Purpose:
#   The state machine: consume one event message, update the State in place,
#   and return the follow-up messages to schedule plus the events to log.
#
# Design notes:
#   - ARRIVE is lost when the buffer is full (blocking with loss).
#   - A SERVE that fails its guard is dropped, not rescheduled. Every
#     successful ARRIVE and every EXIT emits a fresh SERVE at the same
#     instant, which is what keeps waiting items moving. Any new transition
#     that can make can_serve() true must emit a SERVE as well.
#
# Usage:
#   follow_ups, events = handle_message(message, state)
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import List, Tuple
from .events import Event, EventKind
from .messages import EventMessage, MessageKind
from .state import State

Outcome = Tuple[List[EventMessage], List[Event]]


def _on_arrive(t: int, state: State) -> Outcome:
    if not state.can_buffer():
        return [], []
    state.inc_buffer()
    return [EventMessage.serve(t)], [Event(EventKind.INC_BUFFER, t)]


def _on_serve(t: int, state: State) -> Outcome:
    if not state.can_serve():
        return [], []
    state.dec_buffer()
    state.inc_server()
    return (
        [EventMessage.exit(t + state.server_duration)],
        [Event(EventKind.DEC_BUFFER, t), Event(EventKind.INC_SERVER, t)],
    )


def _on_exit(t: int, state: State) -> Outcome:
    state.dec_server()
    return [EventMessage.serve(t)], [Event(EventKind.DEC_SERVER, t)]


def handle_message(message: EventMessage, state: State) -> Outcome:
    """
    Apply one message to the state.

    Parameters
    ----------
    message : EventMessage
        The message popped from the queue.
    state : State
        Mutated in place. The clock is not touched here; step() sets it.

    Returns
    -------
    (list[EventMessage], list[Event])
        Follow-up messages in scheduling order and events in the order the
        state changes happened. Both are empty when a guard fails.
    """
    kind, t = message.kind, message.time
    if kind == MessageKind.ARRIVE:
        return _on_arrive(t, state)
    elif kind == MessageKind.SERVE:
        return _on_serve(t, state)
    elif kind == MessageKind.EXIT:
        return _on_exit(t, state)
    raise ValueError(f"unknown message kind: {kind!r}")
