# Copyright (c) 2025
# MIT License
# -----------------------------------------------------------------------------
# events.py
# -----------------------------------------------------------------------------
# Purpose:
#   Events are declarative facts about something that already happened to
#   the state; the EventLog keeps them in creation order for post-hoc
#   inspection (rendering, metrics). The engine never reads them back.
#
# Design notes:
#   - Event kinds mirror the State mutators rather than the message kinds;
#     one handled message can produce several events.
#
# Usage:
#   from queuesim.events import Event, EventKind, EventLog
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple
from .messages import Time


class EventKind(str, Enum):
    INC_BUFFER = "inc_buffer"
    DEC_BUFFER = "dec_buffer"
    INC_SERVER = "inc_server"
    DEC_SERVER = "dec_server"


@dataclass(frozen=True)
class Event:
    kind: EventKind
    time: Time

    def as_tuple(self) -> Tuple[Time, str]:
        return (self.time, self.kind.value)


class EventLog:
    """Append-only record of events."""
    def __init__(self):
        self._contents: List[Event] = []

    def push(self, event: Event):
        self._contents.append(event)

    @property
    def contents(self) -> Tuple[Event, ...]:
        return tuple(self._contents)

    @property
    def size(self) -> int:
        return len(self._contents)

    def count(self, kind: EventKind) -> int:
        return sum(1 for e in self._contents if e.kind == kind)

    def __len__(self) -> int:
        return len(self._contents)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._contents)
