# Copyright (c) 2025
# MIT License
# -----------------------------------------------------------------------------
# messages.py
# -----------------------------------------------------------------------------
# Purpose:
#   Event messages: imperative statements about something that should happen
#   at a given simulated time (an item arrives, a server is called, an item
#   exits).
#
# Design notes:
#   - Time is a non-negative int. Ints sort exactly, so no NaN handling.
#   - Messages are frozen; the queue owns ordering, not the message.
#   - Times are validated on construction (ConfigError), so a bad time never
#     reaches step() or the State clock.
#
# Usage:
#   from queuesim.messages import EventMessage, MessageKind
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from .errors import check_count

Time = int


class MessageKind(str, Enum):
    ARRIVE = "arrive"   # an item presents itself at the buffer
    SERVE = "serve"     # call the next buffered item into service
    EXIT = "exit"       # an in-service item finishes and frees a server


@dataclass(frozen=True)
class EventMessage:
    kind: MessageKind
    time: Time

    def __post_init__(self):
        # reject bad times before the message can reach the queue or a State
        check_count("time", self.time)

    @classmethod
    def arrive(cls, time: Time) -> "EventMessage":
        return cls(MessageKind.ARRIVE, time)

    @classmethod
    def serve(cls, time: Time) -> "EventMessage":
        return cls(MessageKind.SERVE, time)

    @classmethod
    def exit(cls, time: Time) -> "EventMessage":
        return cls(MessageKind.EXIT, time)
