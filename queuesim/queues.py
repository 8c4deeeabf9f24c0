# Copyright (c) 2025
# MIT License
# -----------------------------------------------------------------------------
# queues.py
# -----------------------------------------------------------------------------
# Purpose:
#   The future event list: a min-heap of pending event messages that always
#   yields the earliest one first.
#
# Design notes:
#   - Heap entries are (time, seq, message). seq is a monotonically
#     increasing insertion counter, so messages sharing a time come out in
#     the order they were pushed and the message itself is never compared.
#   - push/pop are O(log n); peek is O(1).
#
# Usage:
#   from queuesim.queues import MessageQueue
#   q = MessageQueue(); q.push(EventMessage.arrive(0)); q.pop()
# -----------------------------------------------------------------------------

from __future__ import annotations
import heapq, itertools
from typing import Iterable, List, Optional, Tuple
from .messages import EventMessage


class MessageQueue:
    """Time-ordered priority queue of event messages with FIFO tie-break.

    Attributes
    ----------
    size : int
        Number of pending messages.
    """
    def __init__(self, messages: Iterable[EventMessage] = ()):
        self._heap: List[Tuple[int, int, EventMessage]] = []
        self._seq = itertools.count()
        self.extend(messages)

    def push(self, message: EventMessage):
        heapq.heappush(self._heap, (message.time, next(self._seq), message))

    def extend(self, messages: Iterable[EventMessage]):
        """Push each message in iteration order."""
        for m in messages:
            self.push(m)

    def pop(self) -> Optional[EventMessage]:
        """Remove and return the earliest message, or None if the queue is empty."""
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]

    def peek(self) -> Optional[EventMessage]:
        """Return the message pop() would return, without removing it."""
        if not self._heap:
            return None
        return self._heap[0][2]

    @property
    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"MessageQueue(size={self.size}, next={self.peek()!r})"
