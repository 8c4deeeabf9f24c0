import sys
from pathlib import Path

# Ensure package import for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from queuesim.events import EventLog
from queuesim.queues import MessageQueue
from queuesim.state import State


@pytest.fixture
def engine():
    """Return a factory for a fresh (queue, state, log) triple."""

    def _make(buffer_capacity=1, server_capacity=1, server_duration=10):
        return MessageQueue(), State(buffer_capacity, server_capacity, server_duration), EventLog()

    return _make
