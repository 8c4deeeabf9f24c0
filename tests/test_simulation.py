import pytest

from queuesim.config import ConfigError
from queuesim.events import Event, EventKind
from queuesim.messages import EventMessage, MessageKind
from queuesim.arrivals import seed_arrivals
from queuesim.simulation import run, run_from_config, step


def test_one_message_one_step(engine):
    q, s, log = engine(1, 1, 10)
    q.push(EventMessage.arrive(0))
    out = step(q, s, log)
    assert out is not None
    q, s, log = out
    assert s.buffer_count == 1
    assert q.peek().kind == MessageKind.SERVE
    assert log.size == 1


def test_step_on_empty_queue_returns_none(engine):
    q, s, log = engine()
    assert step(q, s, log) is None
    assert s.snapshot() == (0, 0, 0)


def test_failed_guard_still_advances_clock(engine):
    q, s, log = engine(0, 1, 10)
    q.push(EventMessage.arrive(8))
    step(q, s, log)
    assert s.time == 8
    assert log.size == 0


def test_single_item_run(engine):
    q, s, log = engine(1, 1, 10)
    seed_arrivals(q, [0])
    trajectory = run(q, s, log)
    assert list(log) == [
        Event(EventKind.INC_BUFFER, 0),
        Event(EventKind.DEC_BUFFER, 0),
        Event(EventKind.INC_SERVER, 0),
        Event(EventKind.DEC_SERVER, 10),
    ]
    assert trajectory == [(0, 1, 0), (0, 0, 1), (10, 0, 0), (10, 0, 0)]
    assert q.size == 0


def test_zero_buffer_discards_arrival(engine):
    q, s, log = engine(0, 1, 10)
    seed_arrivals(q, [0])
    trajectory = run(q, s, log)
    assert log.size == 0
    assert s.buffer_count == 0
    # the ARRIVE step only; a discarded arrival schedules nothing
    assert trajectory == [(0, 0, 0)]
    assert q.size == 0


def test_buffered_burst_run(engine):
    q, s, log = engine(5, 2, 10)
    seed_arrivals(q, range(10))
    trajectory = run(q, s, log)
    assert (s.buffer_count, s.server_count) == (0, 0)
    served = log.count(EventKind.INC_SERVER)
    assert served == log.count(EventKind.DEC_SERVER)
    assert served == log.count(EventKind.INC_BUFFER)
    # two start at once, five wait, the last three find the buffer full
    assert served == 7
    assert s.time == 40
    assert len(trajectory) == 31


def test_invariants_and_monotonic_time(engine):
    q, s, log = engine(3, 2, 7)
    seed_arrivals(q, [0, 0, 0, 0, 0, 0, 1, 5, 5, 14, 14, 30])
    last = 0
    for t, buf, srv in run(q, s, log):
        assert 0 <= buf <= 3
        assert 0 <= srv <= 2
        assert t >= last
        last = t


def test_every_admitted_item_is_served(engine):
    q, s, log = engine(10, 1, 3)
    seed_arrivals(q, [0, 0, 0, 2, 2, 9])
    run(q, s, log)
    admitted = log.count(EventKind.INC_BUFFER)
    assert admitted == 6
    assert log.count(EventKind.DEC_SERVER) == admitted


def test_zero_duration_terminates(engine):
    q, s, log = engine(3, 1, 0)
    seed_arrivals(q, [0, 0, 0])
    run(q, s, log)
    assert s.snapshot() == (0, 0, 0)
    assert log.count(EventKind.DEC_SERVER) == 3


def test_zero_servers_leaves_items_buffered(engine):
    q, s, log = engine(2, 0, 5)
    seed_arrivals(q, [0, 1, 2])
    run(q, s, log)
    assert (s.buffer_count, s.server_count) == (2, 0)
    assert q.size == 0


def test_runs_are_reproducible(engine):
    results = []
    for _ in range(2):
        q, s, log = engine(2, 2, 5)
        seed_arrivals(q, [4, 0, 0, 3, 3, 3, 11])
        results.append((run(q, s, log), log.contents))
    assert results[0] == results[1]


def test_on_step_sees_every_state(engine):
    q, s, log = engine(1, 1, 10)
    seed_arrivals(q, [0])
    seen = []
    run(q, s, log, on_step=lambda st: seen.append(st.snapshot()))
    assert seen == [(0, 1, 0), (0, 0, 1), (10, 0, 0), (10, 0, 0)]


def test_run_from_config():
    cfg = {
        "queue": {"buffer_capacity": 1, "server_capacity": 1, "server_duration": 10},
        "arrivals": {"times": [0]},
    }
    res = run_from_config(cfg)
    assert res["events"] == [(0, "inc_buffer"), (0, "dec_buffer"), (0, "inc_server"), (10, "dec_server")]
    assert res["final_state"] == (10, 0, 0)
    assert res["served"] == 1
    assert res["discarded"] == 0


def test_bad_time_never_reaches_the_state(engine):
    q, s, log = engine(1, 1, 10)
    for bad in (-1, 0.5):
        with pytest.raises(ConfigError):
            q.push(EventMessage.arrive(bad))
    assert q.size == 0
    assert step(q, s, log) is None
    assert s.snapshot() == (0, 0, 0)
    assert log.size == 0


def test_engine_imports_without_yaml(monkeypatch):
    import importlib
    import sys

    for name in [m for m in sys.modules if m == "queuesim" or m.startswith("queuesim.")]:
        monkeypatch.delitem(sys.modules, name)
    # a None entry makes "import yaml" fail
    monkeypatch.setitem(sys.modules, "yaml", None)
    transitions = importlib.import_module("queuesim.transitions")
    state = importlib.import_module("queuesim.state").State(1, 1, 1)
    msgs, _ = transitions.handle_message(transitions.EventMessage.arrive(0), state)
    assert state.buffer_count == 1
    assert len(msgs) == 1
