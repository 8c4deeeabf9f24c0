"""
queuesim package initializer.

This package contains the discrete-event engine (message queue, state,
transition function, event log and step driver), plus the config loader,
arrival scheduler, and metric collection used to simulate a single buffered
queue feeding a bank of parallel servers.
"""
__all__ = [
    "config", "errors", "messages", "queues", "state", "events",
    "transitions", "arrivals", "metrics", "simulation",
]
