# Copyright (c) 2025
# MIT License
# -----------------------------------------------------------------------------
# errors.py
# -----------------------------------------------------------------------------
# Purpose:
#   User-input errors and the integer check shared by the config loader, the
#   State constructor, and event messages.
#
# Design notes:
#   - No third-party imports; the engine modules depend on this file, so they
#     stay importable without the YAML config layer.
#
# Usage:
#   from queuesim.errors import ConfigError, check_count
# -----------------------------------------------------------------------------

from __future__ import annotations


class ConfigError(ValueError):
    """Raised when a config value or constructor argument is unusable."""


def check_count(name: str, value) -> int:
    """Return value if it is a non-negative int, else raise ConfigError."""
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ConfigError(f"{name} must be non-negative, got {value}")
    return value
