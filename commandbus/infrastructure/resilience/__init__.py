"""Resilience utilities for handler collaborators."""

from .timeout import TimeoutHandler, with_timeout

__all__ = [
    "TimeoutHandler",
    "with_timeout",
]
