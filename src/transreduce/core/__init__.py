"""Errors and timing constants shared across transreduce."""

from transreduce.core.errors import EmptySequenceError, TransformReduceError
from transreduce.core.timings import (
    PERIOD,
    TOTAL_DURATION,
    PollingSchedule,
    polling_ticks,
)

__all__ = [
    "EmptySequenceError",
    "TransformReduceError",
    "PERIOD",
    "TOTAL_DURATION",
    "PollingSchedule",
    "polling_ticks",
]
