from .aggregate import minute_counts, total_minutes
from .parsing import (
    LogEntry,
    LogParseError,
    entries_to_frame,
    parse_line,
    parse_lines,
    read_log,
)
from .sleeps import Sleep, SleepLogError, reconstruct_sleeps, sleeps_to_frame
from .strategies import StrategyResult, most_frequent_minute, sleepiest_guard

__all__ = [
    "LogEntry",
    "LogParseError",
    "parse_line",
    "parse_lines",
    "read_log",
    "entries_to_frame",
    "Sleep",
    "SleepLogError",
    "reconstruct_sleeps",
    "sleeps_to_frame",
    "minute_counts",
    "total_minutes",
    "StrategyResult",
    "sleepiest_guard",
    "most_frequent_minute",
]
