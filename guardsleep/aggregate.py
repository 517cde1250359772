import numpy as np
import pandas as pd

from .constants import MINUTES_PER_HOUR
from .sleeps import Sleep


def minute_counts(sleeps: list[Sleep]) -> pd.DataFrame:
    """Count how often each guard is asleep during each minute of the hour.

    Returns a frame indexed by `guard_id` (ascending) with one integer column
    per minute `0..59`. Guards without any sleep are absent.
    """
    guard_ids = sorted({s.guard_id for s in sleeps})
    row_of = {guard_id: i for i, guard_id in enumerate(guard_ids)}
    counts = np.zeros((len(guard_ids), MINUTES_PER_HOUR), dtype=np.int64)
    for s in sleeps:
        counts[row_of[s.guard_id], s.start : s.end] += 1
    return pd.DataFrame(
        counts,
        index=pd.Index(guard_ids, name="guard_id", dtype="int64"),
        columns=pd.RangeIndex(MINUTES_PER_HOUR, name="minute"),
    )


def total_minutes(sleeps: list[Sleep]) -> pd.Series:
    """Total minutes asleep per guard, indexed by `guard_id` (ascending)."""
    totals = {}
    for s in sleeps:
        totals[s.guard_id] = totals.get(s.guard_id, 0) + s.duration
    guard_ids = sorted(totals)
    return pd.Series(
        [totals[g] for g in guard_ids],
        index=pd.Index(guard_ids, name="guard_id", dtype="int64"),
        name="total_minutes",
        dtype="int64",
    )
