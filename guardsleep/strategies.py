import logging
from dataclasses import dataclass

import numpy as np

from .aggregate import minute_counts, total_minutes
from .sleeps import Sleep, SleepLogError

logger = logging.getLogger(__name__)


@dataclass
class StrategyResult:
    guard_id: int
    minute: int
    count: int
    total_minutes: int

    @property
    def answer(self) -> int:
        return self.guard_id * self.minute


def sleepiest_guard(sleeps: list[Sleep]) -> StrategyResult:
    """Guard with the most minutes asleep, and the minute they sleep most.

    Ties go to the lowest guard id, then the lowest minute.
    """
    if not sleeps:
        raise SleepLogError("No sleep recorded, cannot find sleepiest guard!")
    totals = total_minutes(sleeps)
    counts = minute_counts(sleeps)

    guard_id = int(totals.idxmax())
    minute = int(counts.loc[guard_id].idxmax())
    result = StrategyResult(
        guard_id=guard_id,
        minute=minute,
        count=int(counts.loc[guard_id, minute]),
        total_minutes=int(totals[guard_id]),
    )
    logger.info(f"Sleepiest guard: {result}")
    return result


def most_frequent_minute(sleeps: list[Sleep]) -> StrategyResult:
    """(guard, minute) pair asleep most often across the whole log.

    Ties go to the lowest guard id, then the lowest minute.
    """
    if not sleeps:
        raise SleepLogError("No sleep recorded, cannot find sleepiest minute!")
    totals = total_minutes(sleeps)
    counts = minute_counts(sleeps)

    # row-major argmax picks the first maximum: lowest guard, then lowest minute
    row, minute = np.unravel_index(np.argmax(counts.to_numpy()), counts.shape)
    guard_id = int(counts.index[row])
    result = StrategyResult(
        guard_id=guard_id,
        minute=int(minute),
        count=int(counts.iat[row, minute]),
        total_minutes=int(totals[guard_id]),
    )
    logger.info(f"Most frequent minute: {result}")
    return result
