import logging
from dataclasses import dataclass

import pandas as pd

from .parsing import LogEntry

logger = logging.getLogger(__name__)


class SleepLogError(ValueError):
    pass


@dataclass(frozen=True)
class Sleep:
    guard_id: int
    start: int
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start


def reconstruct_sleeps(entries: list[LogEntry]) -> list[Sleep]:
    """Turn chronologically sorted log entries into sleep intervals.

    Every `wakes_up` closes the interval opened by the preceding
    `falls_asleep` of the guard on duty. Intervals are half-open,
    `[start, end)` in minutes past midnight.
    """
    sleeps = []
    guard_id = None
    asleep_since = None
    for entry in entries:
        if entry.kind == "begin_shift":
            if asleep_since is not None:
                logger.warning(
                    f"Guard #{guard_id} still asleep since minute {asleep_since} "
                    f"when guard #{entry.guard_id} began shift, dropping sleep"
                )
            guard_id = entry.guard_id
            asleep_since = None
            continue

        if guard_id is None:
            raise SleepLogError(
                f"Event '{entry.kind}' at {entry.timestamp} before any shift began!"
            )

        if entry.kind == "falls_asleep":
            if asleep_since is not None:
                raise SleepLogError(
                    f"Guard #{guard_id} fell asleep at {entry.timestamp} "
                    f"while already asleep since minute {asleep_since}!"
                )
            asleep_since = entry.minute
        else:
            if asleep_since is None:
                raise SleepLogError(
                    f"Guard #{guard_id} woke up at {entry.timestamp} "
                    "without falling asleep!"
                )
            if entry.minute <= asleep_since:
                raise SleepLogError(
                    f"Guard #{guard_id} woke up at minute {entry.minute}, "
                    f"not after falling asleep at minute {asleep_since}!"
                )
            sleeps.append(
                Sleep(guard_id=guard_id, start=asleep_since, end=entry.minute)
            )
            asleep_since = None

    if asleep_since is not None:
        logger.warning(
            f"Guard #{guard_id} still asleep at end of log "
            f"since minute {asleep_since}, dropping sleep"
        )
    logger.info(f"Reconstructed {len(sleeps)} sleeps")
    return sleeps


def sleeps_to_frame(sleeps: list[Sleep]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "guard_id": [s.guard_id for s in sleeps],
            "start": [s.start for s in sleeps],
            "end": [s.end for s in sleeps],
            "duration": [s.duration for s in sleeps],
        },
        dtype="int64",
    )
