import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

import pandas as pd

from .constants import (
    EVENT_KIND_TYPE,
    MAX_GUARD_ID,
    MESSAGE_FALLS_ASLEEP,
    MESSAGE_WAKES_UP,
    TIMESTAMP_FORMAT,
    TYPE_FILEPATHS,
)

logger = logging.getLogger(__name__)

LINE_PATTERN = re.compile(r"^\[(.*)\] (.*)$")
SHIFT_PATTERN = re.compile(r"^Guard #(\d+) begins shift$")


class LogParseError(ValueError):
    pass


@dataclass(frozen=True)
class LogEntry:
    timestamp: datetime
    kind: EVENT_KIND_TYPE
    guard_id: int | None = None

    @property
    def minute(self) -> int:
        return self.timestamp.minute


def parse_line(line: str) -> LogEntry:
    """Parse a single `[YYYY-MM-DD HH:MM] message` record."""
    text = line.rstrip()
    match = LINE_PATTERN.match(text)
    if match is None:
        raise LogParseError(f"Failed to parse line: {text!r}")

    try:
        timestamp = datetime.strptime(match.group(1), TIMESTAMP_FORMAT)
    except ValueError as e:
        raise LogParseError(f"Invalid timestamp {match.group(1)!r}: {e}") from e

    message = match.group(2)
    if message == MESSAGE_FALLS_ASLEEP:
        return LogEntry(timestamp=timestamp, kind="falls_asleep")
    if message == MESSAGE_WAKES_UP:
        return LogEntry(timestamp=timestamp, kind="wakes_up")

    shift = SHIFT_PATTERN.match(message)
    if shift is None:
        raise LogParseError(f"Failed to parse message: {message!r}")
    guard_id = int(shift.group(1))
    if guard_id > MAX_GUARD_ID:
        raise LogParseError(f"Guard id too large: {message!r}")
    return LogEntry(timestamp=timestamp, kind="begin_shift", guard_id=guard_id)


def parse_lines(lines: Iterable[str]) -> list[LogEntry]:
    """Parse all non-blank lines and return entries in chronological order.

    The log does not have to be sorted on disk. Entries sharing a timestamp
    keep their input order.
    """
    entries = []
    for i_line, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            entries.append(parse_line(line))
        except LogParseError as e:
            raise LogParseError(f"line {i_line}: {e}") from e
    entries.sort(key=lambda entry: entry.timestamp)
    logger.info(f"Parsed {len(entries)} log entries")
    return entries


def read_log(path: TYPE_FILEPATHS) -> list[LogEntry]:
    logger.info(f"Reading guard log from {path}")
    with open(path, encoding="utf-8") as f:
        return parse_lines(f)


def entries_to_frame(entries: list[LogEntry]) -> pd.DataFrame:
    # timestamps stay Python objects, log years predate pd.Timestamp's range
    return pd.DataFrame(
        {
            "timestamp": pd.Series([e.timestamp for e in entries], dtype=object),
            "minute": pd.Series([e.minute for e in entries], dtype="int64"),
            "kind": pd.Series([e.kind for e in entries], dtype=object),
            "guard_id": pd.Series([e.guard_id for e in entries], dtype="Int64"),
        }
    )
