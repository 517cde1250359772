import os
from pathlib import Path
from typing import Literal, TypeAlias

TYPE_FILEPATHS: TypeAlias = str | Path
EVENT_KIND_TYPE: TypeAlias = Literal["begin_shift", "falls_asleep", "wakes_up"]

TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M"
MINUTES_PER_HOUR: int = 60
# guard ids are stored in int64 columns
MAX_GUARD_ID: int = 2**63 - 1

MESSAGE_FALLS_ASLEEP: str = "falls asleep"
MESSAGE_WAKES_UP: str = "wakes up"

_INPUT_ENV = os.environ.get("GUARDSLEEP_INPUT")
PATH_INPUT: Path | None = Path(_INPUT_ENV).absolute() if _INPUT_ENV else None
