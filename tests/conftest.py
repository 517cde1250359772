import random

import pytest

SAMPLE_LOG = """\
[1518-11-01 00:00] Guard #10 begins shift
[1518-11-01 00:05] falls asleep
[1518-11-01 00:25] wakes up
[1518-11-01 00:30] falls asleep
[1518-11-01 00:55] wakes up
[1518-11-01 23:58] Guard #99 begins shift
[1518-11-02 00:40] falls asleep
[1518-11-02 00:50] wakes up
[1518-11-03 00:05] Guard #10 begins shift
[1518-11-03 00:24] falls asleep
[1518-11-03 00:29] wakes up
[1518-11-04 00:02] Guard #99 begins shift
[1518-11-04 00:36] falls asleep
[1518-11-04 00:46] wakes up
[1518-11-05 00:03] Guard #99 begins shift
[1518-11-05 00:45] falls asleep
[1518-11-05 00:55] wakes up
"""


@pytest.fixture
def sample_lines():
    """Shift log with two guards, already in chronological order."""
    return SAMPLE_LOG.splitlines()


@pytest.fixture
def shuffled_lines(sample_lines):
    """Same log with the line order scrambled (deterministic)."""
    lines = list(sample_lines)
    random.Random(42).shuffle(lines)
    return lines


@pytest.fixture
def sample_path(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE_LOG)
    return path
