import numpy as np

from guardsleep.aggregate import minute_counts, total_minutes
from guardsleep.sleeps import Sleep


class TestMinuteCounts:
    def test_shape_and_index(self):
        counts = minute_counts([Sleep(99, 40, 50), Sleep(10, 5, 25)])
        assert counts.shape == (2, 60)
        assert counts.index.tolist() == [10, 99]
        assert counts.columns.tolist() == list(range(60))

    def test_end_minute_is_exclusive(self):
        counts = minute_counts([Sleep(10, 5, 25)])
        row = counts.loc[10]
        assert row[4] == 0
        assert row[5] == 1
        assert row[24] == 1
        assert row[25] == 0
        assert row.sum() == 20

    def test_overlapping_sleeps_accumulate(self):
        counts = minute_counts([Sleep(10, 5, 25), Sleep(10, 24, 29)])
        assert counts.loc[10, 24] == 2
        assert counts.loc[10, 28] == 1

    def test_row_sums_match_totals(self, sample_lines):
        from guardsleep.parsing import parse_lines
        from guardsleep.sleeps import reconstruct_sleeps

        sleeps = reconstruct_sleeps(parse_lines(sample_lines))
        counts = minute_counts(sleeps)
        totals = total_minutes(sleeps)
        np.testing.assert_array_equal(counts.sum(axis=1).to_numpy(), totals.to_numpy())

    def test_empty(self):
        counts = minute_counts([])
        assert counts.shape == (0, 60)


class TestTotalMinutes:
    def test_sums_per_guard(self):
        totals = total_minutes([Sleep(99, 40, 50), Sleep(10, 5, 25), Sleep(99, 0, 1)])
        assert totals.to_dict() == {10: 20, 99: 11}
        assert totals.index.tolist() == [10, 99]
