"""Unit tests for the SAM 8500 pattern tables and resolvers."""

from dataclasses import FrozenInstanceError

import pytest

from calpay.sdk.patterns import (
    PATTERNS,
    PATTERN_SEQUENCE,
    PATTERN_SEED_YEAR,
    YEAR_MAX,
    PatternRow,
    get_pattern,
    resolve_pattern_number,
    resolve_year_patterns,
)


class TestTables:
    """Shape of the static tables."""

    def test_sequence_has_28_entries_in_range(self):
        assert len(PATTERN_SEQUENCE) == 28
        assert all(1 <= p <= 14 for p in PATTERN_SEQUENCE)

    def test_every_pattern_appears_in_sequence(self):
        assert set(PATTERN_SEQUENCE) == set(range(1, 15))

    def test_table_has_168_rows(self):
        assert len(PATTERNS) == 14 * 12

    def test_rows_are_grouped_by_pattern_in_month_order(self):
        for position, row in enumerate(PATTERNS):
            assert row.pattern == position // 12 + 1
            assert row.month == position % 12 + 1

    def test_work_days_in_expected_range(self):
        assert all(20 <= row.work_days <= 23 for row in PATTERNS)

    def test_work_hours_is_eight_per_day(self):
        row = PatternRow(7, 1, 1, 1, 1, 31, 21)
        assert row.work_hours == 168

    def test_rows_are_immutable(self):
        with pytest.raises(FrozenInstanceError):
            PATTERNS[0].work_days = 30


class TestResolvePatternNumber:
    """resolve_pattern_number sequence lookup."""

    def test_seed_year_is_pattern_7(self):
        assert resolve_pattern_number(1994) == 7

    def test_known_years(self):
        assert resolve_pattern_number(1995) == 1
        assert resolve_pattern_number(1997) == 4
        assert resolve_pattern_number(2001) == 2
        assert resolve_pattern_number(2020) == 11
        assert resolve_pattern_number(2299) == 3

    def test_repeats_every_28_years(self):
        for year in range(PATTERN_SEED_YEAR, YEAR_MAX - 28 + 1):
            assert resolve_pattern_number(year) == resolve_pattern_number(year + 28)


class TestResolveYearPatterns:
    """resolve_year_patterns / get_pattern slicing."""

    def test_returns_12_rows_of_one_pattern(self):
        rows = resolve_year_patterns(1994)
        assert len(rows) == 12
        assert {row.pattern for row in rows} == {7}
        assert [row.month for row in rows] == list(range(1, 13))

    def test_seed_year_rows(self):
        rows = resolve_year_patterns(1994)
        assert rows[0] == PatternRow(7, 1, 1, 1, 1, 31, 21)
        assert rows[1] == PatternRow(7, 2, 2, 1, 3, 1, 21)

    def test_returns_tuple(self):
        assert isinstance(resolve_year_patterns(2020), tuple)

    def test_get_pattern_last(self):
        rows = get_pattern(14)
        assert rows[-1] == PatternRow(14, 12, 12, 1, 12, 31, 21)

    @pytest.mark.parametrize("pattern", [0, 15])
    def test_get_pattern_rejects_unknown(self, pattern):
        with pytest.raises(ValueError, match="between 1 and 14"):
            get_pattern(pattern)
