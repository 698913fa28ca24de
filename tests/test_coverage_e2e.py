"""End-to-end coverage sweep over every supported day.

For each year 1994-2299:
- the 12 pay periods tile the year with no gaps or overlaps
- every day resolves to the one period that contains it
"""

from datetime import date, timedelta

import pytest

from calpay.sdk import PATTERN_SEED_YEAR, YEAR_MAX, get_pay_period, get_pay_periods

ALL_YEARS = range(PATTERN_SEED_YEAR, YEAR_MAX + 1)


@pytest.mark.parametrize("year", ALL_YEARS)
def test_periods_tile_the_year(year):
    periods = get_pay_periods(year)

    assert len(periods) == 12
    assert periods[0].start_date == date(year, 1, 1)
    assert periods[-1].end_date == date(year, 12, 31)
    for prev, nxt in zip(periods, periods[1:]):
        assert nxt.start_date == prev.end_date + timedelta(days=1)
        assert nxt.month == prev.month + 1
    for period in periods:
        assert period.work_hours == period.work_days * 8


@pytest.mark.parametrize("year", ALL_YEARS)
def test_every_day_resolves_to_its_period(year):
    periods = get_pay_periods(year)
    day = date(year, 1, 1)

    while day.year == year:
        expected = [p for p in periods if p.contains(day)]
        assert len(expected) == 1, f"{day} matched {len(expected)} periods"
        assert get_pay_period(day) == expected[0]
        day += timedelta(days=1)
