"""SAM 8500 pay period pattern tables.

California State monthly pay periods repeat on a 28-year cycle. Each year
is assigned one of 14 patterns, and each pattern lists the start date,
end date and work days for the 12 pay-period months of that year.

Source: State Administrative Manual section 8500.

Rows are stored as:
    pattern, month, start_month, start_day, end_month, end_day, work_days

Start and end always fall in the same calendar year as the pattern year;
a pattern's 12 rows tile the whole year from Jan 1 to Dec 31.
"""

from dataclasses import dataclass
from typing import Tuple


# First year covered by the pattern sequence
PATTERN_SEED_YEAR = 1994
# Last year the sequence is published for
YEAR_MAX = 2299

PATTERN_NUMBER_MIN = 1
PATTERN_NUMBER_MAX = 14

MONTH_MIN = 1
MONTH_MAX = 12
MONTHS_PER_PATTERN = 12

HOURS_PER_WORK_DAY = 8


@dataclass(frozen=True)
class PatternRow:
    """One month of a pay period pattern."""

    pattern: int
    month: int
    start_month: int
    start_day: int
    end_month: int
    end_day: int
    work_days: int

    @property
    def work_hours(self) -> int:
        return self.work_days * HOURS_PER_WORK_DAY


# Pattern number for each year of the 28-year cycle, indexed by
# (year - PATTERN_SEED_YEAR) % 28.
PATTERN_SEQUENCE: Tuple[int, ...] = (
    7, 1, 9, 4, 5, 6, 14, 2, 3, 4, 12, 7, 1, 2,
    10, 5, 6, 7, 8, 3, 4, 5, 13, 1, 2, 3, 11, 6,
)

PATTERNS: Tuple[PatternRow, ...] = (
    PatternRow(1, 1, 1, 1, 1, 31, 22),
    PatternRow(1, 2, 2, 1, 3, 1, 21),
    PatternRow(1, 3, 3, 2, 3, 31, 22),
    PatternRow(1, 4, 4, 1, 5, 1, 21),
    PatternRow(1, 5, 5, 2, 5, 31, 22),
    PatternRow(1, 6, 6, 1, 6, 30, 22),
    PatternRow(1, 7, 7, 1, 8, 1, 22),
    PatternRow(1, 8, 8, 2, 8, 31, 22),
    PatternRow(1, 9, 9, 1, 9, 30, 21),
    PatternRow(1, 10, 10, 1, 10, 31, 22),
    PatternRow(1, 11, 11, 1, 11, 30, 22),
    PatternRow(1, 12, 12, 1, 12, 31, 21),

    PatternRow(2, 1, 1, 1, 1, 30, 22),
    PatternRow(2, 2, 1, 31, 2, 28, 21),
    PatternRow(2, 3, 3, 1, 3, 31, 22),
    PatternRow(2, 4, 4, 1, 4, 30, 21),
    PatternRow(2, 5, 5, 1, 5, 30, 22),
    PatternRow(2, 6, 5, 31, 6, 30, 22),
    PatternRow(2, 7, 7, 1, 7, 31, 22),
    PatternRow(2, 8, 8, 1, 8, 30, 22),
    PatternRow(2, 9, 8, 31, 9, 30, 21),
    PatternRow(2, 10, 10, 1, 10, 30, 22),
    PatternRow(2, 11, 10, 31, 11, 29, 22),
    PatternRow(2, 12, 11, 30, 12, 31, 22),

    PatternRow(3, 1, 1, 1, 1, 30, 22),
    PatternRow(3, 2, 1, 31, 2, 28, 21),
    PatternRow(3, 3, 3, 1, 3, 31, 21),
    PatternRow(3, 4, 4, 1, 4, 30, 22),
    PatternRow(3, 5, 5, 1, 5, 30, 22),
    PatternRow(3, 6, 5, 31, 6, 30, 21),
    PatternRow(3, 7, 7, 1, 7, 30, 22),
    PatternRow(3, 8, 7, 31, 8, 29, 22),
    PatternRow(3, 9, 8, 30, 9, 30, 22),
    PatternRow(3, 10, 10, 1, 10, 30, 22),
    PatternRow(3, 11, 10, 31, 11, 30, 22),
    PatternRow(3, 12, 12, 1, 12, 31, 22),

    PatternRow(4, 1, 1, 1, 1, 30, 22),
    PatternRow(4, 2, 1, 31, 2, 28, 21),
    PatternRow(4, 3, 3, 1, 3, 31, 21),
    PatternRow(4, 4, 4, 1, 4, 30, 22),
    PatternRow(4, 5, 5, 1, 5, 31, 22),
    PatternRow(4, 6, 6, 1, 6, 30, 21),
    PatternRow(4, 7, 7, 1, 7, 30, 22),
    PatternRow(4, 8, 7, 31, 8, 31, 22),
    PatternRow(4, 9, 9, 1, 9, 30, 22),
    PatternRow(4, 10, 10, 1, 10, 30, 22),
    PatternRow(4, 11, 10, 31, 12, 1, 22),
    PatternRow(4, 12, 12, 2, 12, 31, 22),

    PatternRow(5, 1, 1, 1, 1, 29, 21),
    PatternRow(5, 2, 1, 30, 2, 28, 21),
    PatternRow(5, 3, 3, 1, 3, 31, 22),
    PatternRow(5, 4, 4, 1, 4, 30, 22),
    PatternRow(5, 5, 5, 1, 5, 31, 21),
    PatternRow(5, 6, 6, 1, 6, 30, 22),
    PatternRow(5, 7, 7, 1, 7, 30, 22),
    PatternRow(5, 8, 7, 31, 8, 31, 22),
    PatternRow(5, 9, 9, 1, 9, 30, 22),
    PatternRow(5, 10, 10, 1, 10, 31, 22),
    PatternRow(5, 11, 11, 1, 12, 1, 22),
    PatternRow(5, 12, 12, 2, 12, 31, 22),

    PatternRow(6, 1, 1, 1, 1, 31, 21),
    PatternRow(6, 2, 2, 1, 3, 1, 21),
    PatternRow(6, 3, 3, 2, 3, 31, 22),
    PatternRow(6, 4, 4, 1, 4, 30, 22),
    PatternRow(6, 5, 5, 1, 5, 31, 21),
    PatternRow(6, 6, 6, 1, 6, 30, 22),
    PatternRow(6, 7, 7, 1, 7, 31, 22),
    PatternRow(6, 8, 8, 1, 8, 31, 22),
    PatternRow(6, 9, 9, 1, 9, 30, 22),
    PatternRow(6, 10, 10, 1, 11, 1, 22),
    PatternRow(6, 11, 11, 2, 12, 1, 22),
    PatternRow(6, 12, 12, 2, 12, 31, 22),

    PatternRow(7, 1, 1, 1, 1, 31, 21),
    PatternRow(7, 2, 2, 1, 3, 1, 21),
    PatternRow(7, 3, 3, 2, 3, 31, 22),
    PatternRow(7, 4, 4, 1, 4, 30, 21),
    PatternRow(7, 5, 5, 1, 5, 31, 22),
    PatternRow(7, 6, 6, 1, 6, 30, 22),
    PatternRow(7, 7, 7, 1, 8, 1, 22),
    PatternRow(7, 8, 8, 2, 8, 31, 22),
    PatternRow(7, 9, 9, 1, 9, 30, 22),
    PatternRow(7, 10, 10, 1, 10, 31, 21),
    PatternRow(7, 11, 11, 1, 11, 30, 22),
    PatternRow(7, 12, 12, 1, 12, 31, 22),

    PatternRow(8, 1, 1, 1, 1, 31, 22),
    PatternRow(8, 2, 2, 1, 2, 29, 21),
    PatternRow(8, 3, 3, 1, 3, 31, 22),
    PatternRow(8, 4, 4, 1, 4, 30, 21),
    PatternRow(8, 5, 5, 1, 5, 30, 22),
    PatternRow(8, 6, 5, 31, 6, 30, 22),
    PatternRow(8, 7, 7, 1, 7, 31, 22),
    PatternRow(8, 8, 8, 1, 8, 30, 22),
    PatternRow(8, 9, 8, 31, 9, 30, 21),
    PatternRow(8, 10, 10, 1, 10, 30, 22),
    PatternRow(8, 11, 10, 31, 11, 29, 22),
    PatternRow(8, 12, 11, 30, 12, 31, 22),

    PatternRow(9, 1, 1, 1, 1, 30, 22),
    PatternRow(9, 2, 1, 31, 2, 29, 22),
    PatternRow(9, 3, 3, 1, 3, 31, 21),
    PatternRow(9, 4, 4, 1, 4, 30, 22),
    PatternRow(9, 5, 5, 1, 5, 30, 22),
    PatternRow(9, 6, 5, 31, 6, 30, 21),
    PatternRow(9, 7, 7, 1, 7, 30, 22),
    PatternRow(9, 8, 7, 31, 8, 29, 22),
    PatternRow(9, 9, 8, 30, 9, 30, 22),
    PatternRow(9, 10, 10, 1, 10, 30, 22),
    PatternRow(9, 11, 10, 31, 11, 30, 22),
    PatternRow(9, 12, 12, 1, 12, 31, 22),

    PatternRow(10, 1, 1, 1, 1, 30, 22),
    PatternRow(10, 2, 1, 31, 2, 29, 22),
    PatternRow(10, 3, 3, 1, 3, 31, 21),
    PatternRow(10, 4, 4, 1, 4, 30, 22),
    PatternRow(10, 5, 5, 1, 5, 31, 22),
    PatternRow(10, 6, 6, 1, 6, 30, 21),
    PatternRow(10, 7, 7, 1, 7, 30, 22),
    PatternRow(10, 8, 7, 31, 8, 31, 22),
    PatternRow(10, 9, 9, 1, 9, 30, 22),
    PatternRow(10, 10, 10, 1, 10, 30, 22),
    PatternRow(10, 11, 10, 31, 12, 1, 22),
    PatternRow(10, 12, 12, 2, 12, 31, 22),

    PatternRow(11, 1, 1, 1, 1, 30, 22),
    PatternRow(11, 2, 1, 31, 2, 29, 21),
    PatternRow(11, 3, 3, 1, 3, 31, 22),
    PatternRow(11, 4, 4, 1, 4, 30, 22),
    PatternRow(11, 5, 5, 1, 5, 31, 21),
    PatternRow(11, 6, 6, 1, 6, 30, 22),
    PatternRow(11, 7, 7, 1, 7, 30, 22),
    PatternRow(11, 8, 7, 31, 8, 31, 22),
    PatternRow(11, 9, 9, 1, 9, 30, 22),
    PatternRow(11, 10, 10, 1, 10, 31, 22),
    PatternRow(11, 11, 11, 1, 12, 1, 22),
    PatternRow(11, 12, 12, 2, 12, 31, 22),

    PatternRow(12, 1, 1, 1, 1, 31, 22),
    PatternRow(12, 2, 2, 1, 3, 1, 21),
    PatternRow(12, 3, 3, 2, 3, 31, 22),
    PatternRow(12, 4, 4, 1, 4, 30, 22),
    PatternRow(12, 5, 5, 1, 5, 31, 21),
    PatternRow(12, 6, 6, 1, 6, 30, 22),
    PatternRow(12, 7, 7, 1, 7, 31, 22),
    PatternRow(12, 8, 8, 1, 8, 31, 22),
    PatternRow(12, 9, 9, 1, 9, 30, 22),
    PatternRow(12, 10, 10, 1, 11, 1, 22),
    PatternRow(12, 11, 11, 2, 12, 1, 22),
    PatternRow(12, 12, 12, 2, 12, 31, 22),

    PatternRow(13, 1, 1, 1, 1, 31, 21),
    PatternRow(13, 2, 2, 1, 3, 1, 22),
    PatternRow(13, 3, 3, 2, 3, 31, 22),
    PatternRow(13, 4, 4, 1, 4, 30, 21),
    PatternRow(13, 5, 5, 1, 5, 31, 22),
    PatternRow(13, 6, 6, 1, 6, 30, 22),
    PatternRow(13, 7, 7, 1, 8, 1, 22),
    PatternRow(13, 8, 8, 2, 8, 31, 22),
    PatternRow(13, 9, 9, 1, 9, 30, 22),
    PatternRow(13, 10, 10, 1, 10, 31, 21),
    PatternRow(13, 11, 11, 1, 11, 30, 22),
    PatternRow(13, 12, 12, 1, 12, 31, 22),

    PatternRow(14, 1, 1, 1, 1, 31, 21),
    PatternRow(14, 2, 2, 1, 3, 1, 22),
    PatternRow(14, 3, 3, 2, 3, 31, 22),
    PatternRow(14, 4, 4, 1, 5, 1, 21),
    PatternRow(14, 5, 5, 2, 5, 31, 22),
    PatternRow(14, 6, 6, 1, 6, 30, 22),
    PatternRow(14, 7, 7, 1, 7, 31, 21),
    PatternRow(14, 8, 8, 1, 8, 30, 22),
    PatternRow(14, 9, 8, 31, 9, 30, 22),
    PatternRow(14, 10, 10, 1, 10, 31, 22),
    PatternRow(14, 11, 11, 1, 11, 30, 22),
    PatternRow(14, 12, 12, 1, 12, 31, 21),
)


def resolve_pattern_number(year: int) -> int:
    """Return the pattern number (1-14) in effect for a year.

    The year is not range checked here; see periods.validate_year.
    """
    return PATTERN_SEQUENCE[(year - PATTERN_SEED_YEAR) % len(PATTERN_SEQUENCE)]


def get_pattern(pattern: int) -> Tuple[PatternRow, ...]:
    """Return the 12 rows of a pattern, in month order."""
    if pattern < PATTERN_NUMBER_MIN or pattern > PATTERN_NUMBER_MAX:
        raise ValueError(
            f"Pattern must be between {PATTERN_NUMBER_MIN} and {PATTERN_NUMBER_MAX}, got {pattern}"
        )
    offset = (pattern - 1) * MONTHS_PER_PATTERN
    return PATTERNS[offset:offset + MONTHS_PER_PATTERN]


def resolve_year_patterns(year: int) -> Tuple[PatternRow, ...]:
    """Return the 12 pattern rows that apply to a year."""
    return get_pattern(resolve_pattern_number(year))
