"""Pay period lookup for California State monthly pay periods.

Two entry points:

- get_pay_periods(year, month=None): the 12 pay periods of a year, or one month
- get_pay_period(day): the pay period containing a calendar date

A pay period's range can straddle a calendar month boundary, so a date's
calendar month is not always its pay-period month. get_pay_period tests the
date's own month first, then the month before, then the month after.
"""

import logging
import os
from datetime import date, datetime, timezone
from typing import List, Optional, Union

from .patterns import (
    MONTH_MAX,
    MONTH_MIN,
    PATTERN_SEED_YEAR,
    YEAR_MAX,
    PatternRow,
    resolve_pattern_number,
    resolve_year_patterns,
)
from .schemas import PayPeriod

# Configure logging based on LOG_LEVEL environment variable
_log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, _log_level, logging.INFO),
    format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]


class PayPeriodError(Exception):
    """Base class for pay period errors."""
    pass


class OutOfRangeError(PayPeriodError, ValueError):
    """Raised when a year or month is outside the supported range."""

    def __init__(self, name: str, value: int, minimum: int, maximum: int):
        self.name = name
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"The {name} must be between {minimum} and {maximum}, got {value}."
        )


class InvariantViolation(PayPeriodError, RuntimeError):
    """Raised when no pay period contains a date.

    Unreachable with a correct pattern table; indicates corrupted data.
    """
    pass


def validate_year(year: int) -> None:
    """Raise OutOfRangeError unless PATTERN_SEED_YEAR <= year <= YEAR_MAX."""
    if year < PATTERN_SEED_YEAR or year > YEAR_MAX:
        raise OutOfRangeError("year", year, PATTERN_SEED_YEAR, YEAR_MAX)


def validate_month(month: int) -> None:
    """Raise OutOfRangeError unless 1 <= month <= 12."""
    if month < MONTH_MIN or month > MONTH_MAX:
        raise OutOfRangeError("month", month, MONTH_MIN, MONTH_MAX)


def create_pay_period(year: int, row: PatternRow) -> PayPeriod:
    """Build the PayPeriod for a pattern row in a given year.

    Both dates use the same year; the table never spans a year boundary.
    """
    return PayPeriod(
        start_date=date(year, row.start_month, row.start_day),
        end_date=date(year, row.end_month, row.end_day),
        year=year,
        month=row.month,
        work_days=row.work_days,
        work_hours=row.work_hours,
    )


def get_pay_periods(year: int, month: Optional[int] = None) -> List[PayPeriod]:
    """Get the pay periods for a year, optionally only a single month.

    Args:
        year: Calendar year (1994-2299).
        month: Pay period month (1-12). None returns all 12 months.

    Returns:
        Pay periods in month order (12 entries, or 1 when month is given).

    Raises:
        OutOfRangeError: If year or month is out of range.
    """
    validate_year(year)
    month_start, month_end = MONTH_MIN, MONTH_MAX
    if month is not None:
        validate_month(month)
        month_start = month_end = month

    rows = resolve_year_patterns(year)
    logger.debug(f"{year}: pattern {resolve_pattern_number(year)}, months {month_start}-{month_end}")
    return [create_pay_period(year, row) for row in rows[month_start - 1:month_end]]


def _to_calendar_date(day: DateLike) -> date:
    """Truncate a date or datetime to its UTC calendar date.

    Aware datetimes are converted to UTC first; naive datetimes are taken
    as UTC wall-clock values.
    """
    if isinstance(day, datetime):
        if day.tzinfo is not None:
            day = day.astimezone(timezone.utc)
        return day.date()
    return day


def get_pay_period(day: DateLike) -> PayPeriod:
    """Get the pay period containing a date. The time of day is ignored.

    Args:
        day: A date or datetime within 1994-2299.

    Returns:
        The PayPeriod whose inclusive range contains the date.

    Raises:
        OutOfRangeError: If the date's year is out of range.
        InvariantViolation: If no candidate period contains the date.
    """
    target = _to_calendar_date(day)
    validate_year(target.year)
    rows = resolve_year_patterns(target.year)
    index = target.month - 1

    # Same month first, then the month before, then the month after
    candidates = [index]
    if index > 0:
        candidates.append(index - 1)
    if index + 1 < len(rows):
        candidates.append(index + 1)

    for candidate in candidates:
        period = create_pay_period(target.year, rows[candidate])
        if period.contains(target):
            if candidate != index:
                logger.debug(
                    f"{target.isoformat()} belongs to pay period month {period.month}, "
                    f"not calendar month {target.month}"
                )
            return period

    logger.error(f"No pay period contains {target.isoformat()} (pattern {rows[index].pattern})")
    raise InvariantViolation(
        f"No pay period contains {target.isoformat()}; the pattern table is inconsistent."
    )
