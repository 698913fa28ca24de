"""Pydantic schemas for calpay pay periods.

Schemas use extra='forbid' to reject unknown fields and are frozen:
a PayPeriod is built per query and never mutated.
"""

from datetime import date
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .patterns import HOURS_PER_WORK_DAY, MONTH_MAX, MONTH_MIN


class PayPeriod(BaseModel):
    """A California State monthly pay period.

    The month is the pay-period month, which may differ from the calendar
    month of start_date (e.g. a February period starting on January 31).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    start_date: date = Field(..., description="First day of the pay period")
    end_date: date = Field(..., description="Last day of the pay period (inclusive)")
    year: int = Field(..., description="Pay period year")
    month: int = Field(..., ge=MONTH_MIN, le=MONTH_MAX, description="Pay period month (1-12)")
    work_days: int = Field(..., gt=0, description="Work days in the pay period")
    work_hours: int = Field(..., gt=0, description="Work hours, assuming an eight-hour day")

    @model_validator(mode="after")
    def check_coherence(self) -> "PayPeriod":
        """Validate internal consistency of dates and hours."""
        errors = []

        if self.end_date < self.start_date:
            errors.append(
                f"end_date ({self.end_date}) is before start_date ({self.start_date})"
            )

        expected_hours = self.work_days * HOURS_PER_WORK_DAY
        if self.work_hours != expected_hours:
            errors.append(
                f"work_hours ({self.work_hours}) != "
                f"work_days * {HOURS_PER_WORK_DAY} ({expected_hours})"
            )

        if errors:
            raise ValueError("; ".join(errors))

        return self

    @property
    def calendar_days(self) -> int:
        """Number of calendar days covered, inclusive."""
        return (self.end_date - self.start_date).days + 1

    def contains(self, day: date) -> bool:
        """Check whether a calendar date falls within the period (inclusive)."""
        return self.start_date <= day <= self.end_date

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly dict with ISO formatted dates."""
        return self.model_dump(mode="json")
