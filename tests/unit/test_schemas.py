"""Unit tests for the PayPeriod schema."""

from datetime import date

import pytest
from pydantic import ValidationError

from calpay.sdk.schemas import PayPeriod


def make_period(**overrides) -> PayPeriod:
    """Create a PayPeriod for testing, January 1994 by default."""
    fields = {
        "start_date": date(1994, 1, 1),
        "end_date": date(1994, 1, 31),
        "year": 1994,
        "month": 1,
        "work_days": 21,
        "work_hours": 168,
    }
    fields.update(overrides)
    return PayPeriod(**fields)


class TestPayPeriod:

    def test_valid_period(self):
        period = make_period()
        assert period.calendar_days == 31

    def test_end_before_start_rejected(self):
        with pytest.raises(ValidationError, match="before start_date"):
            make_period(end_date=date(1993, 12, 31))

    def test_work_hours_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="work_hours"):
            make_period(work_hours=176)

    def test_month_range(self):
        with pytest.raises(ValidationError):
            make_period(month=13)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            make_period(pay_date=date(1994, 2, 1))

    def test_frozen(self):
        period = make_period()
        with pytest.raises(ValidationError):
            period.work_days = 22

    def test_contains_is_inclusive(self):
        period = make_period()
        assert period.contains(date(1994, 1, 1))
        assert period.contains(date(1994, 1, 31))
        assert not period.contains(date(1994, 2, 1))
        assert not period.contains(date(1993, 12, 31))

    def test_to_dict_uses_iso_dates(self):
        assert make_period().to_dict() == {
            "start_date": "1994-01-01",
            "end_date": "1994-01-31",
            "year": 1994,
            "month": 1,
            "work_days": 21,
            "work_hours": 168,
        }
