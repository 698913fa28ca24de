"""Tests for the MCP server tools.

Calls the tool coroutines directly; skipped when the mcp extra is not installed.
"""

import asyncio

import pytest

pytest.importorskip("mcp")

from calpay.mcp import server


class TestGetPayPeriodsTool:

    def test_single_month(self):
        result = asyncio.run(server.get_pay_periods(year=1994, month=1))

        assert result["year"] == 1994
        assert result["pattern"] == 7
        assert result["total_work_hours"] == 168
        assert result["pay_periods"][0]["end_date"] == "1994-01-31"

    def test_full_year(self):
        result = asyncio.run(server.get_pay_periods(year=2020, month=None))

        assert len(result["pay_periods"]) == 12
        assert result["total_work_hours"] == sum(p["work_hours"] for p in result["pay_periods"])

    def test_out_of_range_returns_error(self):
        result = asyncio.run(server.get_pay_periods(year=2300, month=None))

        assert "between 1994 and 2299" in result["error"]
        assert result["pay_periods"] == []


class TestGetPayPeriodTool:

    def test_next_month_period(self):
        result = asyncio.run(server.get_pay_period(date="2001-01-31"))

        assert result["date"] == "2001-01-31"
        assert result["pay_period"]["month"] == 2

    def test_invalid_date_returns_error(self):
        result = asyncio.run(server.get_pay_period(date="not-a-date"))

        assert "Invalid date" in result["error"]
        assert result["pay_period"] is None

    def test_out_of_range_returns_error(self):
        result = asyncio.run(server.get_pay_period(date="1993-06-01"))

        assert "between 1994 and 2299" in result["error"]
