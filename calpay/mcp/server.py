"""Calpay MCP Server - FastMCP implementation for pay period tools."""

import logging
from datetime import date
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from calpay.sdk import (
    OutOfRangeError,
    get_pay_period as sdk_get_pay_period,
    get_pay_periods as sdk_get_pay_periods,
    resolve_pattern_number,
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("calpay")


# --- Tools ---

@mcp.tool()
async def get_pay_periods(
    year: int = Field(description="Calendar year (1994-2299)"),
    month: int | None = Field(default=None, description="Pay period month (1-12). Omit for all 12 months."),
) -> dict[str, Any]:
    """List California State monthly pay periods for a year, or a single month.

    Each period has start_date, end_date (ISO dates, inclusive), month,
    work_days and work_hours (work_days * 8).
    """
    try:
        periods = sdk_get_pay_periods(year, month)
        return {
            "year": year,
            "pattern": resolve_pattern_number(year),
            "pay_periods": [p.to_dict() for p in periods],
            "total_work_hours": sum(p.work_hours for p in periods),
        }

    except OutOfRangeError as e:
        logger.error(f"Error getting pay periods for {year}: {e}")
        return {"error": str(e), "pay_periods": []}


@mcp.tool()
async def get_pay_period(
    date: str = Field(description="Calendar date in ISO format (YYYY-MM-DD)"),
) -> dict[str, Any]:
    """Find the pay period containing a date.

    Dates near a month boundary can belong to the neighbouring pay-period
    month; the returned month is the pay-period month.
    """
    try:
        target = _parse_date(date)
        period = sdk_get_pay_period(target)
        return {"date": target.isoformat(), "pay_period": period.to_dict()}

    except ValueError as e:
        logger.error(f"Error getting pay period for {date}: {e}")
        return {"error": str(e), "pay_period": None}


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValueError(f"Invalid date '{value}'. Expected YYYY-MM-DD.")


def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
