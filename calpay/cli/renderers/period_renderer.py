"""Rich renderer for pay periods.

Transforms SDK pay periods and pattern rows into formatted Rich tables.
"""

import calendar
from typing import List, Sequence

from rich.console import Console
from rich.table import Table
from rich import box

from calpay.sdk import PatternRow, PayPeriod


def render_pay_periods(console: Console, periods: List[PayPeriod],
                       date_format: str = "%Y-%m-%d", title: str = None) -> None:
    """Render pay periods as a Rich table.

    Args:
        console: Rich Console instance
        periods: Pay periods from get_pay_periods() or get_pay_period()
        date_format: strftime pattern for start/end dates
        title: Optional table title
    """
    table = Table(title=title, box=box.SIMPLE_HEAD)
    table.add_column("Month", style="bold")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Days", justify="right", style="dim")
    table.add_column("Work Days", justify="right")
    table.add_column("Work Hours", justify="right", style="cyan")

    for period in periods:
        table.add_row(
            f"{period.year}-{period.month:02d} {calendar.month_abbr[period.month]}",
            period.start_date.strftime(date_format),
            period.end_date.strftime(date_format),
            str(period.calendar_days),
            str(period.work_days),
            str(period.work_hours),
        )

    if len(periods) > 1:
        table.add_section()
        table.add_row(
            "[bold]Total[/bold]", "", "",
            str(sum(p.calendar_days for p in periods)),
            f"[bold]{sum(p.work_days for p in periods)}[/bold]",
            f"[bold]{sum(p.work_hours for p in periods)}[/bold]",
        )

    console.print(table)


def render_pattern(console: Console, year: int, pattern: int, rows: Sequence[PatternRow]) -> None:
    """Render the raw pattern rows that apply to a year."""
    table = Table(title=f"{year}: pattern {pattern}", box=box.SIMPLE_HEAD)
    table.add_column("Month", style="bold")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Work Days", justify="right")

    for row in rows:
        table.add_row(
            calendar.month_abbr[row.month],
            f"{row.start_month:02d}-{row.start_day:02d}",
            f"{row.end_month:02d}-{row.end_day:02d}",
            str(row.work_days),
        )

    console.print(table)
