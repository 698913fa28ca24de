"""Pay period CLI commands for calpay."""

import json
import logging
from datetime import date

import click
import yaml
from rich.console import Console

from calpay.sdk import (
    OutOfRangeError,
    OUTPUT_FORMATS,
    get_pay_period,
    get_pay_periods,
    get_setting,
    resolve_pattern_number,
    resolve_year_patterns,
    validate_year,
)
from .renderers.period_renderer import render_pattern, render_pay_periods


def _format_option(f):
    return click.option(
        "--format", "output_format", type=click.Choice(OUTPUT_FORMATS), default=None,
        help="Output format (default: output_format setting, else table)",
    )(f)


def _debug_option(f):
    return click.option("--debug", is_flag=True, help="Show lookup decisions.")(f)


def _enable_debug(debug: bool) -> None:
    if debug:
        logging.getLogger("calpay").setLevel(logging.DEBUG)


def _emit_periods(periods, output_format, title=None):
    """Write periods in the requested (or configured) format."""
    output_format = output_format or get_setting("output_format")
    data = [p.to_dict() for p in periods]

    if output_format == "json":
        click.echo(json.dumps(data, indent=2))
    elif output_format == "yaml":
        click.echo(yaml.safe_dump(data, sort_keys=False), nl=False)
    else:
        render_pay_periods(Console(), periods, get_setting("date_format"), title=title)


@click.command("periods")
@click.argument("year", type=int)
@click.argument("month", type=int, required=False)
@_format_option
@_debug_option
def periods_cmd(year: int, month: int, output_format: str, debug: bool):
    """List the pay periods for YEAR, or only MONTH (1-12).

    \b
    Examples:
      calpay periods 2025
      calpay periods 2025 6 --format json
    """
    _enable_debug(debug)
    try:
        periods = get_pay_periods(year, month)
    except OutOfRangeError as e:
        raise click.BadParameter(str(e), param_hint=e.name.upper())

    _emit_periods(periods, output_format, title=f"Pay periods {year}")


@click.command("lookup")
@click.argument("day", metavar="DATE")
@_format_option
@_debug_option
def lookup_cmd(day: str, output_format: str, debug: bool):
    """Find the pay period containing DATE (YYYY-MM-DD or 'today').

    \b
    Examples:
      calpay lookup 2025-03-01
      calpay lookup today
    """
    _enable_debug(debug)
    if day.lower() == "today":
        target = date.today()
    else:
        try:
            target = date.fromisoformat(day)
        except ValueError:
            raise click.BadParameter(f"Invalid date '{day}'. Expected YYYY-MM-DD.", param_hint="DATE")

    try:
        period = get_pay_period(target)
    except OutOfRangeError as e:
        raise click.BadParameter(str(e), param_hint="DATE")

    _emit_periods([period], output_format, title=f"Pay period for {target.isoformat()}")


@click.command("pattern")
@click.argument("year", type=int)
def pattern_cmd(year: int):
    """Show the SAM 8500 pattern rows in effect for YEAR."""
    try:
        validate_year(year)
    except OutOfRangeError as e:
        raise click.BadParameter(str(e), param_hint="YEAR")

    render_pattern(Console(), year, resolve_pattern_number(year), resolve_year_patterns(year))
