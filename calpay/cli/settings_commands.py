"""Settings CLI commands for calpay.

Manages settings.json - output preferences.
"""

import click

from calpay.sdk import (
    SettingsError,
    load_settings,
    get_setting,
    set_setting,
    unset_setting,
    get_settings_path,
)
from calpay.sdk.config import DEFAULT_SETTINGS


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - output_format: table, json or yaml
    - date_format: strftime pattern for table dates
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their effective values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    click.echo("Effective settings:")
    for key in DEFAULT_SETTINGS:
        source = "" if key in current else " (default)"
        click.echo(f"  {key}: {get_setting(key)}{source}")


@settings.command("set")
@click.argument("key")
@click.argument("value")
def settings_set(key: str, value: str):
    """Set KEY to VALUE.

    \b
    Examples:
      calpay settings set output_format json
      calpay settings set date_format %m/%d/%Y
    """
    try:
        path = set_setting(key, value)
    except SettingsError as e:
        raise click.ClickException(str(e))

    click.echo(f"Set {key}: {value}")
    click.echo(f"Saved to: {path}")


@settings.command("unset")
@click.argument("key")
def settings_unset(key: str):
    """Clear KEY, reverting it to its default."""
    if unset_setting(key):
        click.echo(f"Cleared {key} setting.")
    else:
        click.echo(f"{key} was not set.")
