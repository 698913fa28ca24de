"""Calpay CLI - California State monthly pay periods."""

import click

from calpay import __version__

from .periods_commands import periods_cmd, lookup_cmd, pattern_cmd
from .settings_commands import settings as settings_group


@click.group()
@click.version_option(version=__version__, prog_name="calpay")
def cli():
    """Calpay - California State monthly pay periods (1994-2299).

    Pay periods follow the State Administrative Manual section 8500
    pattern tables.

    Settings are loaded from (in order):

    \b
    1. CALPAY_CONFIG_PATH environment variable
    2. ~/.config/calpay/settings.json (XDG default)
    """
    pass


cli.add_command(periods_cmd)
cli.add_command(lookup_cmd)
cli.add_command(pattern_cmd)
cli.add_command(settings_group)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
