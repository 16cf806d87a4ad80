#!/usr/bin/env python3
"""Trawl CLI - Command-line interface for Trawl."""

import sys

import click

from trawl.commands.list_cmd import PLATFORM_CHOICES, resolve_platform, run_list
from trawl.utils.env import get_env
from trawl.utils.logger import Logger


@click.group()
def trawl():
    """Trawl lists local network interfaces as aligned columns."""
    if not Logger.is_configured():
        Logger.configure(level=get_env("TRAWL_LOG_LEVEL", default="WARNING"))


@trawl.command(name="list")
@click.option("--interface", "-i", default=None, help="Show only this interface")
@click.option(
    "--filter",
    "-f",
    "name_filter",
    default=None,
    help="Show interfaces whose name contains this text",
)
@click.option("--names", "-n", is_flag=True, help="Print interface names only")
@click.option("--header", "-H", is_flag=True, help="Print a column header line")
@click.option("--skip-loopback", is_flag=True, help="Omit loopback interfaces")
@click.option(
    "--platform",
    type=click.Choice(PLATFORM_CHOICES),
    default=lambda: get_env("TRAWL_PLATFORM", default="auto"),
    show_default="auto, or $TRAWL_PLATFORM",
    help="Column layout for the interface name field",
)
@click.option(
    "--export",
    is_flag=True,
    default=False,
    help=(
        "Export results to JSON file with default filename "
        "(trawl_list_TIMESTAMP.json)"
    ),
)
@click.option(
    "--export-file",
    default=None,
    help="Export results to JSON file with custom filename",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def list_interfaces(
    interface,
    name_filter,
    names,
    header,
    skip_loopback,
    platform,
    export,
    export_file,
    verbose,
):
    r"""List network interfaces, one line each.

    \b
    Columns: name, IPv4 address, mask, network, MTU, MAC, IPv6 address.

    \b
    Examples:
      trawl list                     # All interfaces
      trawl list -i eth0             # A single interface
      trawl list -f wl --header      # Names containing "wl", with header
      trawl list --export            # Also write JSON
    """
    if verbose:
        Logger.set_level("DEBUG")

    if export_file:
        export_format = "json"
        export_filename = export_file
    elif export:
        export_format = "json"
        export_filename = None
    else:
        export_format = None
        export_filename = None

    exit_code = run_list(
        interface=interface,
        name_filter=name_filter,
        names_only=names,
        header=header,
        skip_loopback=skip_loopback,
        platform=resolve_platform(platform),
        export_format=export_format,
        export_filename=export_filename,
    )
    if exit_code:
        sys.exit(exit_code)


@trawl.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display trawl version information."""
    from trawl.commands.version_cmd import run_version

    run_version(verbose=verbose)


if __name__ == "__main__":
    trawl()
