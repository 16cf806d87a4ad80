"""List command - displays one aligned line per network interface."""

import random
import socket
import string
import sys
from datetime import datetime
from pathlib import Path

from trawl.backends.network import Network
from trawl.core.formatter import (
    Platform,
    detect_platform,
    format_header,
    format_interface,
)
from trawl.exceptions import AddressEnumerationError, TrawlError
from trawl.models.interface_models import InterfaceListing, InterfaceRecord
from trawl.utils.logger import Logger

PLATFORM_CHOICES = ("auto", "other", "windows")


def random_string(length: int) -> str:
    """Generate random uppercase string for unique filenames."""
    chars = string.ascii_uppercase
    return "".join(random.choice(chars) for _ in range(length))


def resolve_platform(choice: str) -> Platform:
    """Map a --platform choice to a column layout.

    "auto" inspects the host; any other value names the layout directly.
    """
    if choice == "auto":
        return detect_platform()
    return Platform(choice)


def _select_names(
    names: list[str],
    interface: str | None,
    name_filter: str | None,
    skip_loopback: bool,
) -> list[str]:
    """Apply the list command's name filters, keeping OS order."""
    selected = []
    for name in names:
        if interface is not None and name != interface:
            continue
        if name_filter and name_filter not in name:
            continue
        if skip_loopback and Network.is_loopback(name):
            continue
        selected.append(name)
    return selected


def _export(
    records: list[InterfaceRecord], platform: Platform, export_filename: str | None
) -> Path:
    """Write the listing as JSON and return the file path."""
    if not export_filename:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        export_filename = f"trawl_list_{timestamp}_{random_string(6)}.json"

    listing = InterfaceListing(
        hostname=socket.gethostname(),
        platform=platform.value,
        interfaces=records,
    )
    output_path = Path(export_filename)
    output_path.write_text(listing.model_dump_json(indent=2))
    return output_path


def run_list(
    interface: str | None = None,
    name_filter: str | None = None,
    names_only: bool = False,
    header: bool = False,
    skip_loopback: bool = False,
    platform: Platform = Platform.OTHER,
    export_format: str | None = None,
    export_filename: str | None = None,
) -> int:
    """Print interface information and return the process exit status.

    An interface that fails to enumerate or parse is reported on stderr and
    skipped; the rest are still listed.

    Args:
        interface: Show only this interface.
        name_filter: Show only interfaces whose name contains this text.
        names_only: Print interface names instead of full lines.
        header: Print a column header before the first line.
        skip_loopback: Omit loopback interfaces.
        platform: Column layout for the name field.
        export_format: "json" to also export the listing, None otherwise.
        export_filename: Export path; a timestamped name is used when None.

    Returns:
        0 on success, 1 if the requested interface does not exist or the
        interfaces cannot be enumerated at all.
    """
    log = Logger.get("commands.list")
    backend = Network()

    try:
        all_names = backend.list_interface_names()
    except AddressEnumerationError as e:
        log.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if interface is not None and interface not in all_names:
        print(
            f"{interface}: error fetching interface information: No such device",
            file=sys.stderr,
        )
        return 1

    names = _select_names(all_names, interface, name_filter, skip_loopback)
    log.debug(f"Listing {len(names)} of {len(all_names)} interfaces")

    if names_only:
        for name in names:
            print(name)
        return 0

    if header:
        print(format_header(platform))

    records: list[InterfaceRecord] = []
    for name in names:
        try:
            record = backend.get_interface(name)
        except TrawlError as e:
            log.warning(f"Skipping {name}: {e}")
            print(f"{name}: {e}", file=sys.stderr)
            continue
        records.append(record)
        print(format_interface(record, platform), flush=True)

    if export_format == "json":
        output_path = _export(records, platform, export_filename)
        print(f"\n✓ JSON exported to: {output_path}")
    elif export_format:
        raise NotImplementedError(f"Export format not implemented: {export_format}")

    return 0
