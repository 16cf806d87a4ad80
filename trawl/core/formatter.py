"""Fixed-width text rendering of interface records."""

from __future__ import annotations

import platform as _platform
from enum import Enum

from trawl.models.interface_models import InterfaceRecord, Ipv4Interface


class Platform(Enum):
    """Column layout for the interface name field."""

    OTHER = "other"
    WINDOWS_LIKE = "windows"

    @property
    def name_width(self) -> int:
        """Width of the interface name column."""
        # Windows reports long GUID-style interface names
        return 35 if self is Platform.WINDOWS_LIKE else 10


HEADER_FIELDS = (
    "Name",
    "IPv4 Address",
    "IPv4 Mask",
    "IPv4 Network",
    "MTU",
    "MAC Address",
    "IPv6 Address",
)


def detect_platform() -> Platform:
    """Select the column layout for the host operating system."""
    if _platform.system() == "Windows":
        return Platform.WINDOWS_LIKE
    return Platform.OTHER


def _render(
    platform: Platform,
    name: str,
    ipv4_addr: str,
    ipv4_mask: str,
    ipv4_network: str,
    mtu: int | str,
    hardware_addr: str,
    ipv6_addr: str,
) -> str:
    width = platform.name_width
    return (
        f"{name:<{width}}  {ipv4_addr:<15}  {ipv4_mask:<15}  "
        f"{ipv4_network:<18}  {mtu:>4}  {hardware_addr:>17}  {ipv6_addr}"
    )


def format_interface(
    record: InterfaceRecord, platform: Platform = Platform.OTHER
) -> str:
    """Render an interface record as a single aligned line.

    Columns: name, IPv4 address, IPv4 mask, IPv4 network, MTU (right
    aligned), hardware address (right aligned), IPv6 address.

    Args:
        record: Ipv4Interface or Ipv6OnlyInterface.
        platform: Column layout, chosen once by the caller.

    Returns
    -------
        Formatted line without a trailing newline.
    """
    if isinstance(record, Ipv4Interface):
        return _render(
            platform,
            record.name,
            record.ipv4_addr,
            record.ipv4_mask,
            record.ipv4_network,
            record.mtu,
            record.hardware_addr,
            record.ipv6_addr,
        )
    return _render(platform, record.name, "", "", "", 0, "", record.ipv6_addr)


def format_header(platform: Platform = Platform.OTHER) -> str:
    """Render the column titles with the same widths as format_interface."""
    return _render(platform, *HEADER_FIELDS)
