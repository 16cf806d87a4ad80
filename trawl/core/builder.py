"""Build interface records from raw OS interface data."""

from __future__ import annotations

import ipaddress
from collections.abc import Sequence

from trawl.core.addresses import classify_addresses
from trawl.core.mask import to_dotted_decimal
from trawl.exceptions import AddressParseError
from trawl.models.interface_models import (
    InterfaceDescriptor,
    InterfaceRecord,
    Ipv4Interface,
    Ipv6OnlyInterface,
)


def build_interface(
    name: str,
    hardware_addr: str,
    mtu: int,
    addresses: Sequence[str],
) -> InterfaceRecord:
    """Build an interface record from its name, MAC, MTU and address list.

    An interface without any IPv4 address yields an Ipv6OnlyInterface that
    carries only the name and IPv6 address.

    Args:
        name: OS-assigned interface name.
        hardware_addr: Link-layer address, may be empty.
        mtu: Maximum transmission unit.
        addresses: Address strings in 'address/prefixLen' form.

    Returns
    -------
        Ipv4Interface or Ipv6OnlyInterface.

    Raises
    ------
        AddressParseError: If the IPv4 address has no prefix or does not
            parse as a CIDR.
        InvalidMaskError: If the IPv4 prefix is not an integer in [0, 32].
    """
    ipv4, ipv6 = classify_addresses(addresses)

    if not ipv4:
        return Ipv6OnlyInterface(name=name, ipv6_addr=ipv6)

    parts = ipv4.split("/")
    if len(parts) < 2:
        raise AddressParseError(ipv4, "missing prefix length")
    ipv4_addr, prefix = parts[0], parts[1]

    ipv4_mask = to_dotted_decimal(prefix)

    try:
        network = ipaddress.ip_network(ipv4, strict=False)
    except ValueError as e:
        raise AddressParseError(ipv4, str(e)) from e

    return Ipv4Interface(
        name=name,
        hardware_addr=hardware_addr,
        ipv4_addr=ipv4_addr,
        ipv4_mask=ipv4_mask,
        ipv4_network=str(network),
        ipv6_addr=ipv6,
        mtu=mtu,
    )


def build_from_descriptor(descriptor: InterfaceDescriptor) -> InterfaceRecord:
    """Build an interface record from an InterfaceDescriptor."""
    return build_interface(
        descriptor.name,
        descriptor.hardware_addr,
        descriptor.mtu,
        descriptor.addresses,
    )
