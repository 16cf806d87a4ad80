"""Network backend - enumerates interfaces and their addresses using psutil."""

from __future__ import annotations

import ipaddress
import socket

import psutil

from trawl.core.builder import build_from_descriptor
from trawl.exceptions import AddressEnumerationError
from trawl.models.interface_models import InterfaceDescriptor, InterfaceRecord
from trawl.utils.logger import Logger


def _ipv4_cidr(address: str, netmask: str | None) -> str:
    """Render an IPv4 address as 'address/prefixLen'.

    A missing netmask leaves the bare address.
    """
    if not netmask:
        return address
    prefix = ipaddress.IPv4Network(f"0.0.0.0/{netmask}").prefixlen
    return f"{address}/{prefix}"


def _ipv6_cidr(address: str, netmask: str | None) -> str:
    """Render an IPv6 address as 'address/prefixLen' without its scope id."""
    address = address.split("%")[0]
    if not netmask:
        return f"{address}/128"
    # IPv6Network only takes prefix lengths, not netmask strings
    prefix = bin(int(ipaddress.IPv6Address(netmask))).count("1")
    return f"{address}/{prefix}"


def _normalize_mac(address: str) -> str:
    """Lowercase, colon-separated MAC; any all-zero address becomes ''."""
    mac = address.replace("-", ":").lower()
    # Tunnel devices report zero addresses of 4 or 16 octets
    if all(octet == "00" for octet in mac.split(":")):
        return ""
    return mac


class Network:
    """Network interface directory backed by psutil.

    Supplies, per interface, its name, hardware address, MTU and addresses
    in 'address/prefixLen' form, and builds interface records from them.
    """

    @staticmethod
    def list_interface_names() -> list[str]:
        """List interface names in the order the OS reports them.

        Raises
        ------
            AddressEnumerationError: If the OS cannot enumerate interfaces.
        """
        try:
            return list(psutil.net_if_addrs())
        except OSError as e:
            raise AddressEnumerationError("all interfaces", str(e)) from e

    @staticmethod
    def is_loopback(name: str) -> bool:
        """Check whether an interface name denotes a loopback interface."""
        return name.startswith("lo")

    @staticmethod
    def get_descriptor(name: str) -> InterfaceDescriptor:
        """Collect the raw data for a single interface.

        Args:
            name: Interface name (e.g., 'eth0', 'en0').

        Returns
        -------
            InterfaceDescriptor with addresses in OS order.

        Raises
        ------
            AddressEnumerationError: If the interface does not exist or
                psutil fails to read it.
        """
        try:
            all_addrs = psutil.net_if_addrs()
            stats = psutil.net_if_stats()
        except OSError as e:
            raise AddressEnumerationError(name, str(e)) from e

        if name not in all_addrs:
            raise AddressEnumerationError(name, "No such device")

        addresses = []
        hardware_addr = ""
        try:
            for addr in all_addrs[name]:
                if addr.family == socket.AF_INET:
                    addresses.append(_ipv4_cidr(addr.address, addr.netmask))
                elif addr.family == socket.AF_INET6:
                    addresses.append(_ipv6_cidr(addr.address, addr.netmask))
                elif addr.family == psutil.AF_LINK and addr.address:
                    hardware_addr = _normalize_mac(addr.address)
        except ValueError as e:
            raise AddressEnumerationError(name, f"bad netmask: {e}") from e

        if_stats = stats.get(name)
        mtu = if_stats.mtu if if_stats else 0

        Logger.debug(
            "backends.network",
            f"{name}: mac={hardware_addr or '-'} mtu={mtu} addresses={addresses}",
        )

        return InterfaceDescriptor(
            name=name, hardware_addr=hardware_addr, mtu=mtu, addresses=addresses
        )

    @staticmethod
    def get_interface(name: str) -> InterfaceRecord:
        """Build the interface record for a single interface.

        Raises
        ------
            AddressEnumerationError: If the interface cannot be read.
            AddressParseError: If its IPv4 address cannot be parsed.
        """
        return build_from_descriptor(Network.get_descriptor(name))
