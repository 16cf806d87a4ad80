"""Address family selection for interface address lists."""

from __future__ import annotations

from collections.abc import Iterable


def classify_addresses(addresses: Iterable[str]) -> tuple[str, str]:
    """Pick one IPv4 and one IPv6 address out of an interface's address list.

    The OS makes no promise about the order of addresses, so every entry is
    scanned. An entry containing ``:`` is taken as IPv6 and an entry
    containing ``.`` as IPv4; the two checks are independent. When several
    addresses of a family are present the last one wins.

    Args:
        addresses: CIDR strings such as ``"192.168.1.5/24"`` or
            ``"fe80::1/64"``.

    Returns
    -------
        Tuple of (ipv4, ipv6). A family with no match is returned as "".
    """
    ipv4 = ""
    ipv6 = ""
    for address in addresses:
        if ":" in address:
            ipv6 = address
        if "." in address:
            ipv4 = address
    return ipv4, ipv6
