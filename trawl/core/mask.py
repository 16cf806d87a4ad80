"""CIDR prefix length to dotted-decimal subnet mask conversion."""

from __future__ import annotations

import re

from trawl.exceptions import InvalidMaskError

# Octet value for a partially set byte, indexed by the number of leading ones
_PARTIAL_OCTETS = ["", "128", "192", "224", "240", "248", "252", "254", "255"]

_INT_LITERAL = re.compile(r"[+-]?[0-9]+")

IPV4_MAX_PREFIX = 32


def _parse_prefix(prefix_len: int | str) -> int:
    """Coerce a prefix length given as an int or a decimal literal."""
    if isinstance(prefix_len, bool):
        raise InvalidMaskError(prefix_len)
    if isinstance(prefix_len, int):
        return prefix_len
    if isinstance(prefix_len, str) and _INT_LITERAL.fullmatch(prefix_len):
        return int(prefix_len)
    raise InvalidMaskError(prefix_len)


def to_dotted_decimal(prefix_len: int | str) -> str:
    """Convert an IPv4 prefix length into a dotted-decimal mask.

    Args:
        prefix_len: Prefix length as an int or a decimal string such as "24".

    Returns
    -------
        Subnet mask, e.g. "255.255.255.0" for 24.

    Raises
    ------
        InvalidMaskError: If the value is not an integer in [0, 32].
    """
    n = _parse_prefix(prefix_len)
    if n < 0 or n > IPV4_MAX_PREFIX:
        raise InvalidMaskError(prefix_len)

    all_ones = n // 8
    some_ones = n % 8
    mask = ["0"] * 4

    for i in range(all_ones):
        mask[i] = "255"

    if _PARTIAL_OCTETS[some_ones]:
        mask[all_ones] = _PARTIAL_OCTETS[some_ones]

    return ".".join(mask)
