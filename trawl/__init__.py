"""Trawl - list local network interfaces as aligned columns."""

from trawl.backends.network import Network
from trawl.core import (
    Platform,
    build_from_descriptor,
    build_interface,
    classify_addresses,
    detect_platform,
    format_header,
    format_interface,
    to_dotted_decimal,
)
from trawl.exceptions import (
    AddressEnumerationError,
    AddressParseError,
    InvalidMaskError,
    TrawlError,
)
from trawl.models import (
    InterfaceDescriptor,
    InterfaceListing,
    InterfaceRecord,
    Ipv4Interface,
    Ipv6OnlyInterface,
)
from trawl.version.trawl_version import TRAWL_VERSION, Version

__version__ = str(TRAWL_VERSION)
__version_info__ = TRAWL_VERSION

__all__ = [
    "AddressEnumerationError",
    "AddressParseError",
    "InterfaceDescriptor",
    "InterfaceListing",
    "InterfaceRecord",
    "InvalidMaskError",
    "Ipv4Interface",
    "Ipv6OnlyInterface",
    "Network",
    "Platform",
    "TRAWL_VERSION",
    "TrawlError",
    "Version",
    "__version__",
    "__version_info__",
    "build_from_descriptor",
    "build_interface",
    "classify_addresses",
    "detect_platform",
    "format_header",
    "format_interface",
    "to_dotted_decimal",
]
