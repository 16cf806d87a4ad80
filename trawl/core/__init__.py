"""Core interface processing: classify, convert, build and format."""

from trawl.core.addresses import classify_addresses
from trawl.core.builder import build_from_descriptor, build_interface
from trawl.core.formatter import (
    Platform,
    detect_platform,
    format_header,
    format_interface,
)
from trawl.core.mask import to_dotted_decimal

__all__ = [
    "Platform",
    "build_from_descriptor",
    "build_interface",
    "classify_addresses",
    "detect_platform",
    "format_header",
    "format_interface",
    "to_dotted_decimal",
]
