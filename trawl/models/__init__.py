"""Pydantic models for structured output."""

from trawl.models.interface_models import (
    InterfaceDescriptor,
    InterfaceListing,
    InterfaceRecord,
    Ipv4Interface,
    Ipv6OnlyInterface,
)

__all__ = [
    "InterfaceDescriptor",
    "InterfaceListing",
    "InterfaceRecord",
    "Ipv4Interface",
    "Ipv6OnlyInterface",
]
