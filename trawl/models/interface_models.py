"""Pydantic models for network interface records."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class InterfaceDescriptor(BaseModel):
    """Raw interface data as reported by the operating system."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Interface name (e.g., 'eth0', 'en0')")
    hardware_addr: str = Field(
        "", description="Link-layer address, empty when the interface has none"
    )
    mtu: int = Field(0, description="Maximum transmission unit")
    addresses: list[str] = Field(
        default_factory=list,
        description="Addresses in 'address/prefixLen' form, in OS order",
    )


# ============================================================================
# Interface Records
# ============================================================================


class Ipv4Interface(BaseModel):
    """An interface with an IPv4 address and optionally an IPv6 address."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["ipv4"] = "ipv4"
    name: str = Field(..., description="Interface name")
    hardware_addr: str = Field("", description="Link-layer (MAC) address")
    ipv4_addr: str = Field(..., min_length=1, description="IPv4 address")
    ipv4_mask: str = Field(
        ..., min_length=1, description="Dotted-decimal subnet mask"
    )
    ipv4_network: str = Field(
        ..., min_length=1, description="Network address in CIDR notation"
    )
    ipv6_addr: str = Field("", description="IPv6 address with prefix length")
    mtu: int = Field(0, description="Maximum transmission unit")


class Ipv6OnlyInterface(BaseModel):
    """An interface without any IPv4 address."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["ipv6_only"] = "ipv6_only"
    name: str = Field(..., description="Interface name")
    ipv6_addr: str = Field("", description="IPv6 address with prefix length")


InterfaceRecord = Annotated[
    Ipv4Interface | Ipv6OnlyInterface, Field(discriminator="kind")
]


class InterfaceListing(BaseModel):
    """Top-level export for the list command."""

    hostname: str = Field(..., description="System hostname")
    platform: str = Field(..., description="Column layout used for display")
    interfaces: list[InterfaceRecord] = Field(
        default_factory=list, description="Interfaces in enumeration order"
    )
