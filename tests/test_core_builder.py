"""Tests for building interface records."""

import pytest

from trawl.core.builder import build_from_descriptor, build_interface
from trawl.exceptions import AddressParseError, InvalidMaskError
from trawl.models.interface_models import (
    InterfaceDescriptor,
    Ipv4Interface,
    Ipv6OnlyInterface,
)


class TestBuildInterface:
    """Tests for build_interface."""

    def test_ipv4_only(self):
        """Test a plain IPv4 interface."""
        record = build_interface("eth0", "aa:bb:cc:dd:ee:ff", 1500, ["10.0.0.5/24"])

        assert isinstance(record, Ipv4Interface)
        assert record.name == "eth0"
        assert record.hardware_addr == "aa:bb:cc:dd:ee:ff"
        assert record.ipv4_addr == "10.0.0.5"
        assert record.ipv4_mask == "255.255.255.0"
        assert record.ipv4_network == "10.0.0.0/24"
        assert record.mtu == 1500
        assert record.ipv6_addr == ""

    def test_dual_stack(self):
        """Test an interface with both address families."""
        record = build_interface(
            "wlan0",
            "11:22:33:44:55:66",
            1500,
            ["fe80::1c2a:3bff:fe4d:5e6f/64", "192.168.1.42/22"],
        )

        assert isinstance(record, Ipv4Interface)
        assert record.ipv4_addr == "192.168.1.42"
        assert record.ipv4_mask == "255.255.252.0"
        assert record.ipv4_network == "192.168.0.0/22"
        assert record.ipv6_addr == "fe80::1c2a:3bff:fe4d:5e6f/64"

    def test_ipv6_only(self):
        """Test an interface with no IPv4 address keeps only name and IPv6."""
        record = build_interface("wlan0", "", 0, ["fe80::1/64"])

        assert isinstance(record, Ipv6OnlyInterface)
        assert record.name == "wlan0"
        assert record.ipv6_addr == "fe80::1/64"
        assert not hasattr(record, "ipv4_addr")
        assert not hasattr(record, "mtu")

    def test_ipv6_only_drops_hardware_and_mtu(self):
        """Test hardware address and MTU are not carried without IPv4."""
        record = build_interface("tun0", "aa:bb:cc:dd:ee:ff", 1280, ["2001:db8::5/64"])

        assert record == Ipv6OnlyInterface(name="tun0", ipv6_addr="2001:db8::5/64")

    def test_no_addresses(self):
        """Test an interface without addresses yields an empty IPv6-only record."""
        record = build_interface("dummy0", "", 1500, [])

        assert record == Ipv6OnlyInterface(name="dummy0", ipv6_addr="")

    def test_host_route(self):
        """Test a /32 address is its own network."""
        record = build_interface("lo", "", 65536, ["127.0.0.1/32"])

        assert record.ipv4_mask == "255.255.255.255"
        assert record.ipv4_network == "127.0.0.1/32"

    def test_missing_prefix(self):
        """Test an IPv4 address without a prefix length is rejected."""
        with pytest.raises(AddressParseError, match="missing prefix length"):
            build_interface("eth0", "", 1500, ["10.0.0.5"])

    def test_invalid_prefix(self):
        """Test an out-of-range prefix raises InvalidMaskError."""
        with pytest.raises(InvalidMaskError):
            build_interface("eth0", "", 1500, ["10.0.0.5/40"])

    def test_unparseable_address(self):
        """Test an address that is not an IPv4 literal is rejected."""
        with pytest.raises(AddressParseError) as excinfo:
            build_interface("eth0", "", 1500, ["10.0.0.300/24"])
        assert excinfo.value.address == "10.0.0.300/24"
        assert not isinstance(excinfo.value, InvalidMaskError)


def test_build_from_descriptor():
    """Test building from an InterfaceDescriptor."""
    descriptor = InterfaceDescriptor(
        name="en0",
        hardware_addr="de:ad:be:ef:00:01",
        mtu=9000,
        addresses=["172.16.5.4/16", "fe80::de:adff:febe:ef00/64"],
    )

    record = build_from_descriptor(descriptor)

    assert record == Ipv4Interface(
        name="en0",
        hardware_addr="de:ad:be:ef:00:01",
        ipv4_addr="172.16.5.4",
        ipv4_mask="255.255.0.0",
        ipv4_network="172.16.0.0/16",
        ipv6_addr="fe80::de:adff:febe:ef00/64",
        mtu=9000,
    )
