"""Tests for address family classification."""

from trawl.core.addresses import classify_addresses


def test_one_of_each_family():
    """Test an IPv4 and an IPv6 address are split regardless of order."""
    expected = ("192.168.1.5/24", "fe80::1/64")

    assert classify_addresses(["192.168.1.5/24", "fe80::1/64"]) == expected
    assert classify_addresses(["fe80::1/64", "192.168.1.5/24"]) == expected


def test_empty():
    """Test an empty address list yields two empty strings."""
    assert classify_addresses([]) == ("", "")


def test_last_address_wins():
    """Test only the last address of each family is kept."""
    ipv4, ipv6 = classify_addresses(
        ["10.0.0.1/8", "fe80::1/64", "10.0.0.2/8", "2001:db8::1/64"]
    )

    assert ipv4 == "10.0.0.2/8"
    assert ipv6 == "2001:db8::1/64"


def test_single_family():
    """Test a missing family is returned as an empty string."""
    assert classify_addresses(["127.0.0.1/8"]) == ("127.0.0.1/8", "")
    assert classify_addresses(["::1/128"]) == ("", "::1/128")


def test_unrecognized_entries_ignored():
    """Test entries with neither a colon nor a period are skipped."""
    assert classify_addresses(["garbage", "10.1.1.1/24", "x"]) == ("10.1.1.1/24", "")


def test_mixed_notation_matches_both():
    """Test an IPv4-mapped IPv6 address satisfies both checks."""
    mapped = "::ffff:192.0.2.1/96"

    assert classify_addresses([mapped]) == (mapped, mapped)


def test_accepts_any_iterable():
    """Test a generator of addresses is consumed."""
    addrs = (a for a in ["fe80::2/64", "172.16.0.9/12"])

    assert classify_addresses(addrs) == ("172.16.0.9/12", "fe80::2/64")
