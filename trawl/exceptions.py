"""Exceptions raised while enumerating and parsing network interfaces."""


class TrawlError(Exception):
    """Base exception for trawl errors."""

    pass


class AddressEnumerationError(TrawlError):
    """Raised when the OS fails to list addresses for an interface."""

    def __init__(self, interface: str, reason: str) -> None:
        self.interface = interface
        self.reason = reason
        super().__init__(f"Cannot list addresses for {interface}: {reason}")


class AddressParseError(TrawlError):
    """Raised when an IPv4 CIDR string cannot be parsed."""

    def __init__(self, address: str, reason: str) -> None:
        self.address = address
        self.reason = reason
        super().__init__(f"Cannot parse address '{address}': {reason}")


class InvalidMaskError(AddressParseError):
    """Raised when a CIDR prefix length is not an integer in [0, 32]."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(str(value), f"Not a valid network mask: {value}")
