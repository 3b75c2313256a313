"""The Address AVP value: an address family plus the raw address octets."""

from __future__ import annotations

import ipaddress
from collections.abc import Iterable
from enum import IntEnum

FAMILY_SIZE = 2
_IPV4_SIZE = 4
_IPV6_SIZE = 16


class AddressFamily(IntEnum):
    """Registered address family numbers."""

    IPV4 = 1
    IPV6 = 2
    NSAP = 3
    HDLC = 4
    BBN1822 = 5
    IEEE802 = 6
    E163 = 7
    E164 = 8
    F69 = 9
    FRAME_RELAY = 10
    IPX = 11
    APPLE_TALK = 12
    DECNET_IV = 13
    BANYAN_VINES = 14
    E164_NSAP = 15
    DNS = 16


def _family(value: int) -> int:
    number = int(value)
    if not 0 <= number <= 0xFFFF:
        raise ValueError(f"address family {number} does not fit in two octets")
    try:
        return AddressFamily(number)
    except ValueError:
        return number


def _pack(family: int, text: str) -> bytes:
    if family == AddressFamily.IPV4:
        try:
            return ipaddress.IPv4Address(text).packed
        except ValueError:
            raise ValueError(f"incorrect IPv4 address: {text!r}") from None
    if family == AddressFamily.IPV6:
        if "%" in text:
            raise ValueError(f"incorrect IPv6 address: {text!r}")
        try:
            return ipaddress.IPv6Address(text).packed
        except ValueError:
            raise ValueError(f"incorrect IPv6 address: {text!r}") from None
    return text.encode("utf-8")


def _format_ipv6(octets: bytes) -> str:
    zero_prefix = octets[:10] == bytes(10)
    if zero_prefix:
        embedded = str(ipaddress.IPv4Address(octets[12:]))
        if octets[10:12] == b"\xff\xff":
            return f"::ffff:{embedded}"
        if octets[10:12] == b"\x00\x00" and octets[12:14] != b"\x00\x00":
            return f"::{embedded}"
    return ipaddress.IPv6Address(octets).compressed


class Address:
    """An address of some family, most significant octet first.

    Built from text, the octets are parsed from it; built from octets,
    ``address_string`` is filled in by :meth:`validate`.
    """

    def __init__(
        self,
        address: str | bytes | bytearray | Iterable[int],
        family: int = AddressFamily.IPV4,
    ) -> None:
        self.family = _family(family)
        self.validated = False
        if isinstance(address, str):
            self.address_string = address
            self.value = _pack(self.family, address)
        else:
            self.address_string = ""
            self.value = bytes(address)

    def size(self) -> int:
        """Octets taken by the family and the address."""
        return len(self.value) + FAMILY_SIZE

    def is_ipv4(self) -> bool:
        return self.family == AddressFamily.IPV4 and len(self.value) == _IPV4_SIZE

    def is_ipv6(self) -> bool:
        return self.family == AddressFamily.IPV6 and len(self.value) == _IPV6_SIZE

    def validate(self) -> bool:
        """Check an IP address's octets and fill in its text form."""
        if self.is_ipv4():
            self.address_string = str(ipaddress.IPv4Address(self.value))
            self.validated = True
        elif self.is_ipv6():
            self.address_string = _format_ipv6(self.value)
            self.validated = True
        return self.validated

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self.family == other.family and self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        shown = self.address_string or self.value.hex()
        return f"Address({shown!r}, family={self.family!r})"