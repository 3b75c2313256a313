"""AVP values and the Attribute-Value Pair itself (RFC 6733 section 4)."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import ClassVar, Union

from diameter.address import Address
from diameter.flags import AvpFlags
from diameter.ntptime import Time
from diameter.value_types import DiameterIdentity, DiameterURI, Enumerated, IPFilterRule

CODE_SIZE = 4
LENGTH_SIZE = 3
VENDOR_ID_SIZE = 4
_ALIGNMENT = 4
_UINT32_MAX = 0xFFFFFFFF


@dataclass
class OctetString:
    """Arbitrary data of variable length."""

    value: bytes = b""

    def __post_init__(self) -> None:
        if isinstance(self.value, int):
            raise TypeError("OctetString expects bytes or an iterable of octets")
        self.value = bytes(self.value)

    def size(self) -> int:
        return len(self.value)


@dataclass
class _Integer:
    """A fixed-width integer; subclasses set the width and signedness."""

    value: int = 0
    octets: ClassVar[int] = 4
    signed: ClassVar[bool] = True

    def __post_init__(self) -> None:
        self.value = operator.index(self.value)
        bits = self.octets * 8
        if self.signed:
            low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        else:
            low, high = 0, (1 << bits) - 1
        if not low <= self.value <= high:
            raise ValueError(
                f"{type(self).__name__} value {self.value} is out of range [{low}, {high}]"
            )

    def size(self) -> int:
        return self.octets


@dataclass
class Integer32(_Integer):
    """A 32-bit signed integer."""

    octets: ClassVar[int] = 4
    signed: ClassVar[bool] = True

    def size(self) -> int:
        return self.octets


@dataclass
class Integer64(_Integer):
    """A 64-bit signed integer."""

    octets: ClassVar[int] = 8
    signed: ClassVar[bool] = True

    def size(self) -> int:
        return self.octets


@dataclass
class Unsigned32(_Integer):
    """A 32-bit unsigned integer."""

    octets: ClassVar[int] = 4
    signed: ClassVar[bool] = False

    def size(self) -> int:
        return self.octets


@dataclass
class Unsigned64(_Integer):
    """A 64-bit unsigned integer."""

    octets: ClassVar[int] = 8
    signed: ClassVar[bool] = False

    def size(self) -> int:
        return self.octets


@dataclass
class _Float:
    """An IEEE 754 floating point number; subclasses set the width."""

    value: float = 0.0
    octets: ClassVar[int] = 4

    def __post_init__(self) -> None:
        self.value = float(self.value)

    def size(self) -> int:
        return self.octets


@dataclass
class Float32(_Float):
    """A single precision floating point number."""

    octets: ClassVar[int] = 4

    def size(self) -> int:
        return self.octets


@dataclass
class Float64(_Float):
    """A double precision floating point number."""

    octets: ClassVar[int] = 8

    def size(self) -> int:
        return self.octets


@dataclass
class UTF8String:
    """Human-readable text, carried as UTF-8."""

    value: str = ""

    def size(self) -> int:
        return len(self.value.encode("utf-8"))


@dataclass
class Grouped:
    """A sequence of AVPs carried as the data of another AVP."""

    value: list[AVP] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.value = list(self.value)

    def size(self) -> int:
        return sum(avp.size() for avp in self.value)


Value = Union[
    OctetString,
    Integer32,
    Integer64,
    Unsigned32,
    Unsigned64,
    Float32,
    Float64,
    Address,
    Time,
    UTF8String,
    DiameterIdentity,
    DiameterURI,
    Enumerated,
    IPFilterRule,
    Grouped,
]


@dataclass
class AVP:
    """An Attribute-Value Pair: code, flags, optional vendor id and a value."""

    code: int = 0
    flags: AvpFlags = field(default_factory=AvpFlags)
    vendor_id: int | None = None
    value: Value = field(default_factory=OctetString)

    def __post_init__(self) -> None:
        if not 0 <= self.code <= _UINT32_MAX:
            raise ValueError(f"AVP code {self.code} does not fit in four octets")
        if not isinstance(self.flags, AvpFlags):
            self.flags = AvpFlags(self.flags)
        if self.vendor_id is not None and not 0 <= self.vendor_id <= _UINT32_MAX:
            raise ValueError(f"vendor id {self.vendor_id} does not fit in four octets")

    def length(self) -> int:
        """Octets of header and data, without padding, as put in AVP Length."""
        total = CODE_SIZE + self.flags.size() + LENGTH_SIZE
        if self.vendor_id is not None:
            total += VENDOR_ID_SIZE
        return total + self.value.size()

    def padding(self) -> int:
        """Octets needed to align the AVP on a four-octet boundary."""
        return -self.length() % _ALIGNMENT

    def size(self) -> int:
        """Octets the AVP takes on the wire, padding included."""
        return self.length() + self.padding()