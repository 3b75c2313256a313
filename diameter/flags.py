"""Bit-flag sets used in Diameter headers and AVP headers (RFC 6733)."""

from __future__ import annotations

from enum import IntEnum


class AvpFlag(IntEnum):
    """Bit positions of the AVP flags octet."""

    VENDOR_SPECIFIC = 7
    MANDATORY = 6
    PROTECTED = 5


class CommandFlag(IntEnum):
    """Bit positions of the command flags octet (RFC 6733 section 3)."""

    REQUEST = 7
    PROXIABLE = 6
    ERROR = 5
    RETRANSMITTED = 4


class Flags:
    """A fixed-width set of flags, each flag naming one bit position."""

    flag_type: type[IntEnum] | None = None
    width: int = 8

    def __init__(self, value: int | IntEnum | Flags = 0) -> None:
        if isinstance(value, Flags):
            bits = value._bits
        elif isinstance(value, IntEnum):
            bits = 1 << self._position(value)
        else:
            bits = int(value)
        self._bits = bits & self._mask()

    @classmethod
    def _mask(cls) -> int:
        return (1 << cls.width) - 1

    def _position(self, flag: IntEnum) -> int:
        if self.flag_type is not None and not isinstance(flag, self.flag_type):
            raise TypeError(
                f"{type(self).__name__} expects {self.flag_type.__name__}, got {flag!r}"
            )
        position = int(flag)
        if not 0 <= position < self.width:
            raise IndexError(f"flag position {position} out of range")
        return position

    def set(self, flag: IntEnum, value: bool = True) -> Flags:
        """Set or clear one flag; returns self."""
        bit = 1 << self._position(flag)
        if value:
            self._bits |= bit
        else:
            self._bits &= ~bit
        return self

    def reset(self, flag: IntEnum) -> Flags:
        """Clear one flag; returns self."""
        return self.set(flag, False)

    def clear(self) -> Flags:
        """Clear every flag; returns self."""
        self._bits = 0
        return self

    def all(self) -> bool:
        return self._bits == self._mask()

    def any(self) -> bool:
        return self._bits != 0

    def none(self) -> bool:
        return self._bits == 0

    def count(self) -> int:
        return bin(self._bits).count("1")

    def size(self) -> int:
        """Number of octets the flags take on the wire."""
        for octets in (1, 2, 4, 8):
            if self.width <= octets * 8:
                return octets
        raise ValueError("Too big flag value")

    def data(self) -> int:
        """The flags as an unsigned integer."""
        return self._bits

    def __int__(self) -> int:
        return self._bits

    def __getitem__(self, flag: IntEnum) -> bool:
        return bool(self._bits >> self._position(flag) & 1)

    def _combine(self, other: object, bits: int | None) -> Flags:
        return type(self)(bits)

    def __or__(self, other: object) -> Flags:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self._bits | other._bits)

    def __and__(self, other: object) -> Flags:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self._bits & other._bits)

    def __xor__(self, other: object) -> Flags:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self._bits ^ other._bits)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.flag_type is None:
            return f"{type(self).__name__}(0x{self._bits:02x})"
        names = [flag.name for flag in self.flag_type if self[flag]]
        return f"{type(self).__name__}({'|'.join(names) or '0'})"


class AvpFlags(Flags):
    """The flags octet of an AVP header."""

    flag_type = AvpFlag
    width = 8


class CommandFlags(Flags):
    """The command flags octet of a message header."""

    flag_type = CommandFlag
    width = 8