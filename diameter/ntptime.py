"""The Time AVP value: NTP seconds since 1900 with an era number."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

NTP_UNIX_OFFSET = (70 * 365 + 17) * 86400
_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ERA_SPAN = 1 << 32
_TIMESTAMP_LIMIT = 1 << 63


class Time:
    """Four octets of NTP seconds plus the era they belong to.

    Without an explicit era, a value with its top bit clear is taken to be in
    era 1 (after 2036-02-07), as RFC 5905 extends the range to 2104.
    """

    def __init__(self, ntp: int, era: int | None = None) -> None:
        if not 0 <= ntp < _ERA_SPAN:
            raise ValueError(f"NTP seconds {ntp} do not fit in four octets")
        self.value = ntp
        if era is None:
            era = 0 if ntp & 0x8000_0000 else 1
        if era < 0:
            raise ValueError(f"era {era} is negative")
        self.era = era

    @classmethod
    def from_datetime(cls, moment: datetime) -> Time:
        """Build from a datetime; a naive one is taken to be UTC."""
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        seconds = (moment - _UNIX_EPOCH) // timedelta(seconds=1)
        if not 0 <= seconds < _TIMESTAMP_LIMIT:
            raise ValueError("Unix timestamp out of range for an NTP time")
        ntp = seconds + NTP_UNIX_OFFSET
        return cls(ntp & (_ERA_SPAN - 1), ntp >> 32)

    def to_datetime(self) -> datetime:
        """The moment as an aware UTC datetime."""
        seconds = (self.era << 32) + self.value - NTP_UNIX_OFFSET
        if not 0 <= seconds < _TIMESTAMP_LIMIT:
            raise ValueError("NTP time out of range for a Unix timestamp")
        try:
            return _UNIX_EPOCH + timedelta(seconds=seconds)
        except OverflowError:
            raise ValueError("NTP time out of range for a datetime") from None

    def size(self) -> int:
        """Octets the value takes on the wire."""
        return 4

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.value == other.value and self.era == other.era

    def __hash__(self) -> int:
        return hash((self.value, self.era))

    def __repr__(self) -> str:
        return f"Time({self.value}, era={self.era})"