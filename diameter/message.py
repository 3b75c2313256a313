"""A Diameter message: a header followed by a list of AVPs."""

from __future__ import annotations

from dataclasses import dataclass, field

from diameter.avp import AVP
from diameter.header import Header


@dataclass
class Message:
    """A header and the AVPs that follow it."""

    header: Header = field(default_factory=Header)
    avps: list[AVP] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.avps = list(self.avps)

    def size(self) -> int:
        """Octets the message takes on the wire; also stores it in the header."""
        self.header.length = self.header.size() + sum(avp.size() for avp in self.avps)
        return self.header.length