"""String- and integer-derived AVP values: identities, URIs, enums, filter rules."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_FQDN = r"(?=.{4,253}\Z)((?!-)[a-zA-Z0-9-]{0,62}[a-zA-Z0-9]\.)+[a-zA-Z]{2,63}"
_FQDN_ICASE = re.compile(_FQDN, re.IGNORECASE)
_FQDN_EXACT = re.compile(_FQDN)

_URI = re.compile(
    r"(aaa|aaas)://([a-zA-Z0-9\-._~%!$&'()*+,=]+)(?::([0-9]+))?"
    r"(?:;transport=(tcp|sctp|udp))?(?:;protocol=(diameter|radius|tacacs\+))?",
    re.IGNORECASE,
)

_RULE_ADDRESS = r"(any|(?:\d{1,3}\.){3}\d{1,3}(?:/\d{1,2})?|(?:[a-fA-F0-9:]+)(?:/\d{1,3})?)"
_RULE_PORTS = r"(?:\s+\d{1,5}(?:-\d{1,5})?)?"
_RULE = re.compile(
    r"(permit|deny)\s+(in|out)\s+(ip|tcp|udp|icmp)\s+from\s+"
    + _RULE_ADDRESS
    + _RULE_PORTS
    + r"\s+to\s+"
    + _RULE_ADDRESS
    + _RULE_PORTS,
    re.IGNORECASE | re.ASCII,
)

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1


def _octets(text: str) -> int:
    return len(text.encode("utf-8"))


@dataclass
class DiameterIdentity:
    """The FQDN of a Diameter node, or a realm."""

    value: str = ""

    def size(self) -> int:
        return _octets(self.value)

    def validate(self) -> bool:
        """Whether the value is a well-formed FQDN."""
        return _FQDN_ICASE.fullmatch(self.value) is not None


@dataclass
class DiameterURI:
    """An ``aaa://`` or ``aaas://`` URI; :meth:`validate` fills in its parts."""

    value: str = ""
    scheme: str = field(default="", init=False, compare=False)
    fqdn: str = field(default="", init=False, compare=False)
    port: int | None = field(default=None, init=False, compare=False)
    transport: str | None = field(default=None, init=False, compare=False)
    protocol: str | None = field(default=None, init=False, compare=False)
    validated: bool = field(default=False, init=False, compare=False)

    def size(self) -> int:
        return _octets(self.value)

    def validate(self) -> bool:
        """Parse the URI; true when it is well formed and its host is an FQDN."""
        match = _URI.fullmatch(self.value)
        if match is None:
            return False
        scheme, fqdn, port, transport, protocol = match.groups()
        self.scheme = scheme
        self.fqdn = fqdn
        if port is not None:
            self.port = int(port)
        if transport is not None:
            self.transport = transport
        if protocol is not None:
            self.protocol = protocol
        self.validated = _FQDN_EXACT.fullmatch(self.fqdn) is not None
        return self.validated


@dataclass
class Enumerated:
    """A 32-bit signed integer drawn from an application-defined list."""

    value: int = 0

    def __post_init__(self) -> None:
        if not _INT32_MIN <= self.value <= _INT32_MAX:
            raise ValueError(f"enumerated value {self.value} does not fit in 32 bits")

    def size(self) -> int:
        return 4


@dataclass
class IPFilterRule:
    """A packet filter rule; :meth:`validate` fills in its parts."""

    value: str = ""
    action: str = field(default="", init=False, compare=False)
    direction: str = field(default="", init=False, compare=False)
    protocol: str = field(default="", init=False, compare=False)
    src: str = field(default="", init=False, compare=False)
    dst: str = field(default="", init=False, compare=False)
    validated: bool = field(default=False, init=False, compare=False)

    def size(self) -> int:
        return _octets(self.value)

    def validate(self) -> bool:
        """Parse the rule; true when it is well formed."""
        match = _RULE.fullmatch(self.value)
        self.validated = match is not None
        if match is not None:
            self.action, self.direction, self.protocol, self.src, self.dst = match.groups()
        return self.validated