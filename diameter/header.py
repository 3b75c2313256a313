"""The fixed 20-octet Diameter message header (RFC 6733 section 3)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from diameter.flags import CommandFlags

HEADER_SIZE = 20


class ProtocolVersion(IntEnum):
    """Diameter protocol versions; only version 1 is defined."""

    V01 = 0x01


class ApplicationId(IntEnum):
    """Registered Diameter application identifiers."""

    COMMON = 0
    NASREQ = 1
    MOBILE_IPV4 = 2
    ACCOUNTING = 3
    CREDIT_CONTROL = 4
    EAP = 5
    SIP = 6
    MOBILE_IPV4_IKE = 7
    MOBILE_IPV4_AUTH = 8
    QOS = 9
    CAPABILITIES_UPDATE = 10
    IKESK = 11
    NAT_CONTROL = 12
    ERP = 13

    TGPP_CX = 16777216
    TGPP_SH = 16777217
    TGPP_RE = 16777218
    TGPP_WX = 16777219
    TGPP_ZN = 16777220
    TGPP_ZH = 16777221
    TGPP_GQ = 16777222
    TGPP_GMB = 16777223
    TGPP_GX = 16777224
    TGPP_GX_GY = 16777225
    TGPP_MM10 = 16777226
    ERICSSON_MSI = 16777227
    ERICSSON_ZX = 16777228
    TGPP_RX = 16777229
    TGPP_PR = 16777230
    ETSI_E4 = 16777231
    ERICSSON_CIP = 16777232
    ERICSSON_MM = 16777233
    VODAFONE_GX = 16777234
    ITU_T_RS = 16777235
    TGPP_RX2 = 16777236
    TGPP_TY = 16777237
    TGPP_GX2 = 16777238

    RELAY = 0xFFFFFFFF


@dataclass
class Header:
    """A Diameter message header."""

    version: int = 0
    length: int = 0
    command_flags: CommandFlags = field(default_factory=CommandFlags)
    command_code: int = 0
    application_id: int = 0
    hop_by_hop: int = 0
    end_to_end: int = 0

    def size(self) -> int:
        """Octets the header takes on the wire."""
        # version(1) + length(3) + flags(1) + code(3) + app-id, hop-by-hop, end-to-end (4 each)
        return 1 + 3 + self.command_flags.size() + 3 + 4 + 4 + 4