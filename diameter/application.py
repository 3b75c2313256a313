"""Command codes and identifier of the Diameter base application."""

from enum import IntEnum

from diameter.header import ApplicationId

BASE_APPLICATION_ID = int(ApplicationId.COMMON)


class BaseCommand(IntEnum):
    """Command codes defined by the base protocol (RFC 6733)."""

    ABORT_SESSION = 274
    ACCOUNTING_REQUEST = 271
    CAPABILITIES_EXCHANGE = 257
    DEVICE_WATCHDOG = 280
    DISCONNECT_PEER = 282
    RE_AUTH = 258
    SESSION_TERMINATION = 275