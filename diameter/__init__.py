"""Diameter (RFC 6733) message headers, flags, AVPs and their typed values."""

__version__ = "0.1.0"

__all__ = [
    "address",
    "application",
    "avp",
    "flags",
    "header",
    "message",
    "ntptime",
    "value_types",
]