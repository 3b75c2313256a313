# diameter

A pure-Python model of the Diameter base protocol (RFC 6733): message
headers, command and AVP flags, AVPs and their typed values, with the
length, padding and size arithmetic the wire format fixes.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `diameter.flags` – `Flags`, a fixed-width bit set addressed by enum
  members, with `AvpFlags` / `AvpFlag` (`VENDOR_SPECIFIC`, `MANDATORY`,
  `PROTECTED`) and `CommandFlags` / `CommandFlag` (`REQUEST`, `PROXIABLE`,
  `ERROR`, `RETRANSMITTED`). Flags support `set`, `reset`, `clear`,
  `all`, `any`, `none`, `count`, `size`, `data`, indexing by flag and the
  `|`, `&`, `^` operators.
- `diameter.header` – the message `Header` dataclass (version, length,
  command flags, command code, application id, hop-by-hop and end-to-end
  identifiers), `ProtocolVersion` and the registered `ApplicationId`
  values. `Header.size()` is 20.
- `diameter.application` – `BaseCommand`, the command codes of the base
  application, and `BASE_APPLICATION_ID`.
- `diameter.avp` – the `AVP` dataclass and the basic data formats
  `OctetString`, `Integer32`, `Integer64`, `Unsigned32`, `Unsigned64`,
  `Float32`, `Float64`, `UTF8String` and `Grouped`. Integers are range
  checked for their width. An AVP reports its `length()` (header plus
  data, as carried in the AVP Length field), its `padding()` to a
  four-octet boundary and its padded `size()`.
- `diameter.address` – `Address` and `AddressFamily`. Built from text, an
  IPv4 or IPv6 address is parsed into octets (a `ValueError` for a bad
  address); built from octets, `validate()` fills in `address_string`.
- `diameter.ntptime` – `Time`, NTP seconds plus an era, with
  `from_datetime` and `to_datetime`. Without an explicit era, a value with
  its top bit clear is taken to be in era 1.
- `diameter.value_types` – `DiameterIdentity`, `DiameterURI`, `Enumerated`
  and `IPFilterRule`. `validate()` checks the FQDN, URI or rule syntax;
  for URIs it fills in `scheme`, `fqdn`, `port`, `transport` and
  `protocol`, for filter rules `action`, `direction`, `protocol`, `src`
  and `dst`.
- `diameter.message` – `Message`, a header plus a list of AVPs; `size()`
  computes the message length and stores it in `header.length`.

## Example

```python
from datetime import datetime

from diameter.application import BaseCommand
from diameter.avp import AVP, UTF8String, Unsigned32
from diameter.flags import AvpFlag, AvpFlags, CommandFlag, CommandFlags
from diameter.header import ApplicationId, Header, ProtocolVersion
from diameter.message import Message
from diameter.ntptime import Time
from diameter.value_types import DiameterURI

header = Header(
    version=ProtocolVersion.V01,
    command_flags=CommandFlags(CommandFlag.REQUEST),
    command_code=BaseCommand.CAPABILITIES_EXCHANGE,
    application_id=ApplicationId.COMMON,
    hop_by_hop=1,
    end_to_end=1,
)
message = Message(header, [
    AVP(266, AvpFlags(AvpFlag.MANDATORY), None, Unsigned32(10415)),  # 12 octets
    AVP(269, AvpFlags(), None, UTF8String("ExampleProduct")),        # 22 + 2 padding
])
print(message.size())            # 56, also stored in header.length

flags = AvpFlags(AvpFlag.VENDOR_SPECIFIC) | AvpFlags(AvpFlag.MANDATORY)
print(hex(flags.data()))         # 0xc0

print(Time.from_datetime(datetime(1999, 12, 31)).value)   # 3155587200
print(Time(63104).to_datetime())                          # 2036-02-08 00:00:00+00:00

uri = DiameterURI("aaa://host.example.com:6666;transport=tcp")
print(uri.validate(), uri.fqdn, uri.port, uri.transport)  # True host.example.com 6666 tcp
```

## What this package does not do

It models messages and computes their sizes, but it does not encode them
to bytes or decode them from bytes: there is no wire codec, no reading of
AVP data as a chosen value type, and no command-line program. Invalid
values are reported with the standard `ValueError` and `TypeError`.