import pytest

from diameter.address import Address, AddressFamily


@pytest.mark.parametrize(
    ("text", "family"),
    [
        ("127.0.0.1", AddressFamily.IPV4),
        ("192.168.1.1", AddressFamily.IPV4),
        ("2001:db8:3c4d:7777:260:3eff:fe15:9501", AddressFamily.IPV6),
        ("::1", AddressFamily.IPV6),
        ("::ffff:192.168.1.1", AddressFamily.IPV6),
        ("0.0.0.0", AddressFamily.IPV4),
        ("255.255.255.255", AddressFamily.IPV4),
    ],
)
def test_constructor_keeps_text_and_family(text, family):
    value = Address(text, family)
    assert value.address_string == text
    assert value.family == family


def test_default_family_is_ipv4():
    value = Address("127.0.0.1")
    assert value.family == AddressFamily.IPV4
    assert value.value == bytes([127, 0, 0, 1])


@pytest.mark.parametrize(
    ("text", "family"),
    [
        ("127.0.0.256", AddressFamily.IPV4),
        ("127.0.0", AddressFamily.IPV4),
        ("", AddressFamily.IPV4),
        ("2001:DB8:3C4D:7777:260:3EFF:FE15:9501:1234", AddressFamily.IPV6),
        ("192.168.1.1", AddressFamily.IPV6),
        ("::1", AddressFamily.IPV4),
    ],
)
def test_constructor_rejects_bad_text(text, family):
    with pytest.raises(ValueError):
        Address(text, family)


def test_ipv4_octets_and_size():
    value = Address("192.0.2.1")
    assert value.value == bytes([0xC0, 0x00, 0x02, 0x01])
    assert value.size() == 6
    assert value.is_ipv4() is True
    assert value.is_ipv6() is False


def test_ipv6_size():
    value = Address("::1", AddressFamily.IPV6)
    assert value.size() == 18
    assert value.is_ipv6() is True
    assert value.is_ipv4() is False


def test_validate_ipv4_octets():
    value = Address(bytes([0xC0, 0x00, 0x02, 0x01]), AddressFamily.IPV4)
    assert value.address_string == ""
    assert value.validate() is True
    assert value.address_string == "192.0.2.1"


def test_validate_ipv6_octets():
    value = Address(bytes.fromhex("20010db8000000000000000000000001"), AddressFamily.IPV6)
    assert value.validate() is True
    assert value.address_string == "2001:db8::1"


def test_validate_ipv4_mapped_ipv6_octets():
    value = Address(bytes.fromhex("00000000000000000000ffffc0a80101"), AddressFamily.IPV6)
    assert value.validate() is True
    assert value.address_string == "::ffff:192.168.1.1"


def test_validate_loopback_ipv6_octets():
    value = Address(bytes(15) + b"\x01", AddressFamily.IPV6)
    assert value.validate() is True
    assert value.address_string == "::1"


def test_validate_wrong_length_fails():
    value = Address(bytes([1, 2, 3]), AddressFamily.IPV4)
    assert value.validate() is False
    assert value.is_ipv4() is False


def test_other_family_keeps_text_octets():
    value = Address("example.com", AddressFamily.DNS)
    assert value.value == b"example.com"
    assert value.size() == 13
    assert value.validate() is False


def test_family_out_of_range():
    with pytest.raises(ValueError):
        Address(b"\x00", 0x10000)


def test_equality_by_family_and_octets():
    assert Address("10.0.0.1") == Address(bytes([10, 0, 0, 1]), AddressFamily.IPV4)
    assert not Address("10.0.0.1") == Address("10.0.0.2")