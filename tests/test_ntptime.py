from datetime import datetime, timezone

import pytest

from diameter.ntptime import Time


def _parse(text):
    return datetime.strptime(text, "%Y-%m-%d %H:%M:%S").replace(tzinfo=timezone.utc)


def _format(moment):
    return moment.strftime("%Y-%m-%d %H:%M:%S")


@pytest.mark.parametrize(
    ("text", "value", "era"),
    [
        ("1970-01-01 00:00:00", 2_208_988_800, 0),
        ("1972-01-01 00:00:00", 2_272_060_800, 0),
        ("1999-12-31 00:00:00", 3_155_587_200, 0),
        ("2036-02-08 00:00:00", 63_104, 1),
        ("2262-04-11 23:47:16", 2_842_426_244, 2),
        ("2036-02-07 06:28:14", 0xFFFFFFFE, 0),
        ("2036-02-07 06:28:15", 0xFFFFFFFF, 0),
        ("2036-02-07 06:28:16", 0, 1),
        ("2036-02-07 06:28:17", 1, 1),
        ("2172-03-15 12:56:30", 0xFFFFFFFE, 1),
        ("2172-03-15 12:56:31", 0xFFFFFFFF, 1),
        ("2172-03-15 12:56:32", 0, 2),
        ("2172-03-15 12:56:33", 1, 2),
    ],
)
def test_from_datetime(text, value, era):
    moment = Time.from_datetime(_parse(text))
    assert moment.value == value
    assert moment.era == era


@pytest.mark.parametrize(
    "text",
    [
        "1970-01-01 00:00:00",
        "1972-01-01 00:00:00",
        "1999-12-31 00:00:00",
        "2036-02-08 00:00:00",
        "2036-02-07 06:28:14",
        "2036-02-07 06:28:15",
        "2036-02-07 06:28:16",
        "2036-02-07 06:28:17",
        "2172-03-15 12:56:30",
        "2172-03-15 12:56:31",
        "2172-03-15 12:56:32",
        "2172-03-15 12:56:33",
    ],
)
def test_round_trip_through_datetime(text):
    assert _format(Time.from_datetime(_parse(text)).to_datetime()) == text


def test_naive_datetime_is_utc():
    assert Time.from_datetime(datetime(1999, 12, 31)).value == 3_155_587_200


def test_from_ntp_infers_era():
    assert _format(Time(3_155_587_200).to_datetime()) == "1999-12-31 00:00:00"
    assert _format(Time(63_104).to_datetime()) == "2036-02-08 00:00:00"
    assert Time(3_155_587_200).era == 0
    assert Time(63_104).era == 1


def test_explicit_era():
    assert _format(Time(0, 2).to_datetime()) == "2172-03-15 12:56:32"


def test_size():
    assert Time(1).size() == 4


def test_before_unix_epoch_rejected():
    with pytest.raises(ValueError):
        Time.from_datetime(_parse("1969-12-31 23:59:59"))


def test_to_datetime_before_unix_epoch_rejected():
    with pytest.raises(ValueError):
        Time(0, 0).to_datetime()


def test_ntp_out_of_range():
    with pytest.raises(ValueError):
        Time(1 << 32)


def test_equality():
    assert Time(5, 1) == Time(5)
    assert not Time(5, 0) == Time(5, 1)