from datetime import date, datetime

import pytest

from rsaid.id.dates import age_on, decode_date_field, encode_date_field, reference_date, resolve_century
from rsaid.id.errors import InvalidArgumentError

NOW = date(2024, 6, 15)


def test_resolve_century() -> None:
    assert resolve_century(99, NOW) == 1900
    assert resolve_century(25, NOW) == 1900
    assert resolve_century(24, NOW) == 2000
    assert resolve_century(0, NOW) == 2000


def test_decode_date_field_century() -> None:
    assert decode_date_field("990101", NOW) == date(1999, 1, 1)
    assert decode_date_field("050101", NOW) == date(2005, 1, 1)
    assert decode_date_field("000229", NOW) == date(2000, 2, 29)
    assert decode_date_field("250101", NOW) == date(1925, 1, 1)


def test_decode_date_field_current_year() -> None:
    assert decode_date_field("240615", NOW) == NOW
    assert decode_date_field("240101", NOW) == date(2024, 1, 1)
    # Same two digit year but later this year is in the future, not 1924
    assert decode_date_field("240616", NOW) is None
    assert decode_date_field("241231", NOW) is None


def test_decode_date_field_invalid_dates() -> None:
    for bad_field in ("931303", "930003", "930700", "930732", "930230", "930229", "230229", "000230"):
        assert decode_date_field(bad_field, NOW) is None

    # Leap years
    assert decode_date_field("960229", NOW) == date(1996, 2, 29)
    assert decode_date_field("040229", NOW) == date(2004, 2, 29)


def test_decode_date_field_malformed() -> None:
    for bad_field in (None, "", "9307", "9307031", "93O703", "９３０７０３"):
        assert decode_date_field(bad_field, NOW) is None


def test_decode_date_field_accepts_datetime_reference() -> None:
    assert decode_date_field("240615", datetime(2024, 6, 15, 0, 0, 1)) == NOW


def test_decode_date_field_defaults_to_today() -> None:
    today = date.today()
    assert decode_date_field(today.strftime("%y%m%d")) == today


def test_encode_date_field() -> None:
    assert encode_date_field(date(1993, 7, 3)) == "930703"
    assert encode_date_field(date(2005, 1, 1)) == "050101"
    assert encode_date_field(date(1900, 12, 31)) == "001231"
    assert encode_date_field(datetime(2000, 2, 29, 12, 30)) == "000229"

    with pytest.raises(InvalidArgumentError):
        encode_date_field(date(1899, 12, 31))


def test_age_on() -> None:
    assert age_on(date(1993, 7, 3), NOW) == 30
    assert age_on(date(1993, 6, 15), NOW) == 31
    assert age_on(date(1993, 6, 16), NOW) == 30
    assert age_on(NOW, NOW) == 0
    # Leap day birthdays tick over on the 1st of March
    assert age_on(date(2000, 2, 29), date(2001, 2, 28)) == 0
    assert age_on(date(2000, 2, 29), date(2001, 3, 1)) == 1
    assert age_on(datetime(1993, 7, 3, 10, 0), NOW) == 30


def test_reference_date() -> None:
    assert reference_date(NOW) == NOW
    assert reference_date(datetime(2024, 6, 15, 23, 59)) == NOW
    assert reference_date() == date.today()
