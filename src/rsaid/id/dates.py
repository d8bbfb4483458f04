"""
Conversion between the YYMMDD field at the start of an ID number and a date of birth.

The field only carries a two digit year, so the century has to be guessed. We assume the holder is alive and pick the
most recent century that doesn't put their birth in the future: with a reference year of 2024, "05" is 2005 and "99"
is 1999. Somebody born in 1920 is therefore read as born in 2020. That can't be fixed from the number alone, so
anything that needs the real age of centenarians has to get it from elsewhere.
"""

import typing as t
from datetime import date, datetime

from rsaid.id.errors import InvalidArgumentError
from rsaid.id.format import is_ascii_digits

DATE_FIELD_LENGTH = 6
MIN_YEAR = 1900


def reference_date(now: date | None = None) -> date:
    """
    The date that "now" refers to. Defaults to today; datetimes are truncated so they compare against plain dates.
    """
    if now is None:
        return date.today()
    if isinstance(now, datetime):
        return now.date()
    return now


def resolve_century(yy: int, now: date | None = None) -> int:
    if yy > reference_date(now).year % 100:
        return 1900
    return 2000


def decode_date_field(field: t.Any, now: date | None = None) -> date | None:
    """
    Turn a YYMMDD field into a date of birth, or None if it isn't a real date or lies after `now`.
    """
    if not is_ascii_digits(field, DATE_FIELD_LENGTH):
        return None

    today = reference_date(now)
    yy, month, day = int(field[0:2]), int(field[2:4]), int(field[4:6])
    try:
        dob = date(resolve_century(yy, today) + yy, month, day)
    except ValueError:
        # Month 13, 30th of February and the like
        return None

    if dob > today:
        return None
    return dob


def encode_date_field(dob: date) -> str:
    if dob.year < MIN_YEAR:
        raise InvalidArgumentError(f"Cannot encode a birth date before {MIN_YEAR}: {dob.isoformat()}")
    return f"{dob.year % 100:02d}{dob.month:02d}{dob.day:02d}"


def age_on(dob: date, now: date | None = None) -> int:
    """
    Age in completed years at `now`. Somebody born on the 29th of February has their birthday on the 1st of March in
    other years.
    """
    today = reference_date(now)
    if isinstance(dob, datetime):
        dob = dob.date()
    return today.year - dob.year - ((today.month, today.day) < (dob.month, dob.day))
