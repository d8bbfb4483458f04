import logging
import typing as t
from datetime import date

from rsaid.id.checksum import verify_check_digit
from rsaid.id.dates import DATE_FIELD_LENGTH, decode_date_field
from rsaid.id.format import is_well_formed

logger = logging.getLogger("rsaid-validation")


def is_date_field_valid(id_number: t.Any, now: date | None = None) -> bool:
    """
    Check the YYMMDD birth date of an ID number is a real date that isn't in the future.
    """
    if not is_well_formed(id_number):
        return False
    return decode_date_field(id_number[:DATE_FIELD_LENGTH], now) is not None


def validate(id_number: t.Any, now: date | None = None) -> bool:
    """
    Check an ID number is 13 digits, carries a plausible date of birth and has the correct check digit.

    The checks run cheapest first and stop at the first failure, so arbitrary untrusted input never gets as far as
    date parsing or the checksum. Never raises.
    """
    if not is_well_formed(id_number):
        logger.debug("Rejected ID number: not 13 digits")
        return False
    if not is_date_field_valid(id_number, now):
        logger.debug(f"Rejected ID number: invalid date of birth {id_number[:DATE_FIELD_LENGTH]}")
        return False
    if not verify_check_digit(id_number):
        logger.debug("Rejected ID number: bad check digit")
        return False
    return True
