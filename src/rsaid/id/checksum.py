import typing as t

from rsaid.id.errors import InvalidInputError
from rsaid.id.format import ID_LENGTH, is_ascii_digits, is_well_formed

PAYLOAD_LENGTH = ID_LENGTH - 1


def _luhn_total(digits: str) -> int:
    total = 0
    for i, c in enumerate(digits):
        d = int(c)
        # Counting from the left, every second digit is doubled
        if i % 2 == 1:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return total


def compute_check_digit(first12: str) -> int:
    """
    Compute the check digit for the first 12 digits of an ID number.

    This is the Luhn algorithm as applied to SA ID numbers: working from the left, digits at odd (0-indexed) positions
    are doubled and have 9 subtracted if they go over 9, everything is summed, and the check digit is whatever brings
    the total up to a multiple of 10.
    """
    if not is_ascii_digits(first12, PAYLOAD_LENGTH):
        raise InvalidInputError(f"Check digit input must be {PAYLOAD_LENGTH} ASCII digits")

    return (10 - _luhn_total(first12) % 10) % 10


def verify_check_digit(id_number: t.Any) -> bool:
    """
    Return True if the last digit of a 13 digit ID number is the correct check digit for the rest.
    """
    if not is_well_formed(id_number):
        return False
    return compute_check_digit(id_number[:PAYLOAD_LENGTH]) == int(id_number[PAYLOAD_LENGTH])
