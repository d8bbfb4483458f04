import typing as t

ID_LENGTH = 13

_ASCII_DIGITS = frozenset("0123456789")


def is_ascii_digits(value: t.Any, length: int) -> bool:
    """
    True if value is a string of exactly `length` ASCII digits. str.isdigit() is not enough as it also accepts other
    unicode digits and superscripts.
    """
    return isinstance(value, str) and len(value) == length and all(c in _ASCII_DIGITS for c in value)


def is_well_formed(id_number: t.Any) -> bool:
    """
    Check that id_number is a non-empty string of exactly 13 ASCII digits. Safe to call on anything.
    """
    return is_ascii_digits(id_number, ID_LENGTH)
