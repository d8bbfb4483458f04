import enum
import typing as t

from pydantic import BaseModel, ConfigDict

from rsaid.id.format import ID_LENGTH, is_ascii_digits
from rsaid.util.enum import CaseInsensitiveEnum

SEQUENCE_SLICE = slice(6, 10)
CITIZENSHIP_INDEX = 10
HISTORICAL_INDEX = 11

# Sequence numbers below this are issued to women, this and above to men
MALE_SEQUENCE_START = 5000


class Sex(CaseInsensitiveEnum):
    FEMALE = enum.auto()
    MALE = enum.auto()
    UNKNOWN = enum.auto()


class Citizenship(CaseInsensitiveEnum):
    CITIZEN = enum.auto()
    PERMANENT_RESIDENT = enum.auto()


class CitizenshipFields(BaseModel):
    model_config = ConfigDict(frozen=True)

    citizenship: Citizenship
    # Normally 0 or 1, anything else is kept as-is and treated as not a citizen
    citizenship_digit: int
    historical_digit: int

    @property
    def is_citizen(self) -> bool:
        return self.citizenship == Citizenship.CITIZEN


def sex_for_sequence(sequence: int) -> Sex:
    return Sex.FEMALE if sequence < MALE_SEQUENCE_START else Sex.MALE


def extract_sex(id_number: t.Any) -> Sex:
    """
    Sex encoded by the 4 digit sequence number. Anything too short or non-numeric gives Sex.UNKNOWN.
    """
    if not isinstance(id_number, str) or len(id_number) < SEQUENCE_SLICE.stop:
        return Sex.UNKNOWN

    sequence = id_number[SEQUENCE_SLICE]
    if not is_ascii_digits(sequence, 4):
        return Sex.UNKNOWN
    return sex_for_sequence(int(sequence))


def extract_citizenship(id_number: t.Any) -> CitizenshipFields | None:
    """
    Citizenship flag and historical digit of a 13 character ID number. Only the length and those two digits are
    checked, so this works on numbers with a bad checksum too.
    """
    if not isinstance(id_number, str) or len(id_number) != ID_LENGTH:
        return None

    digits = id_number[CITIZENSHIP_INDEX : HISTORICAL_INDEX + 1]
    if not is_ascii_digits(digits, 2):
        return None

    citizenship_digit, historical_digit = int(digits[0]), int(digits[1])
    return CitizenshipFields(
        citizenship=Citizenship.CITIZEN if citizenship_digit == 0 else Citizenship.PERMANENT_RESIDENT,
        citizenship_digit=citizenship_digit,
        historical_digit=historical_digit,
    )
