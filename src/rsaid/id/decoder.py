import typing as t
from datetime import date

from pydantic import BaseModel, ConfigDict

from rsaid.id.dates import DATE_FIELD_LENGTH, age_on, decode_date_field
from rsaid.id.fields import Citizenship, Sex, extract_citizenship, extract_sex
from rsaid.id.validation import validate


class DecodedIdentity(BaseModel):
    model_config = ConfigDict(frozen=True)

    id_number: str
    date_of_birth: date | None = None
    age: int | None = None
    sex: Sex = Sex.UNKNOWN
    citizenship: Citizenship | None = None
    is_citizen: bool | None = None
    citizenship_digit: int | None = None
    historical_digit: int | None = None


def decode(id_number: t.Any, now: date | None = None) -> DecodedIdentity | None:
    """
    Pull everything we can out of a valid ID number. Returns None if the number does not pass validation.
    """
    if not validate(id_number, now):
        return None

    dob = decode_date_field(id_number[:DATE_FIELD_LENGTH], now)
    citizenship = extract_citizenship(id_number)
    return DecodedIdentity(
        id_number=id_number,
        date_of_birth=dob,
        age=age_on(dob, now) if dob is not None else None,
        sex=extract_sex(id_number),
        citizenship=citizenship.citizenship if citizenship else None,
        is_citizen=citizenship.is_citizen if citizenship else None,
        citizenship_digit=citizenship.citizenship_digit if citizenship else None,
        historical_digit=citizenship.historical_digit if citizenship else None,
    )
