import typing as t
from datetime import date

from pydantic import ValidationError

from rsaid.id import checksum, decoder, validation
from rsaid.id.decoder import DecodedIdentity
from rsaid.id.errors import InvalidArgumentError, InvalidInputError
from rsaid.id.fields import Sex
from rsaid.id.generation import GenerationOptions, IdNumberGenerator

_generator = IdNumberGenerator()


def validate(id_number: t.Any) -> bool:
    """
    Check whether an RSA ID number is valid as of today. Safe to call with anything.
    """
    return validation.validate(id_number)


def decode(id_number: t.Any) -> DecodedIdentity | None:
    """
    Decode the details from an RSA ID number, or None if it is not valid.
    """
    return decoder.decode(id_number)


def parse_rsa_id(id_number: str) -> DecodedIdentity:
    """
    Parse details from an RSA ID Number, raising InvalidInputError (a ValueError) if it is not valid.
    """
    details = decoder.decode(id_number.strip())
    if details is None:
        raise InvalidInputError("RSA ID not valid")
    return details


def generate_id_number(
    dob: date | None = None,
    sex: Sex | str | None = None,
    is_citizen: bool = True,
    sequence: int | None = None,
    historical_digit: int | None = None,
) -> str:
    """
    Generate a valid RSA ID number. With no date of birth and sex everything is random; otherwise both must be given and
    the sequence number and historical digit may optionally be fixed.
    """
    if dob is None and sex is None:
        return _generator.generate_random()
    if dob is None or sex is None:
        raise InvalidArgumentError("Both a date of birth and sex are needed to generate a specific ID number")

    try:
        options = GenerationOptions(sequence=sequence, historical_digit=historical_digit)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid generation options: {e}") from e
    return _generator.generate(dob, sex, is_citizen=is_citizen, options=options)


def compute_check_digit(first12: str) -> int:
    return checksum.compute_check_digit(first12)
