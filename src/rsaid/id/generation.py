import calendar
import logging
import random
import typing as t
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from rsaid.id.checksum import compute_check_digit
from rsaid.id.dates import MIN_YEAR, decode_date_field, encode_date_field, reference_date
from rsaid.id.errors import GenerationExhaustedError, InvalidArgumentError
from rsaid.id.fields import MALE_SEQUENCE_START, Sex, sex_for_sequence
from rsaid.id.validation import validate
from rsaid.util.config import IdSettings

logger = logging.getLogger("rsaid-generation")

# OS entropy, so safe to share between threads without giving correlated sequences
_system_rng = random.SystemRandom()


class GenerationSettings(IdSettings):
    # Generation is not normally probabilistic in its validity; retries only cover an unexpected validation failure
    generator_max_attempts: int = Field(20, ge=1)
    # Arbitrary, not derived from any input. Most numbers in circulation carry an 8 here.
    generator_historical_digit: int = Field(8, ge=0, le=9)
    generator_min_random_year: int = Field(1950, ge=MIN_YEAR)


generation_settings = GenerationSettings()


class GenerationOptions(BaseModel):
    """
    Optional fields for a generated number. Anything left as None is filled in by the generator: a random sequence
    number in the range for the requested sex, and the configured historical digit.
    """

    model_config = ConfigDict(frozen=True)

    sequence: int | None = Field(None, ge=0, le=9999)
    historical_digit: int | None = Field(None, ge=0, le=9)


class IdNumberGenerator:
    """
    Builds valid ID numbers from a date of birth, sex and citizenship.

    :param rng: Source of randomness for unspecified fields. Pass a seeded random.Random for repeatable output.
    :param now: Reference date for "today", defaulting to the actual date at each call.
    :param settings: Attempt bound and defaults, normally read from the environment.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        now: date | None = None,
        settings: GenerationSettings | None = None,
    ) -> None:
        self.rng = rng if rng is not None else _system_rng
        self.now = now
        self.settings = settings if settings is not None else generation_settings

    def _check_dob(self, dob: t.Any) -> date:
        if not isinstance(dob, date):
            raise InvalidArgumentError(f"Birth date must be a date: {dob!r}")
        if isinstance(dob, datetime):
            dob = dob.date()
        today = reference_date(self.now)
        if dob.year < MIN_YEAR or dob > today:
            raise InvalidArgumentError(
                f"Birth date must be between {MIN_YEAR} and {today.isoformat()}: {dob.isoformat()}"
            )
        return dob

    def _check_sex(self, sex: Sex | str) -> Sex:
        try:
            sex = Sex(sex)
        except ValueError:
            raise InvalidArgumentError(f"Invalid sex: {sex!r}") from None
        if sex == Sex.UNKNOWN:
            raise InvalidArgumentError("Sex must be female or male to be encoded in an ID number")
        return sex

    def _random_sequence(self, sex: Sex) -> int:
        if sex == Sex.FEMALE:
            return self.rng.randrange(0, MALE_SEQUENCE_START)
        return self.rng.randrange(MALE_SEQUENCE_START, 10000)

    def generate(
        self,
        dob: date,
        sex: Sex | str,
        is_citizen: bool = True,
        options: GenerationOptions | None = None,
    ) -> str:
        """
        Generate a valid ID number for the given details. The result is always run through the validator before being
        returned.
        """
        if options is None:
            options = GenerationOptions()
        dob = self._check_dob(dob)
        sex = self._check_sex(sex)

        date_field = encode_date_field(dob)
        citizenship_digit = "0" if is_citizen else "1"
        historical_digit = options.historical_digit
        if historical_digit is None:
            historical_digit = self.settings.generator_historical_digit
        if options.sequence is not None and sex_for_sequence(options.sequence) != sex:
            read_back = sex_for_sequence(options.sequence)
            logger.warning(f"Sequence {options.sequence:04d} will be read back as {read_back}, not {sex}")

        attempts = self.settings.generator_max_attempts
        for attempt in range(1, attempts + 1):
            sequence = options.sequence if options.sequence is not None else self._random_sequence(sex)
            first12 = f"{date_field}{sequence:04d}{citizenship_digit}{historical_digit}"
            id_number = first12 + str(compute_check_digit(first12))
            if validate(id_number, self.now):
                if decode_date_field(date_field, self.now) != dob:
                    logger.warning(f"Birth date {dob.isoformat()} will be read back in a different century from {id_number}")
                return id_number
            logger.warning(f"Generated ID number {id_number} failed validation (attempt {attempt} of {attempts})")

        logger.error(f"Could not generate a valid ID number for {dob.isoformat()} after {attempts} attempts")
        raise GenerationExhaustedError(f"Could not generate a valid ID number after {attempts} attempts")

    def random_birth_date(self) -> date:
        today = reference_date(self.now)
        year = self.rng.randrange(self.settings.generator_min_random_year, today.year)
        month = self.rng.randint(1, 12)
        day = self.rng.randint(1, calendar.monthrange(year, month)[1])
        return date(year, month, day)

    def generate_random(self) -> str:
        """
        Generate a valid ID number for a random person born between the configured minimum year and last year.
        """
        sex = self.rng.choice((Sex.FEMALE, Sex.MALE))
        return self.generate(self.random_birth_date(), sex, is_citizen=self.rng.choice((True, False)))
