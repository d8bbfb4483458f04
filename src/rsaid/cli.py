"""
Command-line access to the ID number tools:

    rsaid check 9307035489087
    rsaid decode 9307035489087
    rsaid generate --dob 1993-07-03 --sex male --count 3
    rsaid digit 930703548908
"""

import sys
from datetime import date

from pydantic import BaseModel, Field
from pydantic_settings import CliApp, CliPositionalArg, CliSubCommand

from rsaid.id.errors import InvalidArgumentError, InvalidInputError
from rsaid.id.fields import Sex
from rsaid.service.id import compute_check_digit, decode, generate_id_number, validate
from rsaid.util.argparse import PydanticArguments
from rsaid.util.cmd import run


class CheckCommand(BaseModel):
    """Check whether an ID number is valid"""

    id_number: CliPositionalArg[str]

    def cli_cmd(self) -> None:
        print("valid" if validate(self.id_number) else "invalid")


class DecodeCommand(BaseModel):
    """Print the details held in an ID number as JSON"""

    id_number: CliPositionalArg[str]

    def cli_cmd(self) -> None:
        details = decode(self.id_number)
        print(details.model_dump_json() if details is not None else "invalid")


class GenerateCommand(BaseModel):
    """Generate valid ID numbers, random unless a date of birth and sex are given"""

    dob: date | None = None
    sex: Sex | None = None
    citizen: bool = True
    sequence: int | None = Field(None, ge=0, le=9999)
    historical_digit: int | None = Field(None, ge=0, le=9)
    count: int = Field(1, ge=1)

    def cli_cmd(self) -> None:
        try:
            for _ in range(self.count):
                print(
                    generate_id_number(
                        self.dob,
                        self.sex,
                        is_citizen=self.citizen,
                        sequence=self.sequence,
                        historical_digit=self.historical_digit,
                    )
                )
        except InvalidArgumentError as e:
            sys.exit(f"error: {e}")


class CheckDigitCommand(BaseModel):
    """Compute the check digit for the first 12 digits of an ID number"""

    first12: CliPositionalArg[str]

    def cli_cmd(self) -> None:
        try:
            print(compute_check_digit(self.first12))
        except InvalidInputError as e:
            sys.exit(f"error: {e}")


class RsaIdCli(PydanticArguments):
    """South African ID number tools"""

    check: CliSubCommand[CheckCommand]
    decode: CliSubCommand[DecodeCommand]
    generate: CliSubCommand[GenerateCommand]
    digit: CliSubCommand[CheckDigitCommand]

    def cli_cmd(self) -> None:
        CliApp.run_subcommand(self)


def main() -> int:
    return run(RsaIdCli.run)
