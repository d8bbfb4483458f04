import typing as t
from enum import StrEnum


class CaseInsensitiveEnum(StrEnum):
    """
    Like StrEnum but allows it to be instantiated with any case-insensitive version of themselves. Used for the ID
    field enums so that command-line and other user input can be lax:

        class Sex(CaseInsensitiveEnum):
            FEMALE = enum.auto()
            MALE = enum.auto()

    str(Sex("Female")) # 'female'
    """

    @classmethod
    def _missing_(cls, value: object) -> t.Any | None:
        if not isinstance(value, str):
            return None
        value = value.lower()
        for member in cls:
            if member.lower() == value:
                return member
        return None
