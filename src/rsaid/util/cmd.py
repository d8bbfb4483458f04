"Tools for running rsaid command-line processes"

import typing as t

from rsaid.id.errors import InvalidArgumentError, InvalidInputError
from rsaid.util.logging import setup_logging
from rsaid.util.sentry import init as setup_sentry

Res = t.TypeVar("Res", bound=None | int)


def setup() -> None:
    # Bad caller input is reported back on the command line, not to sentry
    setup_sentry(ignore_exceptions=[InvalidArgumentError, InvalidInputError])
    setup_logging()


def run(main: t.Callable[[], Res]) -> Res:
    """
    Set up various standard logging etc and run the specified function returning its result if any.
    """
    setup()
    return main()
