class RsaIdError(Exception):
    """
    Base class for errors raised by the hard-failing ID operations (check digit computation, strict parsing and
    generation). Validation and extraction never raise.
    """

    pass


class InvalidInputError(RsaIdError, ValueError):
    """
    Raised when the digits handed to a strict operation are malformed, eg a check digit requested for something that
    is not 12 ASCII digits.
    """

    pass


class InvalidArgumentError(RsaIdError, ValueError):
    """
    Raised when generation is asked for something impossible: a birth date before 1900 or in the future, or a sex that
    cannot be encoded.
    """

    pass


class GenerationExhaustedError(RsaIdError, RuntimeError):
    """
    Raised when a freshly generated number fails validation on every attempt. This indicates a defect in date/century
    handling rather than bad input, so retrying the call will not help.
    """

    pass
