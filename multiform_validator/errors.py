INPUT_VALUE_CANNOT_BE_EMPTY = "Input value cannot be empty."


class ValidatorError(Exception):
    """Base class for errors raised by the validators."""


class InvalidArgumentError(ValidatorError, ValueError):
    """Input is None or empty where a value is required."""

    def __init__(self, message: str = INPUT_VALUE_CANNOT_BE_EMPTY):
        super().__init__(message)


class NullReferenceError(ValidatorError, TypeError):
    """Input is None where only a missing value is an error (is_email)."""
