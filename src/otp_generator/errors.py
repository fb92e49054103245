"""Errors raised while building generators and computing passwords."""


class GeneratorError(ValueError):
    """Base class for all one-time password errors."""


class InvalidTime(GeneratorError):
    """The requested time is before the epoch or cannot produce a counter."""


class InvalidPeriod(GeneratorError):
    """The timer period is not a positive number of seconds."""


class InvalidDigits(GeneratorError):
    """The number of digits is too short to be secure or too long to compute."""


class ValidationError(GeneratorError):
    """A generator could not be constructed from the given parameters."""


class CounterOverflow(GeneratorError):
    """The counter cannot be advanced past the largest 64-bit value."""
