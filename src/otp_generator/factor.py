"""Moving factors for counter-based (HOTP) and time-based (TOTP) generators."""

from dataclasses import dataclass
from typing import Union


# Largest value an 8-byte HOTP counter can hold
MAX_COUNTER = 2**64 - 1


@dataclass(frozen=True)
class Counter:
    """
    HOTP moving factor.

    The counter should be incremented after each use of the generator to
    stay in sync with the server.
    """

    value: int


@dataclass(frozen=True)
class Timer:
    """
    TOTP moving factor.

    The period stays constant and divides the number of seconds since the
    Unix epoch to produce the counter.
    """

    period: float


Factor = Union[Counter, Timer]
