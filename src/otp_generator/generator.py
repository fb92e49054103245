"""One-time password generator value type."""

import logging
from dataclasses import dataclass, field
from typing import Union

from otp_generator.algorithm import Algorithm
from otp_generator.counter import derive_counter
from otp_generator.errors import CounterOverflow, ValidationError
from otp_generator.factor import MAX_COUNTER, Counter, Factor, Timer
from otp_generator.hotp import MAX_DIGITS, MIN_DIGITS, generate_password, validate_digits


logger = logging.getLogger(__name__)

DEFAULT_DIGITS = 6
DEFAULT_PERIOD = 30.0
DEFAULT_ALGORITHM = Algorithm.SHA1

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class Generator:
    """
    All of the parameters needed to generate a one-time password.

    Generators are immutable: :meth:`successor` returns a new value instead
    of updating the counter in place. Two generators are equal when their
    factor, secret, algorithm and digits are all equal.
    """

    factor: Factor
    secret: bytes = field(repr=False)
    algorithm: Algorithm = DEFAULT_ALGORITHM
    digits: int = DEFAULT_DIGITS

    def __post_init__(self):
        """
        Validate the parameters.

        Raises:
            ValidationError: If any parameter cannot produce a valid password.
        """
        if not isinstance(self.secret, (bytes, bytearray, memoryview)):
            raise ValidationError(
                f"Secret must be bytes, not {type(self.secret).__name__}"
            )
        # Keep an immutable copy so callers cannot change the secret afterwards
        object.__setattr__(self, "secret", bytes(self.secret))

        if not isinstance(self.algorithm, Algorithm):
            raise ValidationError(f"Unsupported algorithm: {self.algorithm!r}")
        if not validate_digits(self.digits):
            raise ValidationError(
                f"Digits must be between {MIN_DIGITS} and {MAX_DIGITS}: {self.digits}"
            )
        _validate_factor(self.factor)

        logger.debug(
            "Created generator: %s, %s, %d digits", self.factor, self.algorithm.name, self.digits
        )

    @classmethod
    def create(
        cls,
        factor: Factor,
        secret: BytesLike,
        algorithm: Algorithm = DEFAULT_ALGORITHM,
        digits: int = DEFAULT_DIGITS,
    ) -> "Generator":
        """
        Build a validated generator.

        Args:
            factor: The moving factor, a :class:`Counter` or a :class:`Timer`.
            secret: The secret shared between the client and server.
            algorithm: The hash function used to compute the HMAC.
            digits: The number of digits in the password (6 to 8).

        Returns:
            A new generator.

        Raises:
            ValidationError: If any parameter is invalid.
        """
        return cls(factor=factor, secret=secret, algorithm=algorithm, digits=digits)

    def password_at(self, at_time: float) -> str:
        """
        Generate the password for the given point in time.

        Args:
            at_time: The target time, as seconds since the Unix epoch.
                Counter-based generators ignore it.

        Returns:
            The password string.

        Raises:
            InvalidTime: If the time is before the epoch.
            InvalidPeriod: If the timer period is not positive.
            InvalidDigits: If the number of digits is out of range.
        """
        counter = derive_counter(self.factor, at_time)
        return generate_password(self.algorithm, self.digits, self.secret, counter)

    def successor(self) -> "Generator":
        """
        Return a generator for the password following the one from ``self``.

        Counter-based generators get their counter incremented. Timer-based
        generators advance with the clock and are returned unchanged.

        Raises:
            CounterOverflow: If the counter is already at the largest
                64-bit value.
        """
        if isinstance(self.factor, Timer):
            return self

        if self.factor.value >= MAX_COUNTER:
            raise CounterOverflow(f"Counter cannot be incremented past {MAX_COUNTER}")
        return self._with_factor(Counter(self.factor.value + 1))

    def _with_factor(self, factor: Factor) -> "Generator":
        # Skips __post_init__: the other fields were validated when self was built
        generator = object.__new__(Generator)
        object.__setattr__(generator, "factor", factor)
        object.__setattr__(generator, "secret", self.secret)
        object.__setattr__(generator, "algorithm", self.algorithm)
        object.__setattr__(generator, "digits", self.digits)
        return generator


def _validate_factor(factor: Factor) -> None:
    if isinstance(factor, Counter):
        value = factor.value
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"Counter must be an integer: {value!r}")
        if not 0 <= value <= MAX_COUNTER:
            raise ValidationError(f"Counter must be between 0 and {MAX_COUNTER}: {value}")
    elif isinstance(factor, Timer):
        period = factor.period
        if isinstance(period, bool) or not isinstance(period, (int, float)):
            raise ValidationError(f"Timer period must be a number: {period!r}")
        # The period must be positive and non-zero to produce a valid counter value
        if not period > 0:
            raise ValidationError(f"Timer period must be positive: {period}")
    else:
        raise ValidationError(f"Unknown moving factor: {factor!r}")
