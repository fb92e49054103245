"""Conversion of a moving factor into an HOTP counter value."""

import logging
import math

from otp_generator.errors import InvalidPeriod, InvalidTime
from otp_generator.factor import MAX_COUNTER, Counter, Factor, Timer


logger = logging.getLogger(__name__)


def derive_counter(factor: Factor, at_time: float) -> int:
    """
    Calculate the counter needed to generate the password for a given time.

    Args:
        factor: The generator's moving factor.
        at_time: The target time, as seconds since the Unix epoch. Ignored
            for counter-based factors.

    Returns:
        The counter value, in the unsigned 64-bit range.

    Raises:
        InvalidTime: If the time is negative, not finite, or too far in the
            future to fit in a 64-bit counter.
        InvalidPeriod: If the timer period is not strictly positive.
    """
    if isinstance(factor, Counter):
        return factor.value

    if not isinstance(factor, Timer):
        raise TypeError(f"Unknown moving factor: {factor!r}")

    # NaN fails the comparison as well
    if not at_time >= 0:
        raise InvalidTime(f"Time must be a non-negative number: {at_time}")
    if not factor.period > 0:
        raise InvalidPeriod(f"Timer period must be positive: {factor.period}")

    # Infinite or NaN quotients cannot be floored to an integer
    try:
        counter = math.floor(at_time / factor.period)
    except (OverflowError, ValueError) as e:
        raise InvalidTime(
            f"Time {at_time} with period {factor.period} does not give a finite counter"
        ) from e
    if counter > MAX_COUNTER:
        raise InvalidTime(
            f"Time {at_time} with period {factor.period} overflows the 64-bit counter"
        )

    logger.debug("Derived counter %d from time %s (period %s)", counter, at_time, factor.period)
    return counter
