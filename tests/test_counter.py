"""Tests for counter derivation from moving factors."""

import math

import pytest

from otp_generator.counter import derive_counter
from otp_generator.errors import InvalidPeriod, InvalidTime
from otp_generator.factor import Counter, Timer


def test_counter_factor_ignores_time():
    """Counter factors return their value whatever the time."""
    assert derive_counter(Counter(42), 0) == 42
    assert derive_counter(Counter(42), 1234567890) == 42
    assert derive_counter(Counter(42), -1) == 42


@pytest.mark.parametrize(
    "at_time,expected",
    [
        (0, 0),
        (29, 0),
        (29.999, 0),
        (30, 1),
        (59, 1),
        (1111111109, 37037036),
        (1234567890, 41152263),
        (20000000000, 666666666),
    ],
)
def test_timer_factor(at_time, expected):
    """Timer factors divide the time by the period and round down."""
    assert derive_counter(Timer(30), at_time) == expected


def test_timer_fractional_period():
    """Periods need not be whole seconds."""
    assert derive_counter(Timer(0.5), 10.25) == 20


@pytest.mark.parametrize("at_time", [-1, -0.001, math.nan, math.inf])
def test_invalid_time(at_time):
    """Test that negative or non-finite times raise InvalidTime."""
    with pytest.raises(InvalidTime):
        derive_counter(Timer(30), at_time)


@pytest.mark.parametrize("period", [0, -30, math.nan])
def test_invalid_period(period):
    """The period is checked again when deriving the counter."""
    with pytest.raises(InvalidPeriod, match="must be positive"):
        derive_counter(Timer(period), 59)


def test_time_checked_before_period():
    """A negative time is reported before an invalid period."""
    with pytest.raises(InvalidTime):
        derive_counter(Timer(0), -1)


def test_counter_overflow():
    """Times producing counters beyond 64 bits raise InvalidTime."""
    with pytest.raises(InvalidTime, match="overflows"):
        derive_counter(Timer(1e-10), 1e12)


@pytest.mark.parametrize(
    "period,at_time",
    [
        (1e-300, 1e300),
        (30, 10**400),
        (math.inf, math.inf),
    ],
)
def test_non_finite_counter(period, at_time):
    """Quotients too large for a float or not a number raise InvalidTime."""
    with pytest.raises(InvalidTime, match="finite counter"):
        derive_counter(Timer(period), at_time)
