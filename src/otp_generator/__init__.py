"""RFC 4226 (HOTP) and RFC 6238 (TOTP) one-time password generation."""

from otp_generator.algorithm import Algorithm
from otp_generator.counter import derive_counter
from otp_generator.errors import (
    CounterOverflow,
    GeneratorError,
    InvalidDigits,
    InvalidPeriod,
    InvalidTime,
    ValidationError,
)
from otp_generator.factor import Counter, Factor, Timer
from otp_generator.generator import Generator
from otp_generator.hotp import generate_password

__all__ = [
    "Algorithm",
    "Counter",
    "CounterOverflow",
    "Factor",
    "Generator",
    "GeneratorError",
    "InvalidDigits",
    "InvalidPeriod",
    "InvalidTime",
    "Timer",
    "ValidationError",
    "derive_counter",
    "generate_password",
]
