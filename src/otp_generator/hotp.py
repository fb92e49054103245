"""RFC 4226 HOTP (HMAC-based One-Time Password) implementation."""

from cryptography.hazmat.primitives import hmac

from otp_generator.algorithm import Algorithm
from otp_generator.errors import InvalidDigits


# RFC 4226 section 5.3: "Implementations MUST extract a 6-digit code at a
# minimum and possibly 7 and 8-digit codes."
MIN_DIGITS = 6
MAX_DIGITS = 8


def validate_digits(digits: int) -> bool:
    """Return whether ``digits`` is an acceptable password length."""
    return isinstance(digits, int) and MIN_DIGITS <= digits <= MAX_DIGITS


def generate_password(algorithm: Algorithm, digits: int, secret: bytes, counter: int) -> str:
    """
    Generate a password using the HOTP algorithm.

    Args:
        algorithm: The hash function used for the HMAC.
        digits: Number of digits in the output password (6 to 8).
        secret: The raw shared secret.
        counter: The moving counter value.

    Returns:
        A zero-padded password string of exactly ``digits`` characters.

    Raises:
        InvalidDigits: If ``digits`` is outside the supported range.
    """
    if not validate_digits(digits):
        raise InvalidDigits(f"Digits must be between {MIN_DIGITS} and {MAX_DIGITS}: {digits}")

    # Convert counter to 8-byte big-endian integer
    counter_bytes = counter.to_bytes(8, byteorder="big")

    # Compute the HMAC with the selected hash function
    h = hmac.HMAC(secret, algorithm.new_hash())
    h.update(counter_bytes)
    digest = h.finalize()

    # Dynamic truncation (RFC 4226, Section 5.4)
    offset = digest[-1] & 0x0F
    assert offset + 4 <= len(digest), "truncation offset exceeds digest length"
    binary = int.from_bytes(digest[offset : offset + 4], byteorder="big") & 0x7FFFFFFF

    # Generate code: binary % 10^digits, zero-padded
    code = binary % (10**digits)
    return f"{code:0{digits}d}"
