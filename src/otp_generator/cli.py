"""Command-line interface for otp-generator."""

import argparse
import base64
import binascii
import logging
import sys
import time
from typing import List, Optional, Sequence

from otp_generator.algorithm import Algorithm
from otp_generator.errors import GeneratorError
from otp_generator.factor import Counter, Timer
from otp_generator.generator import DEFAULT_DIGITS, DEFAULT_PERIOD, Generator
from otp_generator.hotp import MAX_DIGITS, MIN_DIGITS


logger = logging.getLogger(__name__)


def decode_secret(secret: str, hex_encoded: bool = False) -> bytes:
    """
    Decode a shared secret from Base32 (preferred), Base64 or hexadecimal.

    Args:
        secret: The encoded secret string.
        hex_encoded: Decode the secret as hexadecimal instead.

    Returns:
        Decoded secret as bytes.

    Raises:
        ValueError: If the secret cannot be decoded.
    """
    secret = "".join(secret.split())
    if hex_encoded:
        try:
            return bytes.fromhex(secret)
        except ValueError as e:
            raise ValueError(f"Unable to decode secret from hexadecimal: {e}") from e

    # Authenticator apps usually omit the Base32 padding
    padded = secret + "=" * (-len(secret) % 8)
    try:
        return base64.b32decode(padded, casefold=True)
    except binascii.Error:
        logger.debug("Secret is not Base32, trying Base64")

    try:
        return base64.b64decode(secret + "=" * (-len(secret) % 4), validate=True)
    except binascii.Error as e:
        raise ValueError(f"Unable to decode secret from Base32 or Base64: {e}") from e


def build_generator(args: argparse.Namespace) -> Generator:
    """Create a generator from the parsed command-line options."""
    secret = decode_secret(args.secret, hex_encoded=args.hex)
    algorithm = Algorithm.from_name(args.algorithm)
    if args.counter is not None:
        factor = Counter(args.counter)
    else:
        factor = Timer(args.period if args.period is not None else DEFAULT_PERIOD)
    return Generator.create(factor, secret, algorithm=algorithm, digits=args.digits)


def generate_passwords(generator: Generator, at_time: float, count: int) -> List[str]:
    """
    Generate ``count`` successive passwords starting at ``generator``.

    Counter-based generators move to their successor; timer-based ones move
    to the next time step.
    """
    passwords = []
    for index in range(count):
        if index:
            if isinstance(generator.factor, Timer):
                at_time += generator.factor.period
            else:
                generator = generator.successor()
        passwords.append(generator.password_at(at_time))
    return passwords


def code_command(args: argparse.Namespace) -> int:
    """Handle the code command."""
    try:
        generator = build_generator(args)
        at_time = args.time if args.time is not None else time.time()
        for password in generate_passwords(generator, at_time, args.count):
            print(password)
        return 0
    except GeneratorError as e:
        print(f"✗ Failed to generate code: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="otp-generator",
        description="HOTP/TOTP one-time password generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Code command
    code_parser = subparsers.add_parser(
        "code",
        aliases=["generate", "gen"],
        help="Generate one-time passwords",
    )
    code_parser.add_argument(
        "--secret",
        "-s",
        required=True,
        help="Shared secret, Base32 encoded (Base64 also accepted)",
    )
    code_parser.add_argument(
        "--hex",
        action="store_true",
        help="Read the secret as hexadecimal",
    )
    code_parser.add_argument(
        "--algorithm",
        "-a",
        default="sha1",
        choices=["sha1", "sha256", "sha512"],
        help="HMAC hash function (default: sha1)",
    )
    code_parser.add_argument(
        "--digits",
        "-d",
        type=int,
        default=DEFAULT_DIGITS,
        choices=list(range(MIN_DIGITS, MAX_DIGITS + 1)),
        help=f"Number of digits in the code (default: {DEFAULT_DIGITS})",
    )
    factor_group = code_parser.add_mutually_exclusive_group()
    factor_group.add_argument(
        "--counter",
        "-c",
        type=int,
        default=None,
        help="HOTP counter value",
    )
    factor_group.add_argument(
        "--period",
        "-p",
        type=float,
        default=None,
        help=f"TOTP time step in seconds (default: {DEFAULT_PERIOD:g})",
    )
    code_parser.add_argument(
        "--time",
        "-t",
        type=float,
        default=None,
        help="Seconds since the Unix epoch (default: now)",
    )
    code_parser.add_argument(
        "--count",
        "-n",
        type=_positive_int,
        default=1,
        help="Number of successive codes to print (default: 1)",
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        return 1

    if args.command in ("code", "generate", "gen"):
        return code_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
