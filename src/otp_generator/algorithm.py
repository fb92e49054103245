"""Hash functions supported for the HMAC computation."""

import enum
from typing import Type

from cryptography.hazmat.primitives import hashes


class Algorithm(enum.Enum):
    """Cryptographic hash function used to compute the HMAC."""

    SHA1 = (hashes.SHA1, 20)
    SHA256 = (hashes.SHA256, 32)
    SHA512 = (hashes.SHA512, 64)

    def __init__(self, hash_class: Type[hashes.HashAlgorithm], digest_size: int):
        self.hash_class = hash_class
        self.digest_size = digest_size

    def new_hash(self) -> hashes.HashAlgorithm:
        """Return a fresh ``cryptography`` hash instance for this algorithm."""
        return self.hash_class()

    @classmethod
    def from_name(cls, name: str) -> "Algorithm":
        """
        Look up an algorithm by name.

        Case, dashes, underscores and spaces are ignored, so ``"sha1"``,
        ``"SHA-256"`` and ``"sha_512"`` are all accepted.

        Raises:
            ValueError: If the name does not match a supported algorithm.
        """
        normalized = name.strip().upper()
        for char in "-_ ":
            normalized = normalized.replace(char, "")
        try:
            return cls[normalized]
        except KeyError as e:
            raise ValueError(f"Unsupported algorithm: {name!r}") from e
