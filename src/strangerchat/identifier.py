"""
Session Nonce Generation

The relay expects every start request to carry a random 8-character id
drawn from a 34-symbol alphabet: uppercase letters without I and O, plus
digits.
"""

import random
from typing import Optional

ID_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ0123456789"
ID_LENGTH = 8

# Bits drawn per attempt; 2**6 = 64 >= len(ID_ALPHABET)
_SAMPLE_BITS = 6


class IdentifierGenerator:
    """
    Generator for relay session nonces.

    Characters are picked by drawing 6 random bits and rejecting values
    outside the alphabet, so every symbol is equally likely.

    Attributes:
        rng: Random source, a fresh ``random.Random`` unless one is given
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def _sample_symbol(self) -> str:
        while True:
            value = self.rng.getrandbits(_SAMPLE_BITS)
            if value < len(ID_ALPHABET):
                return ID_ALPHABET[value]

    def generate(self) -> str:
        """Return a new 8-character identifier."""
        return "".join(self._sample_symbol() for _ in range(ID_LENGTH))


_default_generator = IdentifierGenerator()


def generate_random_id() -> str:
    """Return a new identifier from the module-level generator."""
    return _default_generator.generate()
