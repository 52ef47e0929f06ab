"""
Tests for Session Nonce Generation

Tests for IdentifierGenerator: length, alphabet, reproducibility, and a
chi-square sanity check on symbol frequencies.
"""

import random
from collections import Counter

from strangerchat import IdentifierGenerator, generate_random_id
from strangerchat.identifier import ID_ALPHABET, ID_LENGTH


# Critical chi-square value for 33 degrees of freedom at p = 0.001
CHI_SQUARE_CRITICAL_33 = 63.87


def test_alphabet_has_34_unambiguous_symbols():
    """Test that the alphabet excludes I and O and has 34 symbols."""
    assert len(ID_ALPHABET) == 34
    assert len(set(ID_ALPHABET)) == 34
    assert "I" not in ID_ALPHABET
    assert "O" not in ID_ALPHABET


def test_generate_returns_eight_alphabet_characters():
    """Test that every generated id has 8 characters from the alphabet."""
    generator = IdentifierGenerator(random.Random(7))
    for _ in range(500):
        identifier = generator.generate()
        assert len(identifier) == ID_LENGTH
        assert all(char in ID_ALPHABET for char in identifier)


def test_module_level_generate_random_id():
    """Test the module-level convenience function."""
    identifier = generate_random_id()
    assert len(identifier) == 8
    assert set(identifier) <= set(ID_ALPHABET)


def test_seeded_generators_are_reproducible():
    """Test that two generators with the same seed agree."""
    first = IdentifierGenerator(random.Random(99))
    second = IdentifierGenerator(random.Random(99))
    assert [first.generate() for _ in range(10)] == [
        second.generate() for _ in range(10)
    ]


def test_symbol_frequencies_pass_chi_square():
    """Test that 10,000 ids show no significant bias among symbols."""
    generator = IdentifierGenerator(random.Random(12345))
    counts = Counter()
    for _ in range(10_000):
        counts.update(generator.generate())

    total = sum(counts.values())
    expected = total / len(ID_ALPHABET)
    chi_square = sum(
        (counts[symbol] - expected) ** 2 / expected for symbol in ID_ALPHABET
    )

    assert total == 80_000
    assert chi_square < CHI_SQUARE_CRITICAL_33
