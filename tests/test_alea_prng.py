"""Tests for the Alea PRNG and the process-default generator."""

import pytest
from py_hexmap.core.alea_prng import AleaPRNG
from py_hexmap.utils.random import get_prng, set_random_seed


class TestAleaPRNG:
    """Test the seeded generator."""

    def test_range(self):
        """Test that values stay in [0, 1)."""
        prng = AleaPRNG("range")
        for _ in range(1000):
            assert 0 <= prng.random() < 1

    def test_same_seed_same_sequence(self):
        """Test that same seed produces same sequence."""
        a = AleaPRNG("seed")
        b = AleaPRNG("seed")
        assert [a.random() for _ in range(20)] == [b.random() for _ in range(20)]

    def test_different_seeds(self):
        """Test that different seeds produce different sequences."""
        a = AleaPRNG("seed1")
        b = AleaPRNG("seed2")
        assert [a.random() for _ in range(5)] != [b.random() for _ in range(5)]

    def test_call_count(self):
        """Test that every draw is counted."""
        prng = AleaPRNG("count")
        prng.random()
        prng.randrange(10)
        prng.choice([1, 2, 3])
        assert prng.call_count == 3

    def test_randrange(self):
        """Test integer draws cover the range and reject empty ranges."""
        prng = AleaPRNG("randrange")
        values = {prng.randrange(4) for _ in range(200)}
        assert values == {0, 1, 2, 3}
        with pytest.raises(ValueError):
            prng.randrange(0)

    def test_choice_empty(self):
        """Test that choosing from an empty sequence fails."""
        with pytest.raises(IndexError):
            AleaPRNG("empty").choice([])


class TestDefaultPRNG:
    """Test the module-level generator."""

    def test_set_random_seed(self):
        """Test reseeding the process-default generator."""
        prng = set_random_seed("global")
        assert get_prng() is prng
        expected = AleaPRNG("global").random()
        assert get_prng().random() == expected
