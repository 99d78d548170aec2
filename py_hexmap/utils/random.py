"""
Random number generation utilities.

Map generation draws its randomness from an Alea PRNG so that a seed string
fully determines the result. Python's random and NumPy's random are not
used for anything that influences the generated map.
"""

from ..core.alea_prng import AleaPRNG

# Global PRNG instance
_prng = None


def set_random_seed(seed: str) -> AleaPRNG:
    """
    Reseed the process-default PRNG.

    Args:
        seed: Seed string to use

    Returns:
        The freshly seeded AleaPRNG instance
    """
    global _prng

    _prng = AleaPRNG(seed)
    return _prng


def get_prng() -> AleaPRNG:
    """
    Get the process-default PRNG, creating it on first use.

    Returns:
        AleaPRNG instance
    """
    global _prng
    if _prng is None:
        _prng = AleaPRNG("default")
    return _prng
