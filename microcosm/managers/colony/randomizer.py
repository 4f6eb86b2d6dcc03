"""
Shared random source for the colony.

Every stochastic rule draws from a numpy Generator that is passed in
explicitly. ``Randomizer`` only supplies the default shared generator used
when nothing is injected.
"""

from typing import Optional
import numpy as np


class Randomizer:
    """Holder of the process-wide default generator."""

    _shared_rng = None

    @staticmethod
    def create(seed: Optional[int] = None) -> np.random.Generator:
        """
        Build an independent generator.

        Args:
            seed: Seed for reproducible runs; None draws fresh OS entropy.
        """
        return np.random.Generator(np.random.PCG64(seed))

    @classmethod
    def get_random(cls) -> np.random.Generator:
        """Return the shared generator, creating it on first use."""
        if cls._shared_rng is None:
            cls._shared_rng = cls.create()
        return cls._shared_rng

    @classmethod
    def reset(cls, seed: Optional[int] = None) -> np.random.Generator:
        """Replace the shared generator, e.g. to reseed between runs."""
        cls._shared_rng = cls.create(seed)
        return cls._shared_rng
