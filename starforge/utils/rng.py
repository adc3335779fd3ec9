"""Seedable RNG wrapper for deterministic celestial generation."""

import random


class CelestialRNG:
    """Wrapper around Python's random.Random for reproducible generation.

    Every sampler in the engine (star types, physical ranges, positions,
    names, slot counts) draws from an instance of this class that is passed
    down the generation call chain. Two runs with the same seed produce the
    same galaxy.
    """

    def __init__(self, seed: int | None = None):
        """Initialize RNG with given seed.

        Args:
            seed: Integer seed for deterministic randomness, or None to seed
                from system entropy
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def roll(self, faces: float, integer: bool = False) -> float:
        """Roll a die with the given number of faces.

        Args:
            faces: Upper bound (exclusive) of the roll
            integer: If True, floor the result to a whole number

        Returns:
            A value in [0, faces), floored when integer is True

        Examples:
            >>> CelestialRNG(1).roll(6, integer=True) in range(6)
            True
        """
        value = self.rng.random() * faces
        if integer:
            return int(value)
        return value

    def randint(self, a: int, b: int) -> int:
        """Return random integer in range [a, b], inclusive.

        A degenerate range (b <= a) returns a without consuming entropy.

        Args:
            a: Lower bound (inclusive)
            b: Upper bound (inclusive)

        Returns:
            Random integer between a and b
        """
        if b <= a:
            return a
        return self.rng.randint(a, b)

    def uniform(self, low: float, high: float) -> float:
        """Return random float between low and high.

        Args:
            low: Lower bound
            high: Upper bound

        Returns:
            low when the bounds are equal, otherwise a float in [low, high)
        """
        if low == high:
            return low
        return low + self.rng.random() * (high - low)

    def choice(self, seq):
        """Choose random element from non-empty sequence.

        Args:
            seq: Sequence to choose from

        Returns:
            Random element from sequence
        """
        return self.rng.choice(seq)

    def random(self) -> float:
        """Return random float in [0.0, 1.0).

        Returns:
            Random float between 0.0 and 1.0
        """
        return self.rng.random()

