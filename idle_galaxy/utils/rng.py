"""Seedable RNG wrapper for deterministic generation."""

import math
import random
import string


class GameRNG:
    """Wrapper around Python's random.Random for deterministic game behavior.

    All randomness in system generation and celestial dynamics goes through
    this class so that the same seed always produces the same galaxy.
    """

    def __init__(self, seed: int | None = None):
        """Initialize RNG with given seed.

        Args:
            seed: Integer seed for deterministic randomness. When None a seed
                is drawn from the system entropy source and kept on the
                instance so the run can be reproduced.
        """
        if seed is None:
            seed = random.SystemRandom().randrange(2**32)
        self.seed = seed
        self.rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return random integer in range [a, b], inclusive."""
        return self.rng.randint(a, b)

    def uniform(self, a: float, b: float) -> float:
        """Return random float in [a, b).

        Computed as ``a + (b - a) * random()`` so the upper bound is never
        returned, matching how ranges are sampled across the game.
        """
        return a + (b - a) * self.rng.random()

    def choice(self, seq):
        """Choose random element from non-empty sequence."""
        return self.rng.choice(seq)

    def shuffle(self, seq):
        """Shuffle sequence in place."""
        self.rng.shuffle(seq)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self.rng.random()

    def normal(self, mean: float = 0.0, std_dev: float = 1.0) -> float:
        """Sample a normal distribution with the Box-Muller transform.

        Args:
            mean: Distribution mean
            std_dev: Standard deviation

        Returns:
            Normally distributed float
        """
        u = 0.0
        v = 0.0
        while u == 0.0:
            u = self.rng.random()
        while v == 0.0:
            v = self.rng.random()
        return mean + std_dev * math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)

    def normal_range(
        self,
        low: float,
        high: float,
        mean: float | None = None,
        std_dev: float | None = None,
    ) -> float:
        """Sample a normal distribution truncated to [low, high].

        Values outside the bounds are rejected and redrawn.

        Args:
            low: Lower bound (inclusive)
            high: Upper bound (inclusive)
            mean: Distribution mean, defaults to the midpoint
            std_dev: Standard deviation, defaults to a sixth of the range

        Returns:
            Float in [low, high]

        Raises:
            ValueError: If low > high
        """
        if low > high:
            raise ValueError(f"Invalid range: [{low}, {high}]")
        if low == high:
            return low
        if mean is None:
            mean = (low + high) / 2
        if std_dev is None:
            std_dev = (high - low) / 6

        while True:
            value = self.normal(mean, std_dev)
            if low <= value <= high:
                return value

    def token(self, length: int = 9) -> str:
        """Return a random lowercase alphanumeric token for identifiers."""
        alphabet = string.ascii_lowercase + string.digits
        return "".join(self.rng.choice(alphabet) for _ in range(length))

    def get_state(self):
        """Get the current state of the RNG for serialization."""
        return self.rng.getstate()

    def set_state(self, state):
        """Set the state of the RNG for deserialization."""
        self.rng.setstate(state)
