"""Random rolls used by combat and board placement."""

import random
from typing import Any, Optional


class DiceRoller:
    """Handles the game's random draws.

    Every method takes an optional ``rng`` with the ``random`` module API
    (``random()``, ``randint()``); a seeded ``random.Random`` makes the
    draws reproducible.
    """

    @staticmethod
    def roll_chance(rng: Optional[Any] = None) -> float:
        """
        Roll a uniform value in [0, 1].

        Args:
            rng: Optional random source

        Returns:
            The rolled value
        """
        source = rng or random
        return source.random()

    @staticmethod
    def roll_range(low: int, high: int, rng: Optional[Any] = None) -> int:
        """
        Roll a uniform integer in [low, high], both ends included.

        Args:
            low: Smallest possible result
            high: Largest possible result
            rng: Optional random source

        Returns:
            The rolled integer
        """
        if high < low:
            raise ValueError(f"Invalid range: [{low}, {high}]")
        source = rng or random
        return source.randint(low, high)

    @staticmethod
    def roll_cell(height: int, width: int, rng: Optional[Any] = None) -> tuple[int, int]:
        """Roll a (row, column) pair within a height x width grid."""
        return DiceRoller.roll_range(0, height - 1, rng), DiceRoller.roll_range(0, width - 1, rng)
