"""Arms of a multi-armed bandit problem."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass


class Arm(ABC):
    """An arm that yields a reward when pulled.

    ``value`` is the true value of the arm, or ``None`` when it is unknown.
    """

    value: float | None = None

    @abstractmethod
    def pull(self) -> float:
        """Pull the arm and return the reward."""


@dataclass(frozen=True)
class RandomArm(Arm):
    """An arm whose rewards are drawn from a reward distribution.

    The true value of the arm, if given, is assumed to be a possible outcome
    of the distribution; it is not observable through pulls.
    """

    sampler: Callable[[], float]
    value: float | None = None

    @classmethod
    def normal(cls, value: float) -> RandomArm:
        """Arm with normally distributed rewards around ``value`` and unit variance."""
        mean = float(value)
        return cls(lambda: random.gauss(mean, 1.0), mean)

    @classmethod
    def uniform(cls, low: float, high: float, value: float | None = None) -> RandomArm:
        """Arm with rewards drawn uniformly from the half-open range [low, high)."""
        if not low < high:
            raise ValueError(f"Invalid uniform range: low={low} must be below high={high}")
        width = high - low

        def sample() -> float:
            reward = low + width * random.random()
            return reward if reward < high else low

        return cls(sample, value)

    def pull(self) -> float:
        return self.sampler()


class MultiArm:
    """A collection of arms, addressed by index."""

    def __init__(self, arms: Sequence[Arm]) -> None:
        self.arms = list(arms)

    def __len__(self) -> int:
        return len(self.arms)

    def pull(self, k: int) -> float:
        """Pull the ``k``-th arm."""
        return self.arms[k].pull()

    def optimal_arm(self) -> int | None:
        """Index of the arm with the highest true value.

        Returns ``None`` if any arm has an unknown value or there are no arms.
        On ties the last such arm wins.
        """
        values = [arm.value for arm in self.arms]
        if not values or any(value is None for value in values):
            return None
        best_index, best_value = 0, values[0]
        for index, value in enumerate(values):
            if value >= best_value:
                best_index, best_value = index, value
        return best_index