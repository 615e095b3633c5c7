"""Stochastic bandit algorithms: greedy, epsilon-greedy and UCB."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field, replace


class Bandit(ABC):
    """An agent that chooses arms and learns from their rewards."""

    @abstractmethod
    def select_arm(self) -> int:
        """Select an arm to pull."""

    @abstractmethod
    def receive_reward(self, reward: float) -> None:
        """Reward the bandit for the selected arm."""

    @abstractmethod
    def restart(self) -> None:
        """Clear the internal state."""


@dataclass
class BanditState:
    """Learning state of a bandit over a fixed number of arms."""

    n_available_arms: int
    initial_value: float = 0.0
    steps: int = 0
    selected_arm: int = 0
    arm_pulls: list[int] = field(default_factory=list)
    estimated_arm_values: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.arm_pulls and not self.estimated_arm_values:
            self.reset()

    def reset(self) -> None:
        """Forget all pulls and return every estimate to the initial value."""
        self.steps = 0
        self.selected_arm = 0
        self.arm_pulls = [0] * self.n_available_arms
        self.estimated_arm_values = [self.initial_value] * self.n_available_arms


@dataclass(frozen=True)
class EpsilonGreedy:
    """Explore a random arm with probability ``epsilon``, otherwise exploit."""

    epsilon: float = 0.0


@dataclass(frozen=True)
class UCB:
    """Upper-confidence-bound selection with the given degree of exploration."""

    exploration_degree: float = 0.0


def _argmax(values: Sequence[float]) -> int:
    """Index of the largest value; on ties the last one."""
    if not values:
        raise ValueError("Cannot select an arm: there are no arms")
    best_index, best_value = 0, values[0]
    for index, value in enumerate(values):
        if value >= best_value:
            best_index, best_value = index, value
    return best_index


@dataclass
class StochasticBandit(Bandit):
    """A bandit that estimates arm values by incremental averaging."""

    state: BanditState
    algorithm: EpsilonGreedy | UCB
    learning_rate: float | None = None

    @classmethod
    def greedy(cls, arms: int) -> StochasticBandit:
        """Sample-average bandit that never explores inferior arms."""
        return cls(BanditState(arms), EpsilonGreedy(0.0))

    @classmethod
    def epsilon_greedy(cls, arms: int, epsilon: float) -> StochasticBandit:
        """Bandit that picks a random arm with probability ``epsilon``."""
        return cls(BanditState(arms), EpsilonGreedy(epsilon))

    @classmethod
    def ucb(cls, arms: int, exploration_degree: float) -> StochasticBandit:
        """Bandit that weighs estimates by their uncertainty."""
        return cls(BanditState(arms), UCB(exploration_degree))

    def with_constant_learning_rate(self, learning_rate: float) -> StochasticBandit:
        """Copy of this bandit that updates estimates with a fixed step size."""
        if learning_rate <= 0.0 or learning_rate > 1.0:
            raise ValueError(f"Invalid alpha value: {learning_rate}")
        return replace(self, learning_rate=learning_rate)

    def with_biased_state(self, value: float) -> StochasticBandit:
        """Copy of this bandit whose estimates all start at ``value``."""
        return replace(
            self, state=BanditState(self.state.n_available_arms, initial_value=value)
        )

    def _ucb_scores(self, exploration_degree: float) -> list[float]:
        state = self.state
        log_steps = math.log(state.steps) if state.steps > 0 else 0.0
        scores = []
        for value, pulls in zip(state.estimated_arm_values, state.arm_pulls):
            if pulls == 0:
                # an arm never pulled has an unbounded confidence interval
                scores.append(math.inf)
            else:
                scores.append(value + exploration_degree * math.sqrt(log_steps / pulls))
        return scores

    def select_arm(self) -> int:
        state = self.state
        if state.steps == 0:
            state.selected_arm = _argmax(state.estimated_arm_values)

        match self.algorithm:
            case EpsilonGreedy(epsilon=epsilon):
                if random.random() > 1.0 - epsilon:
                    state.selected_arm = random.randrange(state.n_available_arms)
                else:
                    state.selected_arm = _argmax(state.estimated_arm_values)
            case UCB(exploration_degree=degree):
                state.selected_arm = _argmax(self._ucb_scores(degree))

        return state.selected_arm

    def receive_reward(self, reward: float) -> None:
        state = self.state
        arm = state.selected_arm
        state.steps += 1
        state.arm_pulls[arm] += 1
        alpha = self.learning_rate if self.learning_rate is not None else 1.0 / state.arm_pulls[arm]
        state.estimated_arm_values[arm] += alpha * (reward - state.estimated_arm_values[arm])

    def restart(self) -> None:
        self.state.reset()