"""Benchmarking bandits against a multi-armed problem."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from readapt.arm import MultiArm
from readapt.bandit import Bandit


@dataclass
class BenchmarkResult:
    """Per-step statistics of each bandit averaged over all runs.

    ``optimal_action_percentage_history`` is the fraction of runs in which a
    bandit chose the optimal arm at each step; it is ``None`` when the true
    arm values are not all known.
    """

    average_reward_history: list[list[float]]
    optimal_action_percentage_history: list[list[float]] | None


@dataclass
class Benchmark:
    """A set of bandits played against the same arms."""

    arm: MultiArm
    bandits: list[Bandit] = field(default_factory=list)

    def run(self, runs: int, steps: int) -> BenchmarkResult:
        """Run every bandit ``runs`` times for ``steps`` steps and average the results."""
        optimal_arm = self.arm.optimal_arm()
        rewards = [[0.0] * steps for _ in self.bandits]
        optimal_hits = [[0.0] * steps for _ in self.bandits]

        for _ in range(runs):
            for bandit in self.bandits:
                bandit.restart()
            for t in range(steps):
                for bandit, bandit_rewards, bandit_hits in zip(self.bandits, rewards, optimal_hits):
                    arm = bandit.select_arm()
                    reward = self.arm.pull(arm)
                    bandit_rewards[t] += reward
                    if optimal_arm is not None and arm == optimal_arm:
                        bandit_hits[t] += 1.0
                    bandit.receive_reward(reward)

        def average(history: list[list[float]]) -> list[list[float]]:
            return [[total / runs if runs else math.nan for total in row] for row in history]

        return BenchmarkResult(
            average_reward_history=average(rewards),
            optimal_action_percentage_history=(
                average(optimal_hits) if optimal_arm is not None else None
            ),
        )