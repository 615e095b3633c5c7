"""Reinforcement learning algorithms: stochastic multi-armed bandits and benchmarks."""

__version__ = "0.1.1"
__all__ = ["arm", "bandit", "bench"]