# readapt

A small collection of reinforcement learning algorithms. It currently covers
stochastic multi-armed bandits and a benchmark for comparing them. It needs
nothing outside the Python standard library.

## Installation

```
pip install readapt
```

## Arms (`readapt.arm`)

An `Arm` gives a reward each time it is pulled. Its `value` attribute holds
its true value, or `None` when that value is unknown.

A `RandomArm` draws its rewards by calling a sampler function:

- `RandomArm.normal(value)` draws from a normal distribution with mean
  `value` and unit variance. `value` is also the arm's true value.
- `RandomArm.uniform(low, high, value=None)` draws uniformly from `[low, high)`.
  It raises `ValueError` unless `low < high`.
- `RandomArm(sampler, value=None)` takes any zero-argument callable that
  returns a float.

`MultiArm` holds a sequence of arms and addresses them by index.

```python
from readapt.arm import RandomArm, MultiArm

arm = RandomArm.normal(0.0)
reward = arm.pull()

uniform = RandomArm.uniform(0.0, 1.0)         # true value unknown

arms = MultiArm([RandomArm.normal(v) for v in (0.1, 0.9, -0.3)])
arms.pull(1)
arms.optimal_arm()    # 1
```

`optimal_arm()` returns the index of the arm with the highest true value. It
returns `None` if any arm's value is unknown or if there are no arms. When
several arms tie, it returns the last of them.

## Bandits (`readapt.bandit`)

`StochasticBandit` estimates each arm's value by incremental averaging. It
supports three strategies:

- `StochasticBandit.greedy(arms)`: always picks the arm with the highest estimate.
- `StochasticBandit.epsilon_greedy(arms, epsilon)`: picks a random arm with
  probability `epsilon` and the best estimate otherwise.
- `StochasticBandit.ucb(arms, exploration_degree)`: Upper Confidence Bound.
  It adds `exploration_degree * sqrt(ln(steps) / pulls)` to each estimate.
  An arm that has never been pulled scores as infinite, so it is tried first.

When several arms share the highest score, the bandit picks the last of them.

You can tune a bandit with two builders. Each returns a new bandit.

- `with_constant_learning_rate(rate)` makes every update use a fixed step
  size in place of `1 / pulls`. It raises `ValueError` unless the rate is in
  `(0, 1]`.
- `with_biased_state(value)` starts every estimate at `value`. Use an
  optimistic value to encourage early exploration. `restart()` goes back to
  this value.

```python
from readapt.bandit import StochasticBandit

bandit = (
    StochasticBandit.epsilon_greedy(3, 0.1)
    .with_constant_learning_rate(0.1)
    .with_biased_state(5.0)
)

arm = bandit.select_arm()
bandit.receive_reward(arms.pull(arm))
bandit.restart()
```

`bandit.state` is a `BanditState`. It exposes `steps`, `selected_arm`,
`arm_pulls` and `estimated_arm_values`. To write your own strategy, subclass
`Bandit` and implement `select_arm`, `receive_reward` and `restart`.

## Benchmarks (`readapt.bench`)

`Benchmark` plays several bandits against the same `MultiArm`. Every run
starts by restarting each bandit. The results are averaged over the runs, per
step.

```python
from readapt.bench import Benchmark

bench = Benchmark(
    arms,
    [StochasticBandit.greedy(3), StochasticBandit.ucb(3, 2.0)],
)
result = bench.run(runs=100, steps=1000)

result.average_reward_history               # one list of rewards per bandit
result.optimal_action_percentage_history    # fraction of runs choosing the optimal arm
```

`optimal_action_percentage_history` is `None` when any arm's true value is
unknown. With `runs=0`, every averaged entry is `nan`.

All randomness comes from Python's `random` module. Call `random.seed(...)`
to make runs reproducible.

## Scope

This package is a library only. It has no command-line tool, and it does not
plot or save benchmark results. Use the returned lists with the tools of your
choice.

## Running the tests

```
pip install -e ".[test]"
pytest
```