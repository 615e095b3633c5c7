import pytest

from readapt.bandit import UCB, BanditState, EpsilonGreedy, StochasticBandit


def test_greedy_bandit():
    bandit = StochasticBandit.greedy(5)
    assert bandit.state.n_available_arms == 5
    assert bandit.algorithm == EpsilonGreedy(0.0)
    assert bandit.state.estimated_arm_values == [0.0] * 5

    bandit.receive_reward(1.0)
    assert bandit.select_arm() == 0
    assert bandit.state.estimated_arm_values == [1.0, 0.0, 0.0, 0.0, 0.0]

    bandit.receive_reward(-5.0)
    assert bandit.state.estimated_arm_values == [-2.0, 0.0, 0.0, 0.0, 0.0]
    assert bandit.select_arm() != 0


def test_epsilon_greedy_bandit():
    bandit = StochasticBandit.epsilon_greedy(10, 0.05)
    assert bandit.state.n_available_arms == 10
    assert bandit.algorithm == EpsilonGreedy(0.05)
    assert bandit.state.estimated_arm_values == [0.0] * 10
    assert bandit.state.arm_pulls == [0] * 10
    assert bandit.state.selected_arm == 0


def test_full_exploration_stays_in_range():
    bandit = StochasticBandit.epsilon_greedy(4, 1.0)
    chosen = {bandit.select_arm() for _ in range(300)}
    assert chosen <= {0, 1, 2, 3}
    assert len(chosen) > 1


def test_constant_learning_rate():
    bandit = (
        StochasticBandit.greedy(5)
        .with_constant_learning_rate(0.5)
        .with_biased_state(1.5)
        .with_constant_learning_rate(1.0)
    )
    bandit.restart()
    assert bandit.learning_rate == 1.0
    assert bandit.state.estimated_arm_values == [1.5] * 5


def test_constant_learning_rate_update():
    bandit = StochasticBandit.greedy(2).with_constant_learning_rate(0.5)
    bandit.select_arm()
    bandit.receive_reward(4.0)
    assert bandit.state.estimated_arm_values[bandit.state.selected_arm] == 2.0


def test_zero_learning_rate():
    with pytest.raises(ValueError, match="Invalid alpha value: 0"):
        StochasticBandit.greedy(5).with_constant_learning_rate(0.0)


def test_learning_rate_above_one():
    with pytest.raises(ValueError, match="Invalid alpha value"):
        StochasticBandit.greedy(5).with_constant_learning_rate(1.5)


def test_restart_clears_state():
    bandit = StochasticBandit.greedy(3).with_biased_state(2.0)
    bandit.select_arm()
    bandit.receive_reward(10.0)
    bandit.restart()
    assert bandit.state.steps == 0
    assert bandit.state.arm_pulls == [0, 0, 0]
    assert bandit.state.estimated_arm_values == [2.0, 2.0, 2.0]
    assert bandit.state.selected_arm == 0


def test_bandit_state_reset():
    state = BanditState(3, initial_value=0.5)
    state.steps = 4
    state.arm_pulls[1] = 4
    state.reset()
    assert state == BanditState(3, initial_value=0.5)
    assert state.estimated_arm_values == [0.5, 0.5, 0.5]


def test_ucb_tries_every_arm_first():
    bandit = StochasticBandit.ucb(4, 2.0)
    assert bandit.algorithm == UCB(2.0)
    chosen = []
    for _ in range(4):
        arm = bandit.select_arm()
        chosen.append(arm)
        bandit.receive_reward(1.0)
    assert sorted(chosen) == [0, 1, 2, 3]
    assert bandit.state.arm_pulls == [1, 1, 1, 1]


def test_ucb_prefers_rewarding_arm():
    rewards = [0.0, 1.0, 0.0]
    bandit = StochasticBandit.ucb(3, 0.1)
    picks = []
    for _ in range(100):
        arm = bandit.select_arm()
        picks.append(arm)
        bandit.receive_reward(rewards[arm])
    assert picks[-50:].count(1) == 50


def test_no_arms_cannot_select():
    with pytest.raises(ValueError):
        StochasticBandit.greedy(0).select_arm()