import numpy as np
import pytest

from maze_chase.config import GameConfig
from maze_chase.gym_env import STEER_ACTIONS, ChaseEnv, grid_array
from maze_chase.levels import generate
from maze_chase.state import State
from tests.test_utils import make_corridor_state


def corridor_state(config: GameConfig) -> State:
    return make_corridor_state()[0]


def test_observation_shapes_small_layout() -> None:
    env = ChaseEnv(GameConfig(layout="small"))
    obs, info = env.reset(seed=0)
    assert obs["grid"].shape == (7, 9)
    assert obs["grid"].dtype == np.int8
    assert obs["positions"].shape == (2, 2)
    assert obs["targets"].shape == (2, 2)
    assert obs["progress"].shape == (2,)
    assert obs["directions"].shape == (2,)
    assert env.observation_space.contains(obs)
    assert info["tick"] == 0
    assert info["captured_by"] == []


def test_player_comes_first() -> None:
    env = ChaseEnv(GameConfig(layout="small"))
    obs, _ = env.reset()
    assert obs["positions"][0].tolist() == [1, 1]
    assert obs["positions"][1].tolist() == [4, 3]


def test_grid_codes() -> None:
    grid = generate(GameConfig(layout="home")).grid
    codes = grid_array(grid)
    assert codes[0, 0] == 1
    assert codes[1, 1] == 0
    assert codes[3, 4] == 2


def test_step_rewards_survival_time() -> None:
    env = ChaseEnv(GameConfig(layout="small"))
    env.reset()
    obs, reward, terminated, truncated, info = env.step(np.int64(0))
    assert reward == pytest.approx(1.0 / 60.0)
    assert not terminated
    assert not truncated
    assert info["tick"] == 1
    assert env.observation_space.contains(obs)


def test_every_action_is_accepted() -> None:
    env = ChaseEnv(GameConfig(layout="small"))
    env.reset()
    for action in range(len(STEER_ACTIONS)):
        obs, *_ = env.step(np.int64(action))
        assert env.observation_space.contains(obs)


def test_invalid_action_raises() -> None:
    env = ChaseEnv(GameConfig(layout="small"))
    env.reset()
    with pytest.raises(ValueError):
        env.step(np.int64(len(STEER_ACTIONS)))


def test_capture_terminates_episode() -> None:
    env = ChaseEnv(GameConfig(tick_seconds=1.0), initial_state_fn=corridor_state)
    env.reset()
    for _ in range(4):
        _, reward, terminated, truncated, _ = env.step(np.int64(0))
        assert not terminated and not truncated
        assert reward == 1.0
    _, reward, terminated, truncated, info = env.step(np.int64(0))
    assert terminated
    assert not truncated
    assert reward == 0.0
    assert info["captures"] == 1
    assert len(info["captured_by"]) == 1


def test_max_ticks_truncates_episode() -> None:
    env = ChaseEnv(GameConfig(layout="small", max_ticks=3))
    env.reset()
    results = [env.step(np.int64(0)) for _ in range(3)]
    assert [r[3] for r in results] == [False, False, True]
    assert not any(r[2] for r in results)


def test_reset_restores_initial_state() -> None:
    env = ChaseEnv(GameConfig(layout="small", tick_seconds=1.0))
    first, _ = env.reset()
    for _ in range(3):
        env.step(np.int64(4))
    again, info = env.reset()
    assert info["tick"] == 0
    for key in first:
        np.testing.assert_array_equal(first[key], again[key])
