from dataclasses import replace

import pytest

from maze_chase.components import Position
from maze_chase.config import GameConfig
from maze_chase.directions import Direction
from maze_chase.levels import generate
from maze_chase.step import step
from maze_chase.systems.chase import greedy_chase_decision
from maze_chase.systems.encounter import is_captured
from maze_chase.types import CommitMode
from maze_chase.utils.ecs import first_player_id
from tests.test_utils import assert_motion_invariants, make_corridor_state


def test_corridor_capture_on_fifth_tick() -> None:
    state, player_id, pursuer_id = make_corridor_state()
    for expected_x in (5, 4, 3, 2):
        state = step(state, elapsed=1.0)
        assert not is_captured(state)
        assert state.position[pursuer_id] == Position(expected_x, 1)
        assert state.position[player_id] == Position(1, 1)

    state = step(state, elapsed=1.0)
    assert is_captured(state)
    assert state.captured == {pursuer_id}
    assert state.captures == 1
    assert state.tick == 5


def test_capture_event_cleared_on_next_tick() -> None:
    state, _, _ = make_corridor_state()
    for _ in range(5):
        state = step(state, elapsed=1.0)
    assert is_captured(state)

    # Pursuer reverses out of the dead end; the running count is kept.
    state = step(state, elapsed=1.0)
    assert not is_captured(state)
    assert state.captures == 1


def test_tick_and_time_advance() -> None:
    state, _, _ = make_corridor_state()
    state = step(state, elapsed=0.25)
    state = step(state, elapsed=0.5)
    state = step(state)
    assert state.tick == 3
    assert state.time == pytest.approx(0.75)


def test_step_is_pure() -> None:
    state, player_id, pursuer_id = make_corridor_state()
    next_state = step(state, Direction.RIGHT, 1.0)
    assert next_state is not state
    assert state.movable[player_id].direction == Direction.LEFT
    assert state.position[pursuer_id] == Position(5, 1)


def test_steer_applies_before_motion() -> None:
    state, player_id, _ = make_corridor_state()
    state = step(state, Direction.RIGHT, 1.0)
    assert state.movable[player_id].direction == Direction.RIGHT
    assert state.movable[player_id].target_tile == Position(2, 1)


def test_negative_elapsed_rejected() -> None:
    state, _, _ = make_corridor_state()
    with pytest.raises(ValueError):
        step(state, elapsed=-1.0)


def test_home_gate_exit_path() -> None:
    config = GameConfig(layout="home", player_speed=1.0, pursuer_speed=1.0)
    state = generate(config)
    (pursuer_id,) = state.pursuer
    home = Position(4, 4)
    path = [
        Position(4, 4),
        Position(4, 3),
        Position(3, 3),
        Position(2, 3),
        Position(1, 3),
        Position(1, 2),
    ]
    for expected in path:
        state = step(state, elapsed=1.0)
        assert state.position[pursuer_id] == expected
        assert not is_captured(state)

    state = step(state, elapsed=1.0)
    assert state.position[pursuer_id] == Position(1, 1)
    assert is_captured(state)
    assert state.tick == 7
    assert state.movable[pursuer_id].target_tile != home


def test_pursuer_does_not_reenter_home() -> None:
    config = GameConfig(
        layout="home", player_speed=1.0, pursuer_speed=1.0, player_start=(7, 1)
    )
    state = generate(config)
    (pursuer_id,) = state.pursuer
    for _ in range(60):
        state = step(state, elapsed=1.0)
        if state.tick > 1:
            assert state.position[pursuer_id] != Position(4, 4)
            assert state.movable[pursuer_id].target_tile != Position(4, 4)


@pytest.mark.parametrize("layout", ["classic", "small", "home"])
def test_generate_builds_every_layout(layout: str) -> None:
    state = generate(GameConfig(layout=layout))
    player_id = first_player_id(state)
    assert player_id is not None
    assert len(state.player) == 1
    assert len(state.pursuer) >= 1
    for pursuer in state.pursuer.values():
        assert pursuer.target == player_id
    assert min(state.entity) == player_id
    assert_motion_invariants(state)


def test_generate_rejects_unknown_layout() -> None:
    with pytest.raises(ValueError):
        generate(GameConfig(layout="nowhere"))


def test_generate_rejects_spawn_in_wall() -> None:
    with pytest.raises(ValueError):
        generate(GameConfig(layout="small", player_start=(0, 0)))


def test_classic_setup() -> None:
    state = generate()
    (player_id,) = state.player
    (pursuer_id,) = state.pursuer
    assert state.position[player_id] == Position(13, 17)
    assert state.position[pursuer_id] == Position(13, 11)
    assert state.movable[player_id].speed == 11.5
    assert state.movable[pursuer_id].speed == 7.0
    assert state.grid.width == 28
    assert state.grid.height == 31
    # Left and right tie; the gate below is never entered downward.
    assert greedy_chase_decision(state, pursuer_id) == (Position(12, 11), Direction.LEFT)


@pytest.mark.parametrize("commit_mode", list(CommitMode))
def test_classic_long_run_keeps_invariants(commit_mode: CommitMode) -> None:
    state = generate(GameConfig(commit_mode=commit_mode))
    directions = list(Direction)
    for tick in range(600):
        steer = directions[(tick // 20) % len(directions)] if tick % 20 == 0 else None
        state = step(state, steer, 1.0 / 60.0)
        assert_motion_invariants(state)
        for pos in state.position.values():
            assert not state.grid.is_wall(pos)
        for eid in state.player:
            assert not state.grid.is_barrier(state.position[eid])


def test_commit_mode_carries_into_state() -> None:
    state = generate(GameConfig(layout="small", commit_mode=CommitMode.CARRY))
    assert state.commit_mode == CommitMode.CARRY
    assert replace(state, tick=3).commit_mode == CommitMode.CARRY


def test_description_skips_empty_fields() -> None:
    state = generate(GameConfig(layout="small"))
    description = state.description
    assert "grid" not in description
    assert "captured" not in description
    assert set(description["player"]) == set(state.player)
    assert description["tick"] == 0


@pytest.mark.parametrize("elapsed", [float("nan"), float("inf")])
def test_non_finite_elapsed_rejected(elapsed: float) -> None:
    state, _, _ = make_corridor_state()
    with pytest.raises(ValueError):
        step(state, elapsed=elapsed)
