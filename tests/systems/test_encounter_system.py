import logging

import pytest

from maze_chase.components import Position
from maze_chase.directions import Direction
from maze_chase.systems.encounter import encounter_system, is_captured
from maze_chase.utils.motion import interpolated_position
from tests.test_utils import add_player, add_pursuer, make_state

ROW = [
    "######",
    "#....#",
    "######",
]


def test_capture_on_shared_committed_tile(caplog: pytest.LogCaptureFixture) -> None:
    state = make_state(ROW)
    state, player_id = add_player(state, (2, 1))
    state, pursuer_id = add_pursuer(state, (2, 1), chase=player_id)
    with caplog.at_level(logging.INFO, logger="maze_chase.systems.encounter"):
        state = encounter_system(state)
    assert is_captured(state)
    assert state.captured == {pursuer_id}
    assert state.captures == 1
    assert "captured player" in caplog.text


def test_no_capture_on_different_tiles() -> None:
    state = make_state(ROW)
    state, player_id = add_player(state, (1, 1))
    state, _ = add_pursuer(state, (2, 1), chase=player_id)
    new_state = encounter_system(state)
    assert not is_captured(new_state)
    assert new_state is state


def test_no_capture_from_overlapping_interpolation() -> None:
    state = make_state(ROW)
    state, player_id = add_player(
        state, (1, 1), direction=Direction.RIGHT, target=(2, 1), progress=0.75
    )
    state, pursuer_id = add_pursuer(
        state, (2, 1), direction=Direction.LEFT, target=(1, 1), progress=0.25
    )
    assert interpolated_position(state, player_id) == pytest.approx((1.75, 1.0))
    assert interpolated_position(state, pursuer_id) == pytest.approx((1.75, 1.0))

    state = encounter_system(state)
    assert not is_captured(state)
    assert state.captures == 0


def test_every_pursuer_on_the_tile_is_reported() -> None:
    state = make_state(ROW)
    state, player_id = add_player(state, (3, 1))
    state, first_id = add_pursuer(state, (3, 1))
    state, second_id = add_pursuer(state, (3, 1))
    state, _ = add_pursuer(state, (1, 1))
    state = encounter_system(state)
    assert state.captured == {first_id, second_id}
    assert state.captures == 2


def test_pursuers_sharing_a_tile_do_not_capture_each_other() -> None:
    state = make_state(ROW)
    state, _ = add_player(state, (1, 1))
    state, _ = add_pursuer(state, (4, 1))
    state, _ = add_pursuer(state, (4, 1))
    assert not is_captured(encounter_system(state))


def test_interpolated_position_at_rest() -> None:
    state = make_state(ROW)
    state, player_id = add_player(state, (3, 1))
    assert interpolated_position(state, player_id) == (3.0, 1.0)
    assert state.position[player_id] == Position(3, 1)
