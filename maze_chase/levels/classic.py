"""Level construction from a :class:`maze_chase.config.GameConfig`."""

from typing import Optional

from maze_chase.components import Position
from maze_chase.config import GameConfig
from maze_chase.levels.factories import spawn_player, spawn_pursuer
from maze_chase.levels.layout import parse_layout
from maze_chase.levels.mazes import LAYOUT_REGISTRY
from maze_chase.state import State


def generate(config: Optional[GameConfig] = None) -> State:
    """Build the initial ``State`` for ``config`` (defaults to the arcade setup).

    The player spawns before the pursuers, so it receives the lowest entity
    id of the level.

    Raises:
        ValueError: If the layout name is unknown or a spawn is missing or not
            passable.
        GridValidationError: If the layout fails validation.
    """
    config = config or GameConfig()
    rows = LAYOUT_REGISTRY.get(config.layout)
    if rows is None:
        raise ValueError(f"Unknown layout: {config.layout}")
    layout = parse_layout(rows)

    player_start = (
        Position(*config.player_start)
        if config.player_start is not None
        else layout.player_start
    )
    if player_start is None:
        raise ValueError(f"Layout {config.layout!r} has no player spawn")
    pursuer_starts = (
        tuple(Position(*coord) for coord in config.pursuer_starts)
        if config.pursuer_starts is not None
        else layout.pursuer_starts
    )

    state = State(grid=layout.grid, commit_mode=config.commit_mode)
    state, player_id = spawn_player(
        state, player_start, config.player_speed, config.start_direction
    )
    for start in pursuer_starts:
        state, _ = spawn_pursuer(
            state,
            start,
            config.pursuer_speed,
            config.start_direction,
            target=player_id,
        )
    return state
