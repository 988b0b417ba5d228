"""Entity spawning helpers.

Each ``spawn_*`` function allocates a fresh entity id, registers the
components for one role and returns the new ``State`` together with the id.
Spawning happens once while a level is built; gameplay never adds entities.
"""

from dataclasses import replace
from typing import Optional, Tuple

from maze_chase.components import Movable, Player, Position, Pursuer
from maze_chase.directions import Direction
from maze_chase.entity import Entity, new_entity_id
from maze_chase.state import State
from maze_chase.types import DecisionPolicy, EntityID


def _check_spawn(state: State, position: Position, pursuer: bool) -> None:
    if not state.grid.in_bounds(position) or not state.grid.is_passable(
        position, pursuer=pursuer
    ):
        raise ValueError(f"Cannot spawn on tile {(position.x, position.y)}")


def spawn_player(
    state: State,
    position: Position,
    speed: float,
    direction: Direction = Direction.UP,
) -> Tuple[State, EntityID]:
    """Place a steered player at rest on ``position``."""
    _check_spawn(state, position, pursuer=False)
    player_id: EntityID = new_entity_id()
    return (
        replace(
            state,
            entity=state.entity.set(player_id, Entity()),
            player=state.player.set(player_id, Player()),
            position=state.position.set(player_id, position),
            movable=state.movable.set(
                player_id,
                Movable(
                    target_tile=position,
                    speed=speed,
                    direction=direction,
                    policy=DecisionPolicy.STEERING,
                ),
            ),
        ),
        player_id,
    )


def spawn_pursuer(
    state: State,
    position: Position,
    speed: float,
    direction: Direction = Direction.UP,
    target: Optional[EntityID] = None,
) -> Tuple[State, EntityID]:
    """Place a greedy-chase pursuer at rest on ``position``.

    ``target`` defaults to chasing the first player.
    """
    _check_spawn(state, position, pursuer=True)
    pursuer_id: EntityID = new_entity_id()
    return (
        replace(
            state,
            entity=state.entity.set(pursuer_id, Entity()),
            pursuer=state.pursuer.set(pursuer_id, Pursuer(target=target)),
            position=state.position.set(pursuer_id, position),
            movable=state.movable.set(
                pursuer_id,
                Movable(
                    target_tile=position,
                    speed=speed,
                    direction=direction,
                    policy=DecisionPolicy.GREEDY_CHASE,
                ),
            ),
        ),
        pursuer_id,
    )
