"""Player steering system.

Applies a requested heading to the controlled entity immediately, even in the
middle of a traversal, provided the tile beyond the entity's current
``target_tile`` in that direction is passable. Because the check looks one
tile ahead of the target rather than from the committed position, a turn
pressed before reaching an intersection takes effect exactly at it.

Rejected requests are dropped, not buffered: the caller gets the very same
``State`` object back.
"""

from dataclasses import replace
from typing import Optional, Tuple

from maze_chase.directions import Direction
from maze_chase.state import State
from maze_chase.types import Decision, EntityID


def try_steer(
    state: State, entity_id: EntityID, requested: Direction
) -> Tuple[State, bool]:
    """Attempt to change ``entity_id``'s heading to ``requested``.

    Args:
        state (State): Current state.
        entity_id (EntityID): Moving entity to steer.
        requested (Direction): Desired heading.

    Returns:
        Tuple[State, bool]: ``(new_state, True)`` if accepted, otherwise the
            unchanged ``state`` and ``False``.

    Raises:
        ValueError: If the entity has no ``Movable`` component.
    """
    movable = state.movable.get(entity_id)
    if movable is None:
        raise ValueError(f"Entity {entity_id} is not movable")

    candidate = movable.target_tile.translate(requested)
    if not state.grid.is_passable(candidate, pursuer=entity_id in state.pursuer):
        return state, False

    return (
        replace(
            state,
            movable=state.movable.set(entity_id, replace(movable, direction=requested)),
        ),
        True,
    )


def steering_system(state: State, requested: Optional[Direction]) -> State:
    """Feed this tick's input request (if any) to every player."""
    if requested is None:
        return state
    for player_id in sorted(state.player):
        if player_id in state.movable:
            state, _ = try_steer(state, player_id, requested)
    return state


def steering_decision(state: State, entity_id: EntityID) -> Optional[Decision]:
    """Commit-time policy for a steered entity: keep going the current way."""
    direction = state.movable[entity_id].direction
    return state.position[entity_id].translate(direction), direction
