"""Greedy chase decision engine.

At every commit a pursuer picks, among the open tiles next to its committed
position, the one closest to the chased entity's committed position:

1. Enumerate the open neighbors.
2. Drop the neighbor that would reverse the current heading.
3. Drop barrier tiles whose passage direction forbids this approach (a
    pursuer may leave the home area through its gate but not wander back in).
4. If nothing survives, fall back to every open neighbor. Rules 2 and 3 are
    preferences, so a dead end never strands a pursuer.
5. Rank by ascending squared distance to the chased tile, breaking exact ties
    in ``DIRECTION_PRIORITY`` order (Up, Left, Down, Right).

There is no look-ahead or path search: the pursuer can be led into dead ends
by wall topology, and that is part of how the game plays.
"""

import logging
from typing import List, Optional, Tuple

from maze_chase.components import Position
from maze_chase.directions import DIRECTION_PRIORITY, Direction
from maze_chase.grid import Grid
from maze_chase.state import State
from maze_chase.types import Decision, EntityID
from maze_chase.utils.ecs import first_player_id

logger = logging.getLogger(__name__)


def chase_candidates(
    grid: Grid, position: Position, direction: Direction
) -> List[Tuple[Position, Direction]]:
    """Open neighbors of ``position`` left after the preference filters."""
    neighbors = grid.open_neighbors(position)
    reverse = direction.opposite()
    preferred = [
        (tile, move)
        for tile, move in neighbors
        if move != reverse and grid.barrier_allows(tile, move)
    ]
    return preferred if preferred else neighbors


def choose_chase_step(
    grid: Grid, position: Position, direction: Direction, target: Position
) -> Optional[Decision]:
    """Pick the next ``(tile, direction)`` toward ``target``.

    Returns ``None`` only if ``position`` has no open neighbor at all, which a
    validated grid rules out.
    """
    candidates = chase_candidates(grid, position, direction)
    if not candidates:
        return None
    return min(
        candidates,
        key=lambda candidate: (
            candidate[0].distance(target),
            DIRECTION_PRIORITY.index(candidate[1]),
        ),
    )


def chase_target_position(state: State, pursuer_id: EntityID) -> Optional[Position]:
    """Committed position of the entity ``pursuer_id`` is chasing, read live."""
    pursuer = state.pursuer.get(pursuer_id)
    target_id = pursuer.target if pursuer is not None else None
    if target_id is None:
        target_id = first_player_id(state)
    if target_id is None:
        return None
    return state.position.get(target_id)


def greedy_chase_decision(state: State, entity_id: EntityID) -> Optional[Decision]:
    """Commit-time policy for pursuers."""
    target = chase_target_position(state, entity_id)
    if target is None:
        logger.debug("Pursuer %s has nothing to chase", entity_id)
        return None

    position = state.position[entity_id]
    decision = choose_chase_step(
        state.grid, position, state.movable[entity_id].direction, target
    )
    if decision is None:
        logger.warning(
            "Pursuer %s has no open neighbor at %s", entity_id, (position.x, position.y)
        )
        return None

    logger.debug(
        "Pursuer %s at %s chasing %s heads %s",
        entity_id,
        (position.x, position.y),
        (target.x, target.y),
        decision[1],
    )
    return decision
