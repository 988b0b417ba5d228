"""Tile-stepping motion system.

Turns per-tick elapsed time into tile-to-tile displacement for every entity
with a :class:`maze_chase.components.Movable`, players and pursuers alike.

Per tick:

1. ``progress += speed * elapsed``.
2. Below one tile nothing else happens; collaborators may interpolate between
    the committed position and ``target_tile`` using ``progress``.
3. At or above one tile the entity *commits*: ``progress`` resets to zero,
    the committed position snaps to ``target_tile`` and the entity's decision
    policy proposes the next ``(tile, direction)``. A passable proposal becomes
    the new target; otherwise the entity holds on its tile and re-evaluates at
    the next commit.

With ``CommitMode.SINGLE`` at most one commit happens per tick and overflow
past one tile is discarded, capping speed at one tile per tick. With
``CommitMode.CARRY`` commits repeat while at least one tile of progress
remains and the remainder carries into the next traversal.
"""

import logging
import math
from dataclasses import replace

from maze_chase.decisions import DECISION_FN_REGISTRY
from maze_chase.state import State
from maze_chase.systems.chase import chase_target_position
from maze_chase.types import CommitMode, EntityID

logger = logging.getLogger(__name__)


def commit(state: State, entity_id: EntityID) -> State:
    """Snap ``entity_id`` onto its target tile and pick the next target.

    Leaves ``progress`` at zero; the caller restores any carried remainder.
    """
    movable = state.movable[entity_id]
    position = movable.target_tile
    state = replace(
        state,
        position=state.position.set(entity_id, position),
        movable=state.movable.set(entity_id, replace(movable, progress=0.0)),
    )

    decide = DECISION_FN_REGISTRY[movable.policy]
    decision = decide(state, entity_id)
    is_pursuer = entity_id in state.pursuer

    target_tile, direction = position, movable.direction
    if decision is None:
        logger.warning(
            "Entity %s has no decision, holding at %s",
            entity_id,
            (position.x, position.y),
        )
    elif state.grid.is_passable(decision[0], pursuer=is_pursuer):
        target_tile, direction = decision
    else:
        logger.debug("Entity %s holds at %s", entity_id, (position.x, position.y))

    state = replace(
        state,
        movable=state.movable.set(
            entity_id,
            replace(
                state.movable[entity_id],
                target_tile=target_tile,
                direction=direction,
            ),
        ),
    )

    if is_pursuer:
        pursuer = state.pursuer[entity_id]
        state = replace(
            state,
            pursuer=state.pursuer.set(
                entity_id,
                replace(pursuer, aim_tile=chase_target_position(state, entity_id)),
            ),
        )

    logger.debug(
        "Entity %s committed to %s, next %s",
        entity_id,
        (position.x, position.y),
        (target_tile.x, target_tile.y),
    )
    return state


def advance(state: State, entity_id: EntityID, elapsed: float) -> State:
    """Advance one entity's traversal by ``elapsed`` seconds."""
    movable = state.movable[entity_id]
    if not math.isfinite(movable.speed) or movable.speed <= 0:
        raise ValueError(f"Entity {entity_id} has invalid speed: {movable.speed}")

    progress = movable.progress + movable.speed * elapsed
    if progress < 1.0:
        return replace(
            state,
            movable=state.movable.set(entity_id, replace(movable, progress=progress)),
        )

    if state.commit_mode == CommitMode.SINGLE:
        return commit(state, entity_id)

    while progress >= 1.0:
        progress -= 1.0
        state = commit(state, entity_id)
    return replace(
        state,
        movable=state.movable.set(
            entity_id, replace(state.movable[entity_id], progress=progress)
        ),
    )


def motion_system(state: State, elapsed: float) -> State:
    """Advance every movable entity, players first, then everything else.

    Raises:
        ValueError: If ``elapsed`` is negative or not finite, or an entity's
            speed is not a finite positive number.
    """
    if not math.isfinite(elapsed) or elapsed < 0:
        raise ValueError(f"Elapsed time must be finite and non-negative: {elapsed}")

    movers = sorted(state.movable, key=lambda eid: (eid not in state.player, eid))
    for entity_id in movers:
        if entity_id not in state.position:
            continue
        state = advance(state, entity_id, elapsed)
    return state
