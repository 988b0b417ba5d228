"""Encounter (capture) detection system.

Compares the committed tile of every player with that of every pursuer once
per tick. Only committed positions count: two entities sliding past each
other between tiles never register, and a capture is always reported at tile
granularity.

The system only records the event (``State.captured`` and the running
``State.captures`` counter). What a capture means for lives, score or game
over is left to the caller.
"""

import logging
from dataclasses import replace
from typing import Set

from pyrsistent import pset

from maze_chase.state import State
from maze_chase.types import EntityID
from maze_chase.utils.ecs import entities_with_components_at

logger = logging.getLogger(__name__)


def encounter_system(state: State) -> State:
    captured: Set[EntityID] = set()
    for player_id in sorted(state.player):
        pos = state.position.get(player_id)
        if pos is None:
            continue
        for pursuer_id in entities_with_components_at(state, pos, state.pursuer):
            logger.info(
                "Pursuer %s captured player %s at tile %s",
                pursuer_id,
                player_id,
                (pos.x, pos.y),
            )
            captured.add(pursuer_id)

    if not captured:
        return state
    return replace(
        state, captured=pset(captured), captures=state.captures + len(captured)
    )


def is_captured(state: State) -> bool:
    """True if a capture was detected during the last tick."""
    return len(state.captured) > 0
