"""Read-only views of motion state for rendering / observation collaborators.

The engine itself never looks at these values; decisions and captures are
made on committed tiles only.
"""

from typing import Tuple

from maze_chase.state import State
from maze_chase.types import EntityID
from maze_chase.utils.math import lerp


def interpolated_position(state: State, entity_id: EntityID) -> Tuple[float, float]:
    """Tile-space position between the committed tile and ``target_tile``.

    Entities without a ``Movable`` sit exactly on their committed tile.
    """
    pos = state.position[entity_id]
    movable = state.movable.get(entity_id)
    if movable is None:
        return float(pos.x), float(pos.y)
    target = movable.target_tile
    return (
        lerp(pos.x, target.x, movable.progress),
        lerp(pos.y, target.y, movable.progress),
    )
