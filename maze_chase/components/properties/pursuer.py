from dataclasses import dataclass
from typing import Optional

from maze_chase.components.properties.position import Position
from maze_chase.types import EntityID


@dataclass(frozen=True)
class Pursuer:
    """Chase AI state for a pursuer entity.

    Attributes:
        target:
            Entity ID being chased. ``None`` chases the first player in the
            state.
        aim_tile:
            Tile used as the chase target at the most recent decision. It is
            refreshed from the chased entity's committed position at every
            commit and never reused across decisions.
    """

    target: Optional[EntityID] = None
    aim_tile: Optional[Position] = None
