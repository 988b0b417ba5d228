"""Common type aliases and enumerations.

``DecisionFn`` is the central extension point of the motion system: every
moving entity names a :class:`DecisionPolicy` whose function is asked for the
next tile each time the entity commits to a tile.
"""

from enum import StrEnum, auto
from typing import Callable, Optional, Tuple, TYPE_CHECKING


# Forward declaration for DecisionFn typing to avoid circular imports:
if TYPE_CHECKING:
    from maze_chase.state import State
    from maze_chase.directions import Direction
    from maze_chase.components import Position

EntityID = int

Decision = Tuple["Position", "Direction"]
DecisionFn = Callable[["State", "EntityID"], Optional[Decision]]


class DecisionPolicy(StrEnum):
    """Which decision function feeds an entity's motion at commit time."""

    STEERING = auto()
    GREEDY_CHASE = auto()


class CommitMode(StrEnum):
    """How the motion system treats progress overflowing past one tile.

    ``SINGLE`` commits at most once per tick and discards the overflow.
    ``CARRY`` commits repeatedly while progress is at least one tile,
    carrying the remainder into the next traversal.
    """

    SINGLE = auto()
    CARRY = auto()
