"""Direction enumeration.

Defines the four cardinal headings used for steering and for pairing each
open neighbor with the move that reaches it. ``y`` grows downward (row index),
so ``UP`` decrements it.

``DIRECTION_PRIORITY`` is the canonical tie-break order used wherever two
candidate moves compare equal; checks and sorts should go through it rather
than relying on enum declaration order.
"""

from enum import StrEnum, auto
from typing import Dict, Tuple


class Direction(StrEnum):
    """String enum of cardinal headings."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    @property
    def delta(self) -> Tuple[int, int]:
        """``(dx, dy)`` step for one tile in this direction."""
        return _DELTAS[self]

    def opposite(self) -> "Direction":
        """The 180 degree reversal of this heading."""
        return _OPPOSITES[self]


_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

DIRECTION_PRIORITY: Tuple[Direction, ...] = (
    Direction.UP,
    Direction.LEFT,
    Direction.DOWN,
    Direction.RIGHT,
)
