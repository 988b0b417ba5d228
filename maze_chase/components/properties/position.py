"""Position component.

Immutable integer grid coordinates. Stored in ``State.position`` keyed by
entity id, where it is the entity's last *committed* tile. It only changes
when the motion system commits, never mid-traversal.
"""

from dataclasses import dataclass

from maze_chase.directions import Direction


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def translate(self, direction: Direction) -> "Position":
        """Return the adjacent coordinate one tile toward ``direction``."""
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)

    def distance(self, other: "Position") -> int:
        """Squared Euclidean distance to ``other``.

        Only used for ordering, so the square root is never taken.
        """
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def is_adjacent_or_equal(self, other: "Position") -> bool:
        """True if ``other`` is this tile or one of its four neighbors."""
        return abs(self.x - other.x) + abs(self.y - other.y) <= 1
