"""Tile-stepping motion component.

``Movable`` entities advance continuously from their committed position
toward ``target_tile``. ``progress`` is the completed fraction of the current
traversal; when it reaches one tile the motion system commits the entity to
``target_tile`` and asks the entity's decision policy where to go next.
"""

from dataclasses import dataclass

from maze_chase.components.properties.position import Position
from maze_chase.directions import Direction
from maze_chase.types import DecisionPolicy


@dataclass(frozen=True)
class Movable:
    """Per-entity motion state.

    Attributes:
        target_tile: Tile currently being approached. Always the committed
            position or one of its neighbors.
        progress: Fraction in ``[0, 1)`` of the traversal toward ``target_tile``.
        speed: Tiles per second.
        direction: Current heading, used to pick the next target at commit.
        policy: Decision policy consulted at every commit.
    """

    target_tile: Position
    progress: float = 0.0
    speed: float = 1.0
    direction: Direction = Direction.UP
    policy: DecisionPolicy = DecisionPolicy.STEERING
