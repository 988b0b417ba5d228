"""maze_chase.components
=================================

Aggregate import surface for all ECS component dataclasses used by the engine,
so downstream code can import them from a single place, e.g.::

    from maze_chase.components import Position, Movable

All component classes are simple frozen ``@dataclass`` value objects; they
carry no behavior beyond small coordinate helpers and are transformed by
systems during the tick pipeline.
"""

from .properties import Movable
from .properties import Player
from .properties import Position
from .properties import Pursuer

__all__ = [
    "Movable",
    "Player",
    "Position",
    "Pursuer",
]
