"""Property component aggregates.

This module re-exports the components that describe a moving entity: its
committed :class:`Position`, its :class:`Movable` motion state, and the role
markers :class:`Player` and :class:`Pursuer`. Systems read these dataclasses
to advance motion, apply steering, choose chase moves and detect captures.

All properties are immutable dataclasses; replacing an instance in the
``State`` maps is how change is expressed between ticks.
"""

from .movable import Movable
from .player import Player
from .position import Position
from .pursuer import Pursuer

__all__ = [
    "Movable",
    "Player",
    "Position",
    "Pursuer",
]
