"""Maze authoring and level construction.

``parse_layout`` turns ASCII rows into a validated grid with spawn points,
``LAYOUT_REGISTRY`` names the built-in mazes and ``generate`` builds a ready
to play ``State`` from a :class:`maze_chase.config.GameConfig`.
"""

from .classic import generate
from .layout import Layout, parse_layout
from .mazes import LAYOUT_REGISTRY

__all__ = [
    "LAYOUT_REGISTRY",
    "Layout",
    "generate",
    "parse_layout",
]
