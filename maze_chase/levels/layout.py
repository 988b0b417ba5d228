"""ASCII maze authoring.

A layout is a list of equal-length strings, one per row. Each glyph maps to a
:class:`maze_chase.grid.Tile`; two extra glyphs mark spawn points on open
tiles:

======  ===========================================
Glyph   Meaning
======  ===========================================
``#``   wall (solid)
``-``   wall (horizontal)
``|``   wall (vertical)
``+``   wall (corner)
``=``   wall (home area)
``.``   open (pellet, cosmetic)
``o``   open (power pellet, cosmetic)
`` ``   open
``^``   pursuer-only barrier, crossed moving up
``v``   pursuer-only barrier, crossed moving down
``<``   pursuer-only barrier, crossed moving left
``>``   pursuer-only barrier, crossed moving right
``P``   open, player spawn
``G``   open, pursuer spawn
======  ===========================================

Wall shapes only matter to a renderer; navigation sees every wall alike.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from maze_chase.components import Position
from maze_chase.directions import Direction
from maze_chase.grid import OPEN_TILE, Grid, Tile, TileKind, WallShape

GLYPHS: Dict[str, Tile] = {
    "#": Tile(TileKind.WALL, shape=WallShape.SOLID),
    "-": Tile(TileKind.WALL, shape=WallShape.HORIZONTAL),
    "|": Tile(TileKind.WALL, shape=WallShape.VERTICAL),
    "+": Tile(TileKind.WALL, shape=WallShape.CORNER),
    "=": Tile(TileKind.WALL, shape=WallShape.NEST),
    ".": OPEN_TILE,
    "o": OPEN_TILE,
    " ": OPEN_TILE,
    "^": Tile(TileKind.PURSUER_ONLY_BARRIER, passage=Direction.UP),
    "v": Tile(TileKind.PURSUER_ONLY_BARRIER, passage=Direction.DOWN),
    "<": Tile(TileKind.PURSUER_ONLY_BARRIER, passage=Direction.LEFT),
    ">": Tile(TileKind.PURSUER_ONLY_BARRIER, passage=Direction.RIGHT),
    "P": OPEN_TILE,
    "G": OPEN_TILE,
}

PLAYER_GLYPH = "P"
PURSUER_GLYPH = "G"


@dataclass(frozen=True)
class Layout:
    """A parsed maze plus its authored spawn points."""

    grid: Grid
    player_start: Optional[Position] = None
    pursuer_starts: Tuple[Position, ...] = ()


def parse_layout(rows: Sequence[str], validate: bool = True) -> Layout:
    """Parse ASCII ``rows`` into a :class:`Layout`.

    Args:
        rows: One string per grid row, all the same length.
        validate: Run :meth:`Grid.validate` on the result.

    Raises:
        ValueError: On an unknown glyph or more than one player spawn.
        GridValidationError: If the grid is ragged or fails validation.
    """
    tiles: List[List[Tile]] = []
    player_start: Optional[Position] = None
    pursuer_starts: List[Position] = []

    for y, row in enumerate(rows):
        tile_row: List[Tile] = []
        for x, glyph in enumerate(row):
            tile = GLYPHS.get(glyph)
            if tile is None:
                raise ValueError(f"Unknown layout glyph {glyph!r} at {(x, y)}")
            if glyph == PLAYER_GLYPH:
                if player_start is not None:
                    raise ValueError(f"Second player spawn at {(x, y)}")
                player_start = Position(x, y)
            elif glyph == PURSUER_GLYPH:
                pursuer_starts.append(Position(x, y))
            tile_row.append(tile)
        tiles.append(tile_row)

    grid = Grid.from_rows(tiles)
    if validate:
        grid.validate()
    return Layout(
        grid=grid, player_start=player_start, pursuer_starts=tuple(pursuer_starts)
    )
