"""Static maze topology.

The :class:`Grid` is the single read-only description of the maze shared by
every entity and every ``State`` of a session. It classifies cells and answers
adjacency queries; it holds no mutable state and nothing ever writes to it
after construction.

Cells are addressed as ``rows[y][x]``. Three kinds exist:

* ``OPEN``: walkable by everyone.
* ``WALL``: impassable. The cosmetic :class:`WallShape` sub-tag only matters
  to a renderer and is ignored by navigation.
* ``PURSUER_ONLY_BARRIER``: the home-area gate. Players never enter it;
  pursuers may, and prefer to cross it only along its ``passage`` direction.

Call :meth:`Grid.validate` once when a level is built. A grid that passes
validation guarantees that ``Position.translate`` from any non-wall tile
stays in bounds and that every non-wall tile has somewhere to go.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import List, Optional, Sequence, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from maze_chase.components import Position
from maze_chase.directions import DIRECTION_PRIORITY, Direction


class TileKind(StrEnum):
    """Navigation classification of a grid cell."""

    OPEN = auto()
    WALL = auto()
    PURSUER_ONLY_BARRIER = auto()


class WallShape(StrEnum):
    """Cosmetic wall sub-shape (renderer hint, irrelevant to navigation)."""

    SOLID = auto()
    HORIZONTAL = auto()
    VERTICAL = auto()
    CORNER = auto()
    NEST = auto()


@dataclass(frozen=True)
class Tile:
    """A single grid cell.

    Attributes:
        kind: Navigation classification.
        shape: Wall sub-shape; only set for ``WALL`` tiles.
        passage: For barriers, the direction a pursuer crosses it in.
    """

    kind: TileKind = TileKind.OPEN
    shape: Optional[WallShape] = None
    passage: Optional[Direction] = None


OPEN_TILE = Tile()


class OutOfBoundsError(IndexError):
    """A lookup addressed a cell outside the authored grid."""


class GridValidationError(ValueError):
    """The authored grid cannot support play."""


@dataclass(frozen=True)
class Grid:
    """Immutable maze description.

    Attributes:
        width (int): Number of columns.
        height (int): Number of rows.
        rows (PVector[PVector[Tile]]): ``rows[y][x]`` cell table.
    """

    width: int
    height: int
    rows: PVector[PVector[Tile]]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Tile]]) -> "Grid":
        """Freeze a rectangular table of tiles into a ``Grid``.

        Raises:
            GridValidationError: If the table is empty or ragged.
        """
        if not rows or not rows[0]:
            raise GridValidationError("Grid must have at least one row and column")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise GridValidationError(
                    f"Row {y} has {len(row)} cells, expected {width}"
                )
        return cls(
            width=width,
            height=len(rows),
            rows=pvector(pvector(row) for row in rows),
        )

    def in_bounds(self, pos: Position) -> bool:
        """Return True if ``pos`` lies within the grid rectangle."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def tile_at(self, pos: Position) -> Tile:
        """Return the cell at ``pos``.

        Raises:
            OutOfBoundsError: If ``pos`` is outside the grid.
        """
        if not self.in_bounds(pos):
            raise OutOfBoundsError(
                f"Out of bounds: {(pos.x, pos.y)} for grid {self.width}x{self.height}"
            )
        return self.rows[pos.y][pos.x]

    def kind_at(self, pos: Position) -> TileKind:
        return self.tile_at(pos).kind

    def is_wall(self, pos: Position) -> bool:
        """True iff the cell is impassable terrain (barriers are not walls)."""
        return self.kind_at(pos) == TileKind.WALL

    def is_barrier(self, pos: Position) -> bool:
        return self.kind_at(pos) == TileKind.PURSUER_ONLY_BARRIER

    def is_passable(self, pos: Position, pursuer: bool = False) -> bool:
        """Hard passability rule for an entity.

        Walls stop everyone; barriers stop everyone except pursuers.
        """
        kind = self.kind_at(pos)
        if kind == TileKind.WALL:
            return False
        if kind == TileKind.PURSUER_ONLY_BARRIER:
            return pursuer
        return True

    def barrier_allows(self, pos: Position, direction: Direction) -> bool:
        """False if ``pos`` is a barrier whose passage differs from ``direction``."""
        tile = self.tile_at(pos)
        if tile.kind != TileKind.PURSUER_ONLY_BARRIER:
            return True
        return tile.passage is None or tile.passage == direction

    def open_neighbors(self, pos: Position) -> List[Tuple[Position, Direction]]:
        """Adjacent in-bounds cells that are not walls, with the move reaching them.

        Order follows ``DIRECTION_PRIORITY`` but carries no meaning; callers
        impose their own ranking.
        """
        neighbors: List[Tuple[Position, Direction]] = []
        for direction in DIRECTION_PRIORITY:
            candidate = pos.translate(direction)
            if self.in_bounds(candidate) and not self.is_wall(candidate):
                neighbors.append((candidate, direction))
        return neighbors

    def open_positions(self) -> List[Position]:
        """All non-wall cells in row-major order."""
        return [
            Position(x, y)
            for y in range(self.height)
            for x in range(self.width)
            if self.rows[y][x].kind != TileKind.WALL
        ]

    def validate(self) -> None:
        """Check the grid can support play.

        Raises:
            GridValidationError: If a border cell is not a wall (``translate``
                could then leave the grid), or a non-wall cell has no open
                neighbor (an entity there could never move).
        """
        for y in range(self.height):
            for x in range(self.width):
                on_border = x in (0, self.width - 1) or y in (0, self.height - 1)
                if on_border and self.rows[y][x].kind != TileKind.WALL:
                    raise GridValidationError(f"Border cell {(x, y)} must be a wall")
        for pos in self.open_positions():
            if not self.open_neighbors(pos):
                raise GridValidationError(f"Cell {(pos.x, pos.y)} has no open neighbor")
