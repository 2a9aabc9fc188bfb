from enum import IntEnum
from numbers import Integral
from typing import Iterator, List, Optional, Tuple

from labyrinth.core.errors import InvalidDimensionError, OutOfBoundsError, LinkError


class Direction(IntEnum):
    LEFT = 0
    RIGHT = 1
    TOP = 2
    BOTTOM = 3

    @property
    def opposite(self) -> "Direction":
        return OPPOSITE[self]

    @property
    def slot(self) -> str:
        return SLOTS[self]


# Direction Helpers (row grows downwards, column grows rightwards)
DROW = {Direction.LEFT: 0, Direction.RIGHT: 0, Direction.TOP: -1, Direction.BOTTOM: 1}
DCOL = {Direction.LEFT: -1, Direction.RIGHT: 1, Direction.TOP: 0, Direction.BOTTOM: 0}
OPPOSITE = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.TOP: Direction.BOTTOM,
    Direction.BOTTOM: Direction.TOP,
}
SLOTS = {d: d.name.lower() for d in Direction}


class Cell:
    """
    One grid position. The four relation slots hold the adjacent Cell a
    passage leads to, or None for a wall. They are read-only here; Grid.link
    is the only writer, so both ends always agree.
    """
    __slots__ = ('_row', '_column', '_links', 'hole')

    def __init__(self, row: int, column: int):
        self._row = row
        self._column = column
        # Indexed by Direction
        self._links: List[Optional["Cell"]] = [None, None, None, None]
        # Portal/hole marker for whoever draws the maze. Never read by the core.
        self.hole = False

    @property
    def row(self) -> int:
        return self._row

    @property
    def column(self) -> int:
        return self._column

    @property
    def left(self) -> Optional["Cell"]:
        return self._links[Direction.LEFT]

    @property
    def right(self) -> Optional["Cell"]:
        return self._links[Direction.RIGHT]

    @property
    def top(self) -> Optional["Cell"]:
        return self._links[Direction.TOP]

    @property
    def bottom(self) -> Optional["Cell"]:
        return self._links[Direction.BOTTOM]

    def neighbor(self, direction: Direction) -> Optional["Cell"]:
        return self._links[direction]

    def has_passage(self, direction: Direction) -> bool:
        return self._links[direction] is not None

    def links(self) -> Iterator["Cell"]:
        """Yields the cells this one has an open passage to."""
        for other in self._links:
            if other is not None:
                yield other

    def open_sides(self) -> int:
        return sum(1 for _ in self.links())

    def __repr__(self):
        return f"Cell({self._row}, {self._column})"


class Grid:
    # Wall bits, used when the maze is exported as a mask
    NORTH = 0b0001
    EAST  = 0b0010
    SOUTH = 0b0100
    WEST  = 0b1000
    ALL_WALLS = NORTH | EAST | SOUTH | WEST

    WALL_BIT = {
        Direction.TOP: NORTH,
        Direction.RIGHT: EAST,
        Direction.BOTTOM: SOUTH,
        Direction.LEFT: WEST,
    }

    __slots__ = ('dimension', 'cells')

    def __init__(self, dimension: int):
        if isinstance(dimension, bool) or not isinstance(dimension, Integral) or dimension <= 0:
            raise InvalidDimensionError(dimension)
        self.dimension = int(dimension)
        # Rows outer, columns inner
        self.cells: List[List[Cell]] = [
            [Cell(r, c) for c in range(self.dimension)] for r in range(self.dimension)
        ]

    @classmethod
    def create(cls, dimension: int) -> "Grid":
        return cls(dimension)

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.dimension and 0 <= column < self.dimension

    def at(self, row: int, column: int) -> Cell:
        if self.in_bounds(row, column):
            return self.cells[row][column]
        raise OutOfBoundsError(row, column, self.dimension)

    def step(self, cell: Cell, direction: Direction) -> Optional[Cell]:
        """Grid-adjacent cell in 'direction', or None past the boundary."""
        r = cell.row + DROW[direction]
        c = cell.column + DCOL[direction]
        if self.in_bounds(r, c):
            return self.cells[r][c]
        return None

    def get_neighbors(self, cell: Cell) -> Iterator[Tuple[Cell, Direction]]:
        """
        Yields (neighbor, direction_to_neighbor) for all in-grid neighbors.
        Does NOT check passages.
        """
        for direction in Direction:
            other = self.step(cell, direction)
            if other is not None:
                yield other, direction

    def link(self, cell: Cell, direction: Direction) -> Cell:
        """
        Opens the passage between 'cell' and its neighbor in 'direction'.
        Sets the opposite slot on the neighbor too and returns the neighbor.
        """
        other = self.step(cell, direction)
        if other is None:
            raise OutOfBoundsError(
                cell.row + DROW[direction], cell.column + DCOL[direction], self.dimension
            )
        back = OPPOSITE[direction]
        if cell._links[direction] is not None or other._links[back] is not None:
            raise LinkError(f"Passage {cell!r} -> {direction.name} is already decided")

        cell._links[direction] = other
        other._links[back] = cell
        return other

    def iter_cells(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def passage_count(self) -> int:
        # Each passage is seen from both ends; count the right/bottom end only
        return sum(
            (cell.right is not None) + (cell.bottom is not None)
            for cell in self.iter_cells()
        )

    def wall_bits(self, cell: Cell) -> int:
        bits = 0
        for direction, bit in self.WALL_BIT.items():
            if not cell.has_passage(direction):
                bits |= bit
        return bits
