from typing import Iterator, List, Optional, Tuple

from labyrinth.core.grid import Grid, Cell, Direction
from labyrinth.algo.connectivity import is_connected


class Maze:
    """
    Finished build. Read-only view over the grid the builder carved: a
    renderer asks has_passage() to decide where walls go, a solver or
    physics step asks neighbor() whether a move is legal.
    """

    def __init__(self, grid: Grid, seed: Optional[int] = None, guard: Optional[str] = None):
        self.grid = grid
        self.seed = seed
        self.guard = guard

    @property
    def dimension(self) -> int:
        return self.grid.dimension

    @property
    def cells(self) -> List[List[Cell]]:
        return self.grid.cells

    def at(self, row: int, column: int) -> Cell:
        return self.grid.at(row, column)

    def has_passage(self, cell: Cell, direction: Direction) -> bool:
        return cell.has_passage(direction)

    def neighbor(self, cell: Cell, direction: Direction) -> Optional[Cell]:
        return cell.neighbor(direction)

    def is_connected(self, source: Cell, target: Cell) -> bool:
        return is_connected(source, target)

    def passages(self) -> Iterator[Tuple[Cell, Cell, Direction]]:
        """Each open passage once, seen from its left/top end."""
        for cell in self.grid.iter_cells():
            if cell.right is not None:
                yield cell, cell.right, Direction.RIGHT
            if cell.bottom is not None:
                yield cell, cell.bottom, Direction.BOTTOM

    def passage_count(self) -> int:
        return self.grid.passage_count()

    def holes(self) -> Iterator[Cell]:
        return (cell for cell in self.grid.iter_cells() if cell.hole)

    def __repr__(self):
        return f"Maze({self.dimension}x{self.dimension}, passages={self.passage_count()})"
