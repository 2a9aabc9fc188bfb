import numpy as np

from labyrinth.core.grid import Grid, Direction
from labyrinth.core.maze import Maze
from labyrinth.core.errors import MazeIntegrityError
from labyrinth.algo.connectivity import component


class MazeAnalyzer:
    @staticmethod
    def wall_mask(maze: Maze) -> np.ndarray:
        """
        (dimension, dimension) uint8 array of wall bits per cell,
        Grid.NORTH | EAST | SOUTH | WEST. Boundary sides are always walls.
        """
        grid = maze.grid
        mask = np.empty((grid.dimension, grid.dimension), dtype=np.uint8)
        for cell in grid.iter_cells():
            mask[cell.row, cell.column] = grid.wall_bits(cell)
        return mask

    @staticmethod
    def calculate_stats(maze: Maze):
        mask = MazeAnalyzer.wall_mask(maze)

        # Popcount of the four wall bits
        walls = np.zeros(mask.shape, dtype=np.uint8)
        for bit in (Grid.NORTH, Grid.EAST, Grid.SOUTH, Grid.WEST):
            walls += (mask & bit) != 0

        dead_ends = int(np.count_nonzero(walls == 3))
        corridors = int(np.count_nonzero(walls == 2))
        intersections = int(np.count_nonzero(walls <= 1))

        total = mask.size
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "passages": maze.passage_count(),
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }

    @staticmethod
    def verify(maze: Maze) -> bool:
        """
        Checks the spanning tree invariants. Raises MazeIntegrityError on the
        first violation found.
        """
        grid = maze.grid
        d = grid.dimension

        for cell in grid.iter_cells():
            for direction in Direction:
                other = cell.neighbor(direction)
                if other is None:
                    continue
                if grid.step(cell, direction) is not other:
                    raise MazeIntegrityError(f"{cell!r} {direction.name} does not lead to its grid neighbor")
                if other.neighbor(direction.opposite) is not cell:
                    raise MazeIntegrityError(f"{cell!r} {direction.name} is not mirrored by {other!r}")

        edges = grid.passage_count()
        if edges != d * d - 1:
            raise MazeIntegrityError(f"Expected {d * d - 1} passages, found {edges}")

        reached = sum(1 for _ in component(grid.cells[0][0]))
        if reached != d * d:
            raise MazeIntegrityError(f"Only {reached} of {d * d} cells reachable from (0, 0)")
        return True
