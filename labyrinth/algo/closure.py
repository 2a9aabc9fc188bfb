import logging
import random
from typing import Iterator, List, Optional

from labyrinth.core.grid import Grid, Cell, Direction
from labyrinth.core.maze import Maze
from labyrinth.core.errors import BuildError
from labyrinth.algo.base import Generator
from labyrinth.algo.connectivity import is_connected, DisjointSet

logger = logging.getLogger(__name__)

GUARD_UNION_FIND = "union-find"
GUARD_DFS = "dfs"
GUARDS = (GUARD_UNION_FIND, GUARD_DFS)

DEFAULT_DIMENSION = 10


class MazeBuilder(Generator):
    """
    Randomized relation closure.

    First every cell, in row-major order, opens one passage to a random
    neighbor of another component, which leaves a random forest. Then a
    second row-major walk keeps opening random passages at each cell until
    no neighbor is left that is still undecided and not already reachable.
    A reachable neighbor means the passage would close a cycle, so that
    side stays a wall.

    The trees it produces are not uniformly distributed; every one of them
    is a spanning tree.
    """

    def __init__(self, dimension: int = DEFAULT_DIMENSION, seed: Optional[int] = None,
                 rng: Optional[random.Random] = None, guard: str = GUARD_UNION_FIND):
        if guard not in GUARDS:
            raise BuildError(f"Unknown cycle guard {guard!r}, expected one of {GUARDS}")
        super().__init__(Grid(dimension), seed=seed, rng=rng)
        self.guard = guard
        self.finished = False
        self._sets = DisjointSet() if guard == GUARD_UNION_FIND else None

    def is_connected(self, source: Cell, target: Cell) -> bool:
        return is_connected(source, target)

    def _joined(self, a: Cell, b: Cell) -> bool:
        if self._sets is not None:
            return self._sets.connected(a, b)
        return is_connected(a, b)

    def candidates(self, cell: Cell) -> List[Direction]:
        """
        Directions that may still be opened from 'cell': inside the grid,
        slot undecided, and leading to a cell of another component.
        """
        options = []
        for other, direction in self.grid.get_neighbors(cell):
            if cell.has_passage(direction) or other.has_passage(direction.opposite):
                continue
            if self._joined(cell, other):
                continue
            options.append(direction)
        return options

    def _open_random(self, cell: Cell) -> bool:
        """Opens one random admissible passage from 'cell'. False if none is left."""
        options = self.candidates(cell)
        if not options:
            return False

        direction = self.rng.choice(options)
        other = self.grid.link(cell, direction)
        if self._sets is not None:
            self._sets.union(cell, other)
        self.step_count += 1
        return True

    def run(self) -> Iterator[str]:
        if self.finished:
            raise BuildError("Maze already built; create a new builder")

        # Pass 1: one random passage per cell. Leaves a random forest.
        for cell in self.grid.iter_cells():
            if self._open_random(cell) and self.step_count % 100 == 0:
                yield f"Scattering... Passages: {self.step_count}"

        # Pass 2: close every cell until each side is open or a confirmed wall.
        # Only joins the forest's trees, so which ones meet where is still
        # decided by the draws above.
        for cell in self.grid.iter_cells():
            while self._open_random(cell):
                if self.step_count % 100 == 0:
                    yield f"Carving... Passages: {self.step_count}"

        self.finished = True
        logger.debug(
            "Built %dx%d maze: %d passages (guard=%s, seed=%s)",
            self.grid.dimension, self.grid.dimension, self.step_count, self.guard, self.seed,
        )
        yield "Done"

    def build(self) -> Maze:
        self.run_all()
        return Maze(self.grid, seed=self.seed, guard=self.guard)


def build_maze(dimension: int = DEFAULT_DIMENSION, seed: Optional[int] = None,
               rng: Optional[random.Random] = None, guard: str = GUARD_UNION_FIND) -> Maze:
    """Builds a perfect maze of dimension x dimension cells."""
    return MazeBuilder(dimension, seed=seed, rng=rng, guard=guard).build()
