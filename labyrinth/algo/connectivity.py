from typing import Dict, Iterator, Set

from labyrinth.core.grid import Cell


def is_connected(source: Cell, target: Cell) -> bool:
    """
    True when 'target' can be reached from 'source' through open passages.

    Iterative depth-first search. The visited set belongs to this call only,
    so consecutive queries never see each other's bookkeeping.
    """
    if source is target:
        return True

    # Direct neighbor
    for other in source.links():
        if other is target:
            return True

    visited: Set[Cell] = {source}
    stack = [source]
    while stack:
        current = stack.pop()
        for other in current.links():
            if other is target:
                return True
            if other not in visited:
                visited.add(other)
                stack.append(other)
    return False


def component(start: Cell) -> Iterator[Cell]:
    """Yields every cell reachable from 'start', 'start' included."""
    visited: Set[Cell] = {start}
    stack = [start]
    while stack:
        current = stack.pop()
        yield current
        for other in current.links():
            if other not in visited:
                visited.add(other)
                stack.append(other)


class DisjointSet:
    """Union-find over cells with path compression and union by size."""

    def __init__(self):
        self.parent: Dict[Cell, Cell] = {}
        self.size: Dict[Cell, int] = {}

    def find(self, cell: Cell) -> Cell:
        parent = self.parent
        if cell not in parent:
            parent[cell] = cell
            self.size[cell] = 1
            return cell

        root = cell
        while parent[root] is not root:
            root = parent[root]
        # Path compression
        while parent[cell] is not root:
            parent[cell], cell = root, parent[cell]
        return root

    def union(self, a: Cell, b: Cell) -> bool:
        """Merges the two sets. Returns False if they were already one."""
        ra, rb = self.find(a), self.find(b)
        if ra is rb:
            return False
        if self.size[ra] < self.size[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        self.size[ra] += self.size[rb]
        return True

    def connected(self, a: Cell, b: Cell) -> bool:
        return self.find(a) is self.find(b)
