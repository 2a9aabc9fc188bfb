class LabyrinthError(Exception):
    """Base class for everything the maze core raises."""


class InvalidDimensionError(LabyrinthError, ValueError):
    def __init__(self, dimension):
        super().__init__(f"Dimension must be a positive integer, got {dimension!r}")
        self.dimension = dimension


class OutOfBoundsError(LabyrinthError, IndexError):
    def __init__(self, row: int, column: int, dimension: int):
        super().__init__(f"Cell ({row}, {column}) out of bounds for {dimension}x{dimension} grid")
        self.row = row
        self.column = column
        self.dimension = dimension


class LinkError(LabyrinthError, ValueError):
    pass


class BuildError(LabyrinthError, RuntimeError):
    pass


class MazeIntegrityError(LabyrinthError):
    pass
