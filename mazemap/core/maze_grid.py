"""
Maze grid storage.

Holds the per-square wall flags and visitation marks for a maze of fixed
size, indexed as ``walls[x][y]`` and ``marked[x][y]``.
"""

from dataclasses import dataclass, field

from .geometry import Direction, Point, Walls


@dataclass
class Maze:
    """A fixed-size rectangular maze."""

    width: int
    height: int
    start: Point
    walls: list[list[Walls]] = field(default_factory=list)
    marked: list[list[bool]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Maze dimensions must be positive, got {self.width}x{self.height}"
            )
        if not self.walls:
            self.walls = [[Walls.NONE] * self.height for _ in range(self.width)]
        if not self.marked:
            self.marked = [[False] * self.height for _ in range(self.width)]
        if len(self.walls) != self.width or any(len(col) != self.height for col in self.walls):
            raise ValueError("Wall grid does not match maze dimensions")
        if len(self.marked) != self.width or any(len(col) != self.height for col in self.marked):
            raise ValueError("Mark grid does not match maze dimensions")
        if not self.contains(self.start):
            raise ValueError(f"Start ({self.start.x}, {self.start.y}) is outside the maze")

    def contains(self, pt: Point) -> bool:
        """Check whether pt names a square of this maze."""
        return 0 <= pt.x < self.width and 0 <= pt.y < self.height

    def has_wall(self, pt: Point, direction: Direction) -> bool:
        """Check the wall flag for an in-bounds square."""
        return direction.wall in self.walls[pt.x][pt.y]

    def add_wall(self, pt: Point, direction: Direction) -> None:
        """Set a wall on one side of a square and the matching side of its neighbour."""
        self.walls[pt.x][pt.y] |= direction.wall
        neighbour = pt.move(direction)
        if self.contains(neighbour):
            self.walls[neighbour.x][neighbour.y] |= direction.opposite.wall

    def marked_count(self) -> int:
        """Count squares currently marked."""
        return sum(sum(col) for col in self.marked)

    def clear_marks(self) -> None:
        """Unmark every square."""
        for col in self.marked:
            for y in range(len(col)):
                col[y] = False
