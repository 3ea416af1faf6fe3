"""
Coordinate primitives for the maze.

Coordinates are numbered from (0, 0) at the bottom-left square, with x
increasing to the east and y increasing to the north.
"""

from dataclasses import dataclass
from enum import Enum, Flag


class Walls(Flag):
    """Bit set of the walls around a single square."""
    NONE = 0
    NORTH = 0x1
    EAST = 0x2
    SOUTH = 0x4
    WEST = 0x8


class Direction(Enum):
    """The four compass directions."""
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (dx, dy) for this direction."""
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        """Get the direction pointing the other way."""
        return _OPPOSITES[self]

    @property
    def wall(self) -> Walls:
        """Get the wall flag on this side of a square."""
        return _WALLS[self]


_DELTAS = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}

_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}

_WALLS = {
    Direction.NORTH: Walls.NORTH,
    Direction.EAST: Walls.EAST,
    Direction.SOUTH: Walls.SOUTH,
    Direction.WEST: Walls.WEST,
}


@dataclass(frozen=True)
class Point:
    """2D position in the maze."""
    x: int
    y: int

    def move(self, direction: Direction) -> "Point":
        """Return new point one square away in direction."""
        dx, dy = direction.delta
        return Point(self.x + dx, self.y + dy)


def adjacent_point(pt: Point, direction: Direction) -> Point:
    """
    Return the point one square from pt in the given direction.

    No bounds checking is done; the result may lie outside the maze.
    For example, adjacent_point(Point(1, 1), Direction.EAST) is Point(2, 1).
    """
    return pt.move(direction)
