"""
mazemap Maze Library

Query and mutation interface over the active maze, including:
- Loading a maze map from a file
- Start position lookup
- Bounds and wall checks
- Marking squares during a search
- Pause time storage for callers that animate their search

Wall checks on squares outside the maze always report a wall, so a search
can never step from outside the maze back in or further out.

Example usage:
    library = MazeLibrary()
    library.read_maze_map("mazes/simple.txt")

    pt = library.get_start_position()
    if not library.wall_exists(pt, Direction.NORTH):
        library.mark_square(pt)
        pt = library.adjacent_point(pt, Direction.NORTH)
"""

import logging
import math
from pathlib import Path
from typing import Optional

from mazemap.config import get_settings
from mazemap.schemas.maze import MazeInfo, MazePosition

from .errors import MazeNotLoadedError, MazeRangeError
from .geometry import Direction, Point, adjacent_point
from .maze_grid import Maze
from .maze_parser import load_maze_file

logger = logging.getLogger(__name__)


class MazeLibrary:
    """Owns the active maze and exposes bounds-checked access to it."""

    def __init__(self, pause_time: Optional[float] = None):
        """
        Initialize an empty library.

        Args:
            pause_time: Initial pause time in seconds. Defaults to the
                configured pause_time.
        """
        self._maze: Optional[Maze] = None
        self._pause_time: float = 0.0
        self.set_pause_time(get_settings().pause_time if pause_time is None else pause_time)

    @property
    def is_loaded(self) -> bool:
        """Whether a maze has been loaded."""
        return self._maze is not None

    @property
    def maze(self) -> Maze:
        """The active maze."""
        if self._maze is None:
            raise MazeNotLoadedError("No maze has been loaded; call read_maze_map first")
        return self._maze

    def read_maze_map(self, filename: Optional[Path | str] = None) -> Maze:
        """
        Read a maze map and make it the active maze.

        The previous maze, if any, is kept when loading fails.

        Args:
            filename: Path to the maze file. Defaults to the configured
                default_maze_file.

        Returns:
            The newly active maze.

        Raises:
            MazeFileError: If the file can't be opened or read.
            MazeFormatError: If the file is not a well-formed maze.
        """
        if filename is None:
            filename = get_settings().default_maze_file
            if filename is None:
                raise ValueError("No maze file given and no default_maze_file configured")

        maze = load_maze_file(filename)
        self._maze = maze
        return maze

    def load_maze(self, maze: Maze) -> None:
        """Make an already parsed maze the active maze."""
        self._maze = maze

    def get_start_position(self) -> Point:
        """Get the start square of the active maze."""
        return self.maze.start

    def outside_maze(self, pt: Point) -> bool:
        """Check whether pt lies outside the maze boundary."""
        maze = self.maze
        return pt.x < 0 or pt.x >= maze.width or pt.y < 0 or pt.y >= maze.height

    def wall_exists(self, pt: Point, direction: Direction) -> bool:
        """
        Check whether there is a wall on one side of a square.

        Points outside the maze always report a wall.
        """
        if self.outside_maze(pt):
            return True
        return self.maze.has_wall(pt, direction)

    def _check_inside(self, pt: Point) -> Maze:
        maze = self.maze
        if self.outside_maze(pt):
            raise MazeRangeError(pt, maze.width, maze.height)
        return maze

    def mark_square(self, pt: Point) -> None:
        """Mark a square as visited."""
        maze = self._check_inside(pt)
        maze.marked[pt.x][pt.y] = True

    def unmark_square(self, pt: Point) -> None:
        """Clear the visited mark on a square."""
        maze = self._check_inside(pt)
        maze.marked[pt.x][pt.y] = False

    def is_marked(self, pt: Point) -> bool:
        """Check whether a square is marked."""
        maze = self._check_inside(pt)
        return maze.marked[pt.x][pt.y]

    def clear_marks(self) -> None:
        """Unmark every square of the active maze."""
        self.maze.clear_marks()

    @staticmethod
    def adjacent_point(pt: Point, direction: Direction) -> Point:
        """Return the point one square from pt in direction, without bounds checks."""
        return adjacent_point(pt, direction)

    @property
    def pause_time(self) -> float:
        """Seconds the caller should pause each time it draws a mark."""
        return self._pause_time

    def set_pause_time(self, seconds: float) -> None:
        """
        Set the pause time used by callers drawing marks.

        The library only stores the value; callers do the waiting.

        Raises:
            ValueError: If seconds is negative or not finite.
        """
        seconds = float(seconds)
        if not math.isfinite(seconds) or seconds < 0:
            raise ValueError(f"Pause time must be a non-negative number of seconds, got {seconds}")
        self._pause_time = seconds
        logger.debug(f"Pause time set to {seconds}s")

    def get_maze_info(self) -> MazeInfo:
        """Get a snapshot of the active maze's metadata."""
        maze = self.maze
        return MazeInfo(
            width=maze.width,
            height=maze.height,
            start=MazePosition.model_validate(maze.start),
            marked_count=maze.marked_count(),
        )


_maze_library: Optional[MazeLibrary] = None


def get_maze_library() -> MazeLibrary:
    """Get singleton maze library."""
    global _maze_library
    if _maze_library is None:
        _maze_library = MazeLibrary()
    return _maze_library


def read_maze_map(filename: Optional[Path | str] = None) -> Maze:
    """Read a maze map into the shared library."""
    return get_maze_library().read_maze_map(filename)


def get_start_position() -> Point:
    return get_maze_library().get_start_position()


def outside_maze(pt: Point) -> bool:
    return get_maze_library().outside_maze(pt)


def wall_exists(pt: Point, direction: Direction) -> bool:
    return get_maze_library().wall_exists(pt, direction)


def mark_square(pt: Point) -> None:
    get_maze_library().mark_square(pt)


def unmark_square(pt: Point) -> None:
    get_maze_library().unmark_square(pt)


def is_marked(pt: Point) -> bool:
    return get_maze_library().is_marked(pt)


def set_pause_time(seconds: float) -> None:
    get_maze_library().set_pause_time(seconds)


def get_pause_time() -> float:
    """Get the pause time drawing code should honour for each mark."""
    return get_maze_library().pause_time
