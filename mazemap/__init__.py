"""mazemap - maze representation library for search algorithms."""

import logging

from mazemap.core import (
    Direction,
    Maze,
    MazeError,
    MazeFileError,
    MazeFormatError,
    MazeLibrary,
    MazeNotLoadedError,
    MazeRangeError,
    Point,
    Walls,
    adjacent_point,
    get_maze_library,
    get_pause_time,
    get_start_position,
    is_marked,
    mark_square,
    outside_maze,
    read_maze_map,
    set_pause_time,
    unmark_square,
    wall_exists,
)

__version__ = "1.0.0"

logging.getLogger("mazemap").addHandler(logging.NullHandler())

__all__ = [
    "Direction",
    "Maze",
    "MazeError",
    "MazeFileError",
    "MazeFormatError",
    "MazeLibrary",
    "MazeNotLoadedError",
    "MazeRangeError",
    "Point",
    "Walls",
    "adjacent_point",
    "get_maze_library",
    "get_pause_time",
    "get_start_position",
    "is_marked",
    "mark_square",
    "outside_maze",
    "read_maze_map",
    "set_pause_time",
    "unmark_square",
    "wall_exists",
]
