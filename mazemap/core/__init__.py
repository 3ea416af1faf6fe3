# Core module
from .errors import (
    MazeError,
    MazeFileError,
    MazeFormatError,
    MazeNotLoadedError,
    MazeRangeError,
)
from .geometry import Direction, Point, Walls, adjacent_point
from .maze_grid import Maze
from .maze_library import (
    MazeLibrary,
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
from .maze_parser import load_maze_file, parse_maze_text, validate_maze_text

__all__ = [
    "MazeError",
    "MazeFileError",
    "MazeFormatError",
    "MazeNotLoadedError",
    "MazeRangeError",
    "Direction",
    "Point",
    "Walls",
    "adjacent_point",
    "Maze",
    "MazeLibrary",
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
    "load_maze_file",
    "parse_maze_text",
    "validate_maze_text",
]
