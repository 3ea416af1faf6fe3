"""
Maze Parser for mazemap.

Loads and validates ASCII maze drawings.

Maze Format:
    +  = Corner (every even column of a wall line)
    -  = Horizontal wall (odd column of a wall line)
    |  = Vertical wall (even column of a passage line)
    S  = Start square interior (exactly one per maze)
    ' ' = Open gap or empty square interior

A maze that is W squares wide and H squares tall is drawn as 2H+1 lines of
2W+1 characters, alternating wall lines and passage lines:

    +-+-+
    |   |
    +-+-+
    |S  |
    +-+-+

The file is read top to bottom, but y counts upward from the bottom row, so
the square drawn in the last passage line has y = 0.
"""

import logging
from pathlib import Path
from typing import Optional

from mazemap.config import get_settings

from .errors import MazeFileError, MazeFormatError
from .geometry import Direction, Point
from .maze_grid import Maze

logger = logging.getLogger(__name__)

CORNER = "+"
HORIZONTAL_WALL = "-"
VERTICAL_WALL = "|"
START = "S"
OPEN = " "

WALL_LINE_GAP_CHARS = {HORIZONTAL_WALL, OPEN}
PASSAGE_LINE_WALL_CHARS = {VERTICAL_WALL, OPEN}
INTERIOR_CHARS = {START, OPEN}


def _split_lines(maze_text: str) -> list[str]:
    """Split text into lines, dropping line terminators and trailing blank lines."""
    lines = maze_text.splitlines()
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def _measure(lines: list[str], max_size: Optional[int]) -> tuple[int, int]:
    """Work out (width, height) in squares from the drawing's shape."""
    if len(lines) < 3 or len(lines) % 2 == 0:
        raise MazeFormatError(
            f"Maze must have an odd number of lines (at least 3), got {len(lines)}"
        )

    line_length = len(lines[0])
    if line_length < 3 or line_length % 2 == 0:
        raise MazeFormatError(
            f"Maze lines must have an odd length (at least 3), got {line_length}",
            line=1,
        )

    for row, line in enumerate(lines):
        if len(line) != line_length:
            raise MazeFormatError(
                f"Inconsistent line length: expected {line_length}, got {len(line)}",
                line=row + 1,
            )

    width = (line_length - 1) // 2
    height = (len(lines) - 1) // 2

    if max_size is not None and (width > max_size or height > max_size):
        raise MazeFormatError(
            f"Maze is {width}x{height} squares; the limit is {max_size} in each direction"
        )

    return width, height


def _expect(char: str, allowed: set[str], what: str, row: int, col: int) -> None:
    if char not in allowed:
        raise MazeFormatError(
            f"Invalid character {char!r} for {what}; "
            f"expected one of {', '.join(repr(c) for c in sorted(allowed))}",
            line=row + 1,
            column=col + 1,
        )


def _scan(lines: list[str], width: int, height: int) -> Point:
    """
    Check every glyph against its position and locate the start square.

    Returns:
        The start square.

    Raises:
        MazeFormatError: On a misplaced glyph, an open outer border, or a
            missing or duplicate start marker.
    """
    last_row = 2 * height
    last_col = 2 * width
    start: Optional[Point] = None
    start_at: Optional[tuple[int, int]] = None

    for row, line in enumerate(lines):
        is_wall_line = row % 2 == 0
        for col, char in enumerate(line):
            if is_wall_line:
                if col % 2 == 0:
                    _expect(char, {CORNER}, "a corner", row, col)
                elif row in (0, last_row):
                    _expect(char, {HORIZONTAL_WALL}, "the outer wall", row, col)
                else:
                    _expect(char, WALL_LINE_GAP_CHARS, "a horizontal wall", row, col)
            elif col % 2 == 0:
                if col in (0, last_col):
                    _expect(char, {VERTICAL_WALL}, "the outer wall", row, col)
                else:
                    _expect(char, PASSAGE_LINE_WALL_CHARS, "a vertical wall", row, col)
            else:
                _expect(char, INTERIOR_CHARS, "a square interior", row, col)
                if char == START:
                    if start is not None:
                        raise MazeFormatError(
                            f"Multiple start positions found: first at line "
                            f"{start_at[0]}, column {start_at[1]}",
                            line=row + 1,
                            column=col + 1,
                        )
                    start = Point(col // 2, height - 1 - row // 2)
                    start_at = (row + 1, col + 1)

    if start is None:
        raise MazeFormatError(f"Maze must have a start position ({START})")

    return start


def _build_walls(maze: Maze, lines: list[str]) -> None:
    """
    Set wall flags from the drawing.

    Each wall glyph is read once and applied to both squares it separates.
    """
    width, height = maze.width, maze.height

    for row in range(0, 2 * height + 1, 2):
        line = lines[row]
        for x in range(width):
            if line[2 * x + 1] != HORIZONTAL_WALL:
                continue
            if row < 2 * height:
                # North side of the square drawn just below this line
                maze.add_wall(Point(x, height - 1 - row // 2), Direction.NORTH)
            else:
                maze.add_wall(Point(x, 0), Direction.SOUTH)

    for row in range(1, 2 * height, 2):
        line = lines[row]
        y = height - 1 - row // 2
        for col in range(0, 2 * width + 1, 2):
            if line[col] != VERTICAL_WALL:
                continue
            if col < 2 * width:
                maze.add_wall(Point(col // 2, y), Direction.WEST)
            else:
                maze.add_wall(Point(width - 1, y), Direction.EAST)


def parse_maze_text(maze_text: str, max_size: Optional[int] = None) -> Maze:
    """
    Parse an ASCII maze drawing into a Maze.

    Args:
        maze_text: Multi-line string holding the drawing.
        max_size: Largest allowed width or height in squares. Defaults to
            the configured max_maze_size; no limit when neither is set.

    Returns:
        A fully populated Maze with no squares marked.

    Raises:
        MazeFormatError: If the text is not a well-formed maze.
    """
    if not maze_text or not maze_text.strip():
        raise MazeFormatError("Maze text is empty")

    if max_size is None:
        max_size = get_settings().max_maze_size

    lines = _split_lines(maze_text)
    width, height = _measure(lines, max_size)
    start = _scan(lines, width, height)

    maze = Maze(width=width, height=height, start=start)
    _build_walls(maze, lines)
    return maze


def load_maze_file(
    file_path: Path | str,
    encoding: Optional[str] = None,
    max_size: Optional[int] = None,
) -> Maze:
    """
    Load and parse a maze file from the filesystem.

    Args:
        file_path: Path to the maze file.
        encoding: Text encoding. Defaults to the configured maze_file_encoding.
        max_size: Largest allowed width or height in squares.

    Returns:
        The parsed Maze.

    Raises:
        MazeFileError: If the file doesn't exist or can't be read.
        MazeFormatError: If the file content is not a well-formed maze.
    """
    file_path = Path(file_path)

    if encoding is None:
        encoding = get_settings().maze_file_encoding

    if not file_path.exists():
        raise MazeFileError(f"Maze file not found: {file_path}")

    if not file_path.is_file():
        raise MazeFileError(f"Path is not a file: {file_path}")

    try:
        maze_text = file_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise MazeFileError(f"Failed to read maze file {file_path}: {e}") from e

    try:
        maze = parse_maze_text(maze_text, max_size=max_size)
    except MazeFormatError as e:
        logger.warning(f"Rejected maze file {file_path}: {e}")
        raise

    logger.info(
        f"Loaded maze {file_path} ({maze.width}x{maze.height}, "
        f"start at ({maze.start.x}, {maze.start.y}))"
    )
    return maze


def validate_maze_text(maze_text: str) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Args:
        maze_text: Multi-line string holding the drawing.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_maze_text(maze_text)
        return True, None
    except MazeFormatError as e:
        return False, str(e)
