"""Exceptions raised by the maze library."""

from typing import Optional


class MazeError(Exception):
    """Base class for all maze library errors."""

    pass


class MazeFileError(MazeError):
    """Exception raised when a maze file cannot be opened or read."""

    pass


class MazeFormatError(MazeError):
    """Exception raised when maze text does not describe a well-formed maze."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        if line is not None and column is not None:
            message = f"{message} (line {line}, column {column})"
        elif line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)
        self.line = line
        self.column = column


class MazeRangeError(MazeError, IndexError):
    """Exception raised when a square outside the maze is queried or mutated."""

    def __init__(self, point, width: int, height: int):
        super().__init__(
            f"Point ({point.x}, {point.y}) is outside the maze "
            f"(width={width}, height={height})"
        )
        self.point = point


class MazeNotLoadedError(MazeError, RuntimeError):
    """Exception raised when the maze is used before a map has been loaded."""

    pass
