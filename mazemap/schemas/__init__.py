# Schemas module
from .maze import MazeInfo, MazePosition

__all__ = ["MazeInfo", "MazePosition"]
