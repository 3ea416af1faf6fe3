"""Maze schemas for snapshots of the loaded maze."""

from pydantic import BaseModel, ConfigDict, Field


class MazePosition(BaseModel):
    """Schema for a position in the maze."""

    model_config = ConfigDict(from_attributes=True)

    x: int
    y: int


class MazeInfo(BaseModel):
    """Schema for maze metadata."""

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    start: MazePosition
    marked_count: int = Field(0, ge=0)
