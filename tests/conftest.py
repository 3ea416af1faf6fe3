"""Pytest configuration and fixtures."""

import os
from pathlib import Path
from typing import Callable, Generator

import pytest

from mazemap.config import get_settings
from mazemap.core import maze_library
from mazemap.core.maze_library import MazeLibrary

from .sample_mazes import CORRIDOR_MAZE, SIMPLE_MAZE


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch) -> Generator[None, None, None]:
    """Isolate each test from MAZEMAP_* variables and cached settings."""
    for key in list(os.environ):
        if key.upper().startswith("MAZEMAP_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def fresh_shared_library(monkeypatch) -> None:
    """Reset the process-wide maze library between tests."""
    monkeypatch.setattr(maze_library, "_maze_library", None)


@pytest.fixture
def write_maze(tmp_path) -> Callable[..., Path]:
    """Write maze text to a file and return its path."""

    def _write(text: str, name: str = "maze.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def simple_library(write_maze) -> MazeLibrary:
    """Library with SIMPLE_MAZE loaded."""
    library = MazeLibrary()
    library.read_maze_map(write_maze(SIMPLE_MAZE))
    return library


@pytest.fixture
def corridor_library(write_maze) -> MazeLibrary:
    """Library with CORRIDOR_MAZE loaded."""
    library = MazeLibrary()
    library.read_maze_map(write_maze(CORRIDOR_MAZE))
    return library
