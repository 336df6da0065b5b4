"""
Exceptions raised by the maze search package.
"""


class MazeSearchError(Exception):
    """Base class for maze search errors."""


class StaleGridError(MazeSearchError):
    """Raised when a search starts on a maze that still holds discovery state."""


class MazeGenerationError(MazeSearchError):
    """Raised when a random maze cannot satisfy its start/target constraints."""
