"""
Configuration constants for the Maze Search project.

All defaults and tunable parameters are defined here.
Values can be overridden from the environment (or a local .env file).
"""

import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Grid Configuration
# =============================================================================

# Default maze dimensions
DEFAULT_ROWS = int(os.environ.get("MAZE_ROWS", "30"))
DEFAULT_COLS = int(os.environ.get("MAZE_COLS", "30"))

# Probability that any individual cell is an obstacle
DEFAULT_DENSITY = float(os.environ.get("MAZE_DENSITY", "0.2"))

# Start and target must be at least rows // MIN_SEPARATION_DIVISOR apart
MIN_SEPARATION_DIVISOR = 2

# Rejection sampling gives up after this many draws per endpoint
MAX_SAMPLING_ATTEMPTS = 100_000

# Characters used by Maze.from_layout()
OBSTACLE_CHARS = frozenset("#X")
FREE_CHARS = frozenset(". ")

# =============================================================================
# Search Configuration
# =============================================================================

# Frontier strategy used when none is given
DEFAULT_ALGORITHM = os.environ.get("MAZE_ALGORITHM", "bfs")

# Returned by rope_distance() when two cells share no discovered ancestor
NOT_CONNECTED = -1

# =============================================================================
# Display Configuration
# =============================================================================

# Milliseconds to sleep between frontier pops when displaying
DEFAULT_DELAY_MS = 0

# Pixel size of one cell in plotly figures
FIGURE_CELL_SCALE = 20

# Colors follow the classic maze display: gray free, black wall,
# yellow discovered, red tree, blue start/path, magenta current
COLOR_FREE = "#9e9e9e"
COLOR_OBSTACLE = "#000000"
COLOR_DISCOVERED = "#ffeb3b"
COLOR_PATH_CELL = "#4caf50"
COLOR_TREE_EDGE = "#e53935"
COLOR_PATH_LINE = "#1e88e5"
COLOR_START = "#1e88e5"
COLOR_TARGET = "#e53935"
COLOR_CURRENT = "#d500f9"

# ASCII rendering symbols
ASCII_OBSTACLE = "#"
ASCII_FREE = " "
ASCII_DISCOVERED = "."
ASCII_PATH = "*"
ASCII_START = "S"
ASCII_TARGET = "T"
ASCII_CURRENT = "@"

# =============================================================================
# Benchmark Configuration
# =============================================================================

# Independent mazes generated per success-rate estimate
DEFAULT_TRIALS = 50

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_grid_config(rows: int, cols: int, density: float) -> None:
    """Raise ValueError if the maze dimensions or density are unusable."""
    if rows <= 0 or cols <= 0:
        raise ValueError(f"Maze must have positive dimensions, got {rows}x{cols}")
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"Density must be within [0, 1], got {density}")
