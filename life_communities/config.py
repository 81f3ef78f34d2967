"""Configuration and constants for the Game of Life community simulator."""

from dataclasses import dataclass
from typing import Optional, Tuple

# ==============================================================================
# Color Scheme (Colorblind-friendly)
# ==============================================================================

# Community colors - live cells are tinted by the community they belong to
COMMUNITY_COLORS: list[Tuple[int, int, int]] = [
    (100, 160, 255),  # Bright Blue
    (80, 200, 120),  # Bright Green
    (255, 210, 80),  # Bright Yellow
    (255, 100, 100),  # Bright Red
    (190, 130, 255),  # Bright Purple
    (80, 220, 220),  # Bright Cyan
]

DEAD_CELL_COLOR: Tuple[int, int, int] = (25, 25, 35)

# UI Colors
BACKGROUND_COLOR: Tuple[int, int, int] = (20, 20, 20)
STATS_PANEL_BG: Tuple[int, int, int] = (30, 30, 40)
SEPARATOR_COLOR: Tuple[int, int, int] = (60, 60, 70)
TEXT_COLOR: Tuple[int, int, int] = (220, 220, 220)
TEXT_HIGHLIGHT_COLOR: Tuple[int, int, int] = (255, 255, 255)
EXTINCT_COLOR: Tuple[int, int, int] = (255, 200, 0)

# ==============================================================================
# Text Rendering
# ==============================================================================

ALIVE_CHAR: str = "O"
DEAD_CHAR: str = "."

# ==============================================================================
# Layout Constants
# ==============================================================================

STATS_PANEL_WIDTH: int = 240
STATS_PANEL_MIN_HEIGHT: int = 320
DEFAULT_CELL_SIZE: int = 20
MIN_CELL_SIZE: int = 4
MAX_CELL_SIZE: int = 40

# ==============================================================================
# Animation Constants
# ==============================================================================

DEFAULT_FPS: int = 4  # Target generations per second in window mode
MIN_FPS: int = 1
MAX_FPS: int = 60
DEFAULT_GENERATIONS: int = 4

DISPLAY_MODES: Tuple[str, ...] = ("text", "window", "none")


# ==============================================================================
# Configuration Dataclass
# ==============================================================================


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""

    # Source of the initial grid; None selects the built-in 5x5 seed
    grid_file: Optional[str] = None

    # Number of generations to advance
    generations: int = DEFAULT_GENERATIONS

    # Display settings
    display: str = "text"
    cell_size: int = DEFAULT_CELL_SIZE
    fps: int = DEFAULT_FPS
    show_stats: bool = True

    # Grid dimensions, filled in once the grid is loaded
    grid_rows: int = 0
    grid_cols: int = 0

    def __post_init__(self):
        if self.display not in DISPLAY_MODES:
            raise ValueError(
                f"display must be one of {', '.join(DISPLAY_MODES)}, got {self.display!r}"
            )
        if self.generations < 0:
            raise ValueError("generations must be non-negative")
        self.cell_size = max(MIN_CELL_SIZE, min(MAX_CELL_SIZE, self.cell_size))
        self.fps = max(MIN_FPS, min(MAX_FPS, self.fps))

    @property
    def grid_pixel_width(self) -> int:
        """Width of the grid area in pixels."""
        return self.grid_cols * self.cell_size

    @property
    def grid_pixel_height(self) -> int:
        """Height of the grid area in pixels."""
        return self.grid_rows * self.cell_size

    @property
    def window_width(self) -> int:
        """Total window width including stats panel."""
        if self.show_stats:
            return self.grid_pixel_width + STATS_PANEL_WIDTH
        return self.grid_pixel_width

    @property
    def window_height(self) -> int:
        """Total window height."""
        if self.show_stats:
            return max(self.grid_pixel_height, STATS_PANEL_MIN_HEIGHT)
        return self.grid_pixel_height
