"""Pygame-based grid renderer for Game of Life visualization."""

import pygame
from dataclasses import dataclass
from typing import Optional

from life_communities.config import (
    BACKGROUND_COLOR,
    COMMUNITY_COLORS,
    DEAD_CELL_COLOR,
    STATS_PANEL_WIDTH,
    SimulationConfig,
)
from life_communities.models.grid_state import GridSnapshot
from life_communities.renderers.stats_panel import StatsPanel
from life_communities.simulation.communities import label_communities


@dataclass
class RenderResult:
    """Result of a render call with user input information."""

    should_quit: bool = False
    toggle_pause: bool = False
    step_once: bool = False
    reset: bool = False
    speed_up: bool = False
    speed_down: bool = False


class PygameGridRenderer:
    """
    Renders the Game of Life grid with live cells colored by community.

    Features:
    - One color per community, cycling through the palette
    - Stats panel sidebar
    - Pause overlay
    """

    def __init__(self, config: SimulationConfig):
        """
        Initialize the pygame renderer.

        Args:
            config: Simulation configuration with the grid size filled in.
        """
        self.config = config
        self.cell_size = config.cell_size

        pygame.init()
        pygame.display.set_caption("Game of Life Communities")

        self.screen = pygame.display.set_mode(
            (config.window_width, config.window_height)
        )

        if config.show_stats:
            self.stats_panel: Optional[StatsPanel] = StatsPanel(
                self.screen,
                x_offset=config.grid_pixel_width,
                width=STATS_PANEL_WIDTH,
                height=config.window_height,
            )
        else:
            self.stats_panel = None

        self.clock = pygame.time.Clock()

    def render(self, snapshot: GridSnapshot, paused: bool = False) -> RenderResult:
        """
        Render the complete visualization frame.

        Args:
            snapshot: Generation to draw.
            paused: Whether simulation is paused.

        Returns:
            RenderResult with user input flags.
        """
        result = self.poll_events()

        self.screen.fill(BACKGROUND_COLOR)

        labels = label_communities(snapshot)
        self._draw_cells(labels)

        if self.stats_panel:
            self.stats_panel.render(snapshot, int(labels.max()), paused)

        if paused:
            self._draw_pause_overlay()

        pygame.display.flip()
        self.clock.tick(self.config.fps)

        return result

    def poll_events(self) -> RenderResult:
        """Translate pending pygame events into a RenderResult."""
        result = RenderResult()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                result.should_quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE or event.key == pygame.K_q:
                    result.should_quit = True
                elif event.key == pygame.K_SPACE:
                    result.toggle_pause = True
                elif event.key == pygame.K_n or event.key == pygame.K_RIGHT:
                    result.step_once = True
                elif event.key == pygame.K_r:
                    result.reset = True
                elif event.key == pygame.K_UP or event.key == pygame.K_EQUALS:
                    result.speed_up = True
                elif event.key == pygame.K_DOWN or event.key == pygame.K_MINUS:
                    result.speed_down = True
        return result

    def _draw_pause_overlay(self) -> None:
        """Draw a semi-transparent pause indicator."""
        overlay = pygame.Surface(
            (self.config.grid_pixel_width, self.config.grid_pixel_height),
            pygame.SRCALPHA,
        )
        overlay.fill((0, 0, 0, 100))
        self.screen.blit(overlay, (0, 0))

        font = pygame.font.SysFont("monospace", 24, bold=True)
        text = font.render("PAUSED", True, (255, 255, 255))
        text_rect = text.get_rect(
            center=(
                self.config.grid_pixel_width // 2,
                self.config.grid_pixel_height // 2,
            )
        )
        self.screen.blit(text, text_rect)

    @staticmethod
    def cell_color(label: int) -> tuple:
        """Color for a cell with the given community label (0 = dead)."""
        if label == 0:
            return DEAD_CELL_COLOR
        return COMMUNITY_COLORS[(label - 1) % len(COMMUNITY_COLORS)]

    def _draw_cells(self, labels) -> None:
        """Draw all cells colored by community."""
        rows, cols = labels.shape
        for row in range(rows):
            for col in range(cols):
                x = col * self.cell_size
                y = row * self.cell_size
                # 1px gap for grid effect
                pygame.draw.rect(
                    self.screen,
                    self.cell_color(int(labels[row, col])),
                    (x, y, self.cell_size - 1, self.cell_size - 1),
                )

    def cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
