"""Stats panel renderer for the simulation sidebar."""

import pygame
from typing import Optional

from life_communities.config import (
    COMMUNITY_COLORS,
    EXTINCT_COLOR,
    SEPARATOR_COLOR,
    STATS_PANEL_BG,
    TEXT_COLOR,
    TEXT_HIGHLIGHT_COLOR,
)
from life_communities.models.grid_state import GridSnapshot


class StatsPanel:
    """
    Renders the statistics sidebar panel.

    Displays:
    - Current generation and grid size
    - Live cell and community counts
    - Keyboard controls
    """

    def __init__(
        self,
        screen: pygame.Surface,
        x_offset: int,
        width: int,
        height: int,
    ):
        """
        Initialize the stats panel.

        Args:
            screen: Pygame surface to draw on.
            x_offset: X position where panel starts.
            width: Width of the panel.
            height: Height of the panel.
        """
        self.screen = screen
        self.x = x_offset
        self.width = width
        self.height = height

        pygame.font.init()
        self.title_font = pygame.font.SysFont("monospace", 16, bold=True)
        self.header_font = pygame.font.SysFont("monospace", 14, bold=True)
        self.font = pygame.font.SysFont("monospace", 12)

        # Layout constants
        self.padding = 10
        self.line_height = 18
        self.section_gap = 10

    def render(
        self,
        snapshot: GridSnapshot,
        communities: int,
        paused: bool = False,
    ) -> int:
        """
        Render the stats panel.

        Args:
            snapshot: Generation being displayed.
            communities: Community count for that generation.
            paused: Whether the simulation is paused.

        Returns:
            Y position below the last line drawn.
        """
        pygame.draw.rect(
            self.screen,
            STATS_PANEL_BG,
            (self.x, 0, self.width, self.height),
        )
        pygame.draw.line(
            self.screen,
            SEPARATOR_COLOR,
            (self.x, 0),
            (self.x, self.height),
            2,
        )

        y = self.padding

        y = self._draw_text(
            "═══ Game of Life ═══",
            y,
            self.title_font,
            TEXT_HIGHLIGHT_COLOR,
            center=True,
        )
        y += self.section_gap

        if snapshot.alive_count == 0:
            y = self._draw_text("Status: EXTINCT", y, self.header_font, EXTINCT_COLOR)
        elif paused:
            y = self._draw_text("Status: PAUSED", y, self.header_font, EXTINCT_COLOR)
        else:
            y = self._draw_text("Status: RUNNING", y, self.header_font, (0, 255, 100))
        y += self.section_gap // 2

        y = self._draw_text(f"Generation: {snapshot.generation}", y, self.header_font)
        y = self._draw_text(f"Grid: {snapshot.rows} x {snapshot.cols}", y)
        y += self.section_gap

        y = self._draw_separator(y)
        y += self.section_gap // 2

        y = self._draw_text(f"Live Cells:  {snapshot.alive_count}", y)
        y = self._draw_text(
            f"Communities: {communities}",
            y,
            color=COMMUNITY_COLORS[0] if communities else TEXT_COLOR,
        )
        y += self.section_gap

        y = self._draw_separator(y)
        y += self.section_gap // 2

        y = self._draw_text(
            "─── Controls ───", y, self.header_font, TEXT_HIGHLIGHT_COLOR
        )
        y = self._draw_text("  SPACE: Pause/Resume", y)
        y = self._draw_text("  N/→: Step once", y)
        y = self._draw_text("  R: Reset", y)
        y = self._draw_text("  ↑/↓: Speed +/-", y)
        y = self._draw_text("  Q/ESC: Quit", y)
        return y

    def _draw_text(
        self,
        text: str,
        y: int,
        font: Optional[pygame.font.Font] = None,
        color: tuple = TEXT_COLOR,
        center: bool = False,
    ) -> int:
        """
        Draw text at the specified position.

        Returns:
            Y position after this text (for chaining).
        """
        if font is None:
            font = self.font

        surface = font.render(text, True, color)

        if center:
            x = self.x + (self.width - surface.get_width()) // 2
        else:
            x = self.x + self.padding

        self.screen.blit(surface, (x, y))
        return y + self.line_height

    def _draw_separator(self, y: int) -> int:
        """Draw a horizontal separator line."""
        pygame.draw.line(
            self.screen,
            SEPARATOR_COLOR,
            (self.x + self.padding, y),
            (self.x + self.width - self.padding, y),
            1,
        )
        return y + 5
